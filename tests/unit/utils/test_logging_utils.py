"""Unit tests for structured logging utilities."""

import logging

import pytest

from cab_billing.utils.logging_utils import (
    ContextFilter,
    LogContext,
    get_log_context,
    log_function_call,
)


class TestLogContext:
    """Test LogContext context manager."""

    def test_sets_and_restores_context(self):
        assert get_log_context() == {}

        with LogContext(company_name="Acme Corp"):
            assert get_log_context() == {"company_name": "Acme Corp"}

        assert get_log_context() == {}

    def test_nested_contexts_merge(self):
        with LogContext(company_name="Acme Corp"):
            with LogContext(month="2026-02"):
                assert get_log_context() == {
                    "company_name": "Acme Corp",
                    "month": "2026-02",
                }
            assert get_log_context() == {"company_name": "Acme Corp"}

    def test_restores_after_exception(self):
        with pytest.raises(RuntimeError):
            with LogContext(month="2026-02"):
                raise RuntimeError("boom")

        assert get_log_context() == {}

    def test_returned_context_is_a_copy(self):
        with LogContext(month="2026-02"):
            get_log_context()["month"] = "changed"
            assert get_log_context()["month"] == "2026-02"


class TestContextFilter:
    """Test ContextFilter."""

    def test_adds_fields_to_record(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", (), None)

        with LogContext(company_name="Acme Corp"):
            assert ContextFilter().filter(record) is True

        assert record.company_name == "Acme Corp"


class TestLogFunctionCall:
    """Test log_function_call decorator."""

    def test_logs_entry_and_exit(self, caplog):
        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(1, 2) == 3

        assert "Entering add" in caplog.text
        assert "Exiting add" in caplog.text

    def test_include_args_and_level(self, caplog):
        @log_function_call(include_args=True, level="INFO")
        def bill(entry_id, month=None):
            return entry_id

        with caplog.at_level(logging.INFO):
            bill("ENT-1", month="2026-02")

        assert "Entering bill with args: 'ENT-1', month='2026-02'" in caplog.text
        assert all(r.levelno == logging.INFO for r in caplog.records)

    def test_logs_and_reraises_exception(self, caplog):
        @log_function_call
        def fail():
            raise ValueError("bad data")

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(ValueError):
                fail()

        assert "Exception in fail: ValueError: bad data" in caplog.text
        assert caplog.records[-1].levelno == logging.ERROR

    def test_preserves_metadata(self):
        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
