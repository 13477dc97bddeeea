"""Unit tests for CLI error handling."""

import click
import pytest
from pydantic import ValidationError

from cab_billing.cli.error_handlers import (
    CLIError,
    ConfigurationError,
    DataValidationError,
    ProcessingError,
    handle_cli_error,
    with_error_handling,
)
from cab_billing.models.pricing import PricingRule


def make_validation_error():
    try:
        PricingRule(company_id="CMP-001", cab_type="SUV", slot="4hr", rate="abc")
    except ValidationError as e:
        return e
    raise AssertionError("PricingRule accepted an invalid rate")


class TestCLIError:
    """Test CLI error classes."""

    def test_message_and_hint(self):
        error = ConfigurationError("No entries file given", "Pass --entries")

        assert isinstance(error, CLIError)
        assert error.message == "No entries file given"
        assert error.recovery_hint == "Pass --entries"
        assert str(error) == "No entries file given"

    def test_hint_is_optional(self):
        assert ProcessingError("Billing failed").recovery_hint is None


class TestHandleCLIError:
    """Test exit codes and messages."""

    @pytest.mark.parametrize(
        "error,exit_code,label",
        [
            (ConfigurationError("bad config"), 1, "Configuration Error: bad config"),
            (DataValidationError("bad data"), 2, "Data Validation Error: bad data"),
            (ProcessingError("bad run"), 3, "Processing Error: bad run"),
            (FileNotFoundError("entries.csv"), 4, "File Not Found: entries.csv"),
            (click.Abort(), 130, "Operation cancelled by user"),
            (RuntimeError("surprise"), 255, "Unexpected Error: RuntimeError"),
        ],
    )
    def test_exit_codes(self, capsys, error, exit_code, label):
        assert handle_cli_error(error) == exit_code
        assert label in capsys.readouterr().out

    def test_invalid_settings(self, capsys):
        assert handle_cli_error(make_validation_error()) == 5
        assert "Invalid Settings" in capsys.readouterr().out

    def test_recovery_hint_shown(self, capsys):
        handle_cli_error(ConfigurationError("No entries file given", "Pass --entries"))
        assert "Hint: Pass --entries" in capsys.readouterr().out

    def test_debug_shows_traceback(self, capsys):
        try:
            raise RuntimeError("surprise")
        except RuntimeError as e:
            handle_cli_error(e, debug=True)

        output = capsys.readouterr().out
        assert "Full stack trace" in output
        assert "Traceback" in output

    def test_without_debug_suggests_flag(self, capsys):
        handle_cli_error(RuntimeError("surprise"))
        assert "Run with --debug flag" in capsys.readouterr().out


class TestWithErrorHandling:
    """Test the error handling context manager."""

    def test_no_error(self):
        with with_error_handling():
            value = 1
        assert value == 1

    def test_error_exits_with_code(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            with with_error_handling():
                raise DataValidationError("Validation failed with 1 error(s)")

        assert exc_info.value.code == 2
        assert "Validation failed with 1 error(s)" in capsys.readouterr().out

    def test_click_exceptions_pass_through(self):
        with pytest.raises(click.BadParameter):
            with with_error_handling():
                raise click.BadParameter("bad value")
