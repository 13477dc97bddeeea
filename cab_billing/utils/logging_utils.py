"""Structured logging utilities with context support."""

import functools
import logging
import threading
from typing import Any, Callable, Dict, Optional

_thread_local = threading.local()


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the context fields active in this thread."""
    return dict(getattr(_thread_local, "context", {}))


class LogContext:
    """
    Context manager for adding structured fields to log records.

    Fields live in thread-local storage and are attached to every record
    emitted inside the block by ContextFilter.

    Example:
        with LogContext(company_name="Acme Corp", month="2026-02"):
            logger.info("Building invoice")
            # Record carries company_name and month fields
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.previous_context: Optional[Dict[str, Any]] = None

    def __enter__(self) -> "LogContext":
        self.previous_context = get_log_context()
        _thread_local.context = {**self.previous_context, **self.fields}
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        _thread_local.context = self.previous_context or {}


class ContextFilter(logging.Filter):
    """Logging filter that copies LogContext fields onto log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in get_log_context().items():
            setattr(record, key, value)
        return True


def log_function_call(
    func: Optional[Callable] = None, *, include_args: bool = False, level: str = "DEBUG"
) -> Callable:
    """
    Decorator to log function entry, exit and exceptions.

    Args:
        func: Function to decorate (when used without arguments)
        include_args: Whether to include function arguments in logs
        level: Log level for entry and exit messages

    Example:
        @log_function_call
        def bill_entries(entries, rules):
            ...

        @log_function_call(include_args=True, level="INFO")
        def build_invoice(company_name, month):
            ...
    """

    def decorator(f: Callable) -> Callable:
        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            logger = logging.getLogger(f.__module__)
            log_level = getattr(logging, level.upper())

            if include_args:
                signature = ", ".join(
                    [repr(a) for a in args] + [f"{k}={v!r}" for k, v in kwargs.items()]
                )
                logger.log(log_level, f"Entering {f.__name__} with args: {signature}")
            else:
                logger.log(log_level, f"Entering {f.__name__}")

            try:
                result = f(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Exception in {f.__name__}: {type(e).__name__}: {e}",
                    exc_info=True,
                )
                raise

            logger.log(log_level, f"Exiting {f.__name__}")
            return result

        return wrapper

    if func is None:
        return decorator
    return decorator(func)
