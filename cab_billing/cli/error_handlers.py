"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from cab_billing.cli.utils.formatters import format_error, format_warning


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""


class DataValidationError(CLIError):
    """Error related to entry or pricing data quality."""


class ProcessingError(CLIError):
    """Error raised while billing entries or building an invoice."""


_CLI_ERROR_LABELS = (
    (ConfigurationError, "Configuration Error", 1),
    (DataValidationError, "Data Validation Error", 2),
    (ProcessingError, "Processing Error", 3),
)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Report an error to the user and choose the exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code: 1 configuration, 2 data validation, 3 processing,
        4 missing file, 5 invalid settings, 130 cancelled, 255 unexpected
    """
    for error_type, label, exit_code in _CLI_ERROR_LABELS:
        if isinstance(error, error_type):
            click.echo(format_error(f"{label}: {error.message}"))
            if error.recovery_hint:
                click.echo(format_warning(f"Hint: {error.recovery_hint}"))
            return exit_code

    if isinstance(error, FileNotFoundError):
        click.echo(format_error(f"File Not Found: {error}"))
        click.echo(format_warning("Hint: Check the --entries / --pricing paths"))
        return 4

    if isinstance(error, ValidationError):
        click.echo(format_error("Invalid Settings"))
        click.echo(str(error))
        click.echo(format_warning("Hint: Check your environment variables or .env"))
        return 5

    if isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130

    click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
    click.echo(str(error))

    if debug:
        click.echo("\nFull stack trace:")
        click.echo(
            "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            )
        )
    else:
        click.echo(format_warning("\nRun with --debug flag for full stack trace"))

    return 255


class with_error_handling:
    """
    Context manager adding standardized error handling to CLI commands.

    Any exception raised inside the block is reported through
    handle_cli_error and turned into a process exit with its code. Click's
    own usage errors and exits pass through untouched.

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                ...
    """

    def __init__(self, debug: bool = False):
        self.show_debug = debug

    def __enter__(self) -> "with_error_handling":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_val is None:
            return False
        if isinstance(exc_val, (click.ClickException, click.exceptions.Exit)):
            return False
        exit_code = handle_cli_error(exc_val, self.show_debug)
        sys.exit(exit_code)
