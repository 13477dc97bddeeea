"""Validate entries command."""

from typing import Optional

import click

from cab_billing.cli.error_handlers import (
    ConfigurationError,
    DataValidationError,
    with_error_handling,
)
from cab_billing.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
    format_warning,
)
from cab_billing.config.settings import get_config
from cab_billing.readers.entry_reader import EntryReader
from cab_billing.validators.entry_validator import EntryValidator
from cab_billing.validators.validation_report import ValidationSeverity

MAX_ISSUES_PER_SEVERITY = 20

_SEVERITY_FORMATTERS = {
    ValidationSeverity.ERROR: format_error,
    ValidationSeverity.WARNING: format_warning,
    ValidationSeverity.INFO: format_info,
}


@click.command(name="validate")
@click.option(
    "--entries",
    "entries_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Entries CSV (defaults to ENTRIES_FILE)",
)
@click.option(
    "--severity",
    type=click.Choice(["error", "warning", "info"], case_sensitive=False),
    default="warning",
    help="Minimum severity level to display (default: warning)",
)
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def validate_entries(entries_path: Optional[str], severity: str, debug: bool):
    """Validate ride entries before invoicing.

    Checks for:
    - Missing company or date
    - Invalid or inconsistent odometer readings
    - Unreadable times and unknown slots

    Returns non-zero exit code if errors are found.

    Example:
        cab-billing validate --entries entries.csv
        cab-billing validate --entries entries.csv --severity info
    """
    with with_error_handling(debug):
        entries_path = entries_path or get_config().entries_file
        if not entries_path:
            raise ConfigurationError(
                "No entries file given",
                "Pass --entries or set ENTRIES_FILE",
            )

        click.echo(format_info(f"Validating entries in {entries_path}..."))

        records = EntryReader().read_records(entries_path)
        report = EntryValidator().validate_records(records)
        min_severity = ValidationSeverity[severity.upper()]

        click.echo()
        click.echo("=" * 60)
        click.echo("Validation Summary")
        click.echo("=" * 60)
        click.echo(f"Entries checked:  {len(records)}")
        click.echo(f"Errors:           {report.error_count}")
        click.echo(f"Warnings:         {report.warning_count}")
        click.echo(f"Info:             {report.info_count}")

        for level in sorted(ValidationSeverity, reverse=True):
            if level < min_severity:
                continue
            issues = [issue for issue in report.issues if issue.severity == level]
            if not issues:
                continue

            click.echo()
            click.echo(f"{level.name}S ({len(issues)}):")
            formatter = _SEVERITY_FORMATTERS[level]
            for issue in issues[:MAX_ISSUES_PER_SEVERITY]:
                click.echo(formatter(f"  {issue}"))
            if len(issues) > MAX_ISSUES_PER_SEVERITY:
                click.echo(f"  ... and {len(issues) - MAX_ISSUES_PER_SEVERITY} more")

        click.echo()
        if report.has_errors():
            raise DataValidationError(
                f"Validation failed with {report.error_count} error(s)",
                "Fix the listed entries and run validate again",
            )
        if report.warning_count:
            click.echo(
                format_warning(
                    f"Validation completed with {report.warning_count} warning(s)"
                )
            )
        else:
            click.echo(format_success("Validation passed! No issues found."))
