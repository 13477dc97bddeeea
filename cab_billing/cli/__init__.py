"""Cab Billing CLI.

This module provides a command-line interface for the cab billing system.
It includes commands for billing a single ride, validating entries and
generating monthly company invoices.
"""

import click

from cab_billing import __version__
from cab_billing.cli.commands.compute import compute_entry
from cab_billing.cli.commands.invoice import generate_invoice
from cab_billing.cli.commands.validate import validate_entries
from cab_billing.cli.error_handlers import with_error_handling
from cab_billing.config.logging_config import LoggingConfig, configure_logging
from cab_billing.config.settings import get_config


@click.group(help="Cab Billing CLI - Bill ride entries and generate monthly invoices")
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Cab Billing CLI main entry point."""
    with with_error_handling(verbose):
        configure_logging(LoggingConfig.from_settings(get_config(), verbose=verbose))


# Register commands
cli.add_command(compute_entry)
cli.add_command(generate_invoice)
cli.add_command(validate_entries)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
