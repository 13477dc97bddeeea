"""CLI commands."""

from cab_billing.cli.commands.compute import compute_entry
from cab_billing.cli.commands.invoice import generate_invoice
from cab_billing.cli.commands.validate import validate_entries

__all__ = ["compute_entry", "generate_invoice", "validate_entries"]
