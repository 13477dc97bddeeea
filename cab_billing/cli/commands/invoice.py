"""Generate monthly invoice command."""

from decimal import Decimal, InvalidOperation
from typing import Optional

import click

from cab_billing.aggregators.invoice_aggregator import InvoiceAggregator, parse_month
from cab_billing.cli.error_handlers import (
    ConfigurationError,
    DataValidationError,
    with_error_handling,
)
from cab_billing.cli.utils.formatters import (
    format_currency,
    format_info,
    format_success,
    format_table,
)
from cab_billing.config.settings import get_config
from cab_billing.models.invoice import Invoice
from cab_billing.readers.entry_reader import EntryReader
from cab_billing.readers.pricing_reader import PricingReader
from cab_billing.utils.logging_utils import LogContext


def _tax_label(tax_rate: Decimal) -> str:
    percentage = (tax_rate * 100).normalize()
    return f"Tax ({percentage:f}% GST)"


def _print_invoice(invoice: Invoice, tax_rate: Decimal, symbol: str) -> None:
    click.echo()
    if not invoice.line_items:
        click.echo(format_info("No entries for this period"))
    else:
        headers = [
            "Date",
            "Entry",
            "Slot",
            "Cab",
            "Vehicle",
            "Extras (K/H/T)",
            "Amount",
        ]
        rows = [
            [
                item.date.isoformat(),
                item.entry_id or "-",
                item.slot or "-",
                item.cab_type or "-",
                item.vehicle_number or "-",
                f"{item.extra_kms}/{item.extra_hours}/{item.tolls}",
                format_currency(item.amount, symbol),
            ]
            for item in invoice.line_items
        ]
        click.echo(format_table(headers, rows))

    click.echo()
    click.echo(f"{'Subtotal':<20}{format_currency(invoice.subtotal, symbol):>14}")
    click.echo(f"{_tax_label(tax_rate):<20}{format_currency(invoice.tax, symbol):>14}")
    click.echo(f"{'Total':<20}{format_currency(invoice.total, symbol):>14}")


@click.command(name="invoice")
@click.option(
    "--entries",
    "entries_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Entries CSV (defaults to ENTRIES_FILE)",
)
@click.option(
    "--pricing",
    "pricing_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Pricing CSV (defaults to PRICING_FILE)",
)
@click.option("--company", type=str, required=True, help="Company to invoice")
@click.option("--month", type=str, required=True, help="Billing month (YYYY-MM)")
@click.option(
    "--tax-rate",
    type=str,
    default=None,
    help="Tax rate as a fraction, e.g. 0.18 (defaults to TAX_RATE)",
)
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def generate_invoice(
    entries_path: Optional[str],
    pricing_path: Optional[str],
    company: str,
    month: str,
    tax_rate: Optional[str],
    debug: bool,
):
    """Build the monthly invoice of a company.

    Already billed entries are left out. Entries without a recorded rate
    are priced from the pricing file by company, cab type and slot.

    Example:
        cab-billing invoice --entries entries.csv --pricing pricing.csv \\
            --company "Acme Corp" --month 2026-02
    """
    with with_error_handling(debug):
        settings = get_config()

        try:
            parse_month(month)
        except ValueError as e:
            raise DataValidationError(str(e), "Use the YYYY-MM format, e.g. 2026-02")

        entries_path = entries_path or settings.entries_file
        if not entries_path:
            raise ConfigurationError(
                "No entries file given",
                "Pass --entries or set ENTRIES_FILE",
            )

        if tax_rate is None:
            rate = settings.tax_rate
        else:
            try:
                rate = Decimal(tax_rate)
            except InvalidOperation:
                raise DataValidationError(f"Invalid tax rate: {tax_rate}")

        try:
            aggregator = InvoiceAggregator(tax_rate=rate)
        except ValueError as e:
            raise DataValidationError(str(e))

        pricing_path = pricing_path or settings.pricing_file

        with LogContext(company_name=company, month=month):
            click.echo(format_info(f"Generating invoice for {company} ({month})..."))

            entries = EntryReader().read_entries(entries_path)
            rules = PricingReader().read_pricing(pricing_path) if pricing_path else []
            if not rules:
                click.echo(
                    format_info("No pricing loaded, using rates recorded on entries")
                )

            invoice = aggregator.build_invoice(entries, rules, company, month)

        _print_invoice(invoice, aggregator.tax_rate, settings.currency_symbol)
        click.echo()
        click.echo(
            format_success(
                f"Invoice ready: {invoice.entry_count} entries, "
                f"total {format_currency(invoice.total, settings.currency_symbol)}"
            )
        )
