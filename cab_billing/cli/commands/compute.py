"""Compute entry billing command."""

import json
from typing import Optional

import click

from cab_billing.calculators.billing_calculator import BillingResult, compute_billing
from cab_billing.cli.error_handlers import with_error_handling
from cab_billing.cli.utils.formatters import format_currency, format_info, format_table
from cab_billing.config.settings import get_config
from cab_billing.models.entry import BillingInput


def _display(value: object) -> str:
    return "-" if value is None else str(value)


def _breakdown_rows(result: BillingResult, symbol: str):
    limits = result.limits
    allowance = f"{limits.hours} h / {limits.kms} km" if limits else "none"
    return [
        ["Slot allowance", allowance],
        ["Travelled minutes", _display(result.travelled_minutes)],
        ["Travelled km", _display(result.travelled_kms)],
        ["Extra hours", result.extra_hours],
        ["Extra km", result.extra_kms],
        ["Base rate", format_currency(result.rate, symbol)],
        ["Extra time cost", format_currency(result.extra_time_cost, symbol)],
        ["Extra km cost", format_currency(result.extra_kms_cost, symbol)],
        ["Tolls", format_currency(result.tolls, symbol)],
        ["Total", format_currency(result.total, symbol)],
    ]


@click.command(name="compute")
@click.option("--slot", type=str, default="", help="Slot name, e.g. 4hr or 8hr")
@click.option("--start-time", default=None, help="Start time (HH:MM or h:mm AM/PM)")
@click.option("--end-time", default=None, help="End time (HH:MM or h:mm AM/PM)")
@click.option("--odometer-start", default=None, help="Odometer reading at start")
@click.option("--odometer-end", default=None, help="Odometer reading at end")
@click.option("--rate", type=str, default=None, help="Base fare for the slot")
@click.option("--extra-per-hour", type=str, default=None, help="Price per extra hour")
@click.option("--extra-per-km", type=str, default=None, help="Price per extra km")
@click.option("--tolls", type=str, default=None, help="Toll charges")
@click.option("--as-json", is_flag=True, help="Print the stored entry fields as JSON")
@click.option("--debug", is_flag=True, help="Show full stack trace on errors")
def compute_entry(
    slot: str,
    start_time: Optional[str],
    end_time: Optional[str],
    odometer_start: Optional[str],
    odometer_end: Optional[str],
    rate: Optional[str],
    extra_per_hour: Optional[str],
    extra_per_km: Optional[str],
    tolls: Optional[str],
    as_json: bool,
    debug: bool,
):
    """Compute the billing breakdown of a single ride.

    Values that cannot be read (e.g. an odometer of "n/a") are treated as
    missing, exactly as the entry forms do.

    Example:
        cab-billing compute --slot 4hr --start-time 09:00 --end-time 14:00 \\
            --odometer-start 1000 --odometer-end 1050 --rate 1200 \\
            --extra-per-hour 150 --extra-per-km 10 --tolls 50
    """
    with with_error_handling(debug):
        billing_input = BillingInput(
            slot=slot,
            start_time=start_time,
            end_time=end_time,
            odometer_start=odometer_start,
            odometer_end=odometer_end,
            rate=rate,
            extra_per_hour=extra_per_hour,
            extra_per_km=extra_per_km,
            tolls=tolls,
        )
        result = compute_billing(billing_input)

        if as_json:
            click.echo(json.dumps(result.entry_fields(), indent=2))
            return

        symbol = get_config().currency_symbol
        click.echo(format_info(f"Billing for slot '{slot or '-'}'"))
        click.echo(format_table(["Item", "Value"], _breakdown_rows(result, symbol)))
