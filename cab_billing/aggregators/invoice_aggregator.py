"""Invoice aggregator for monthly company billing.

This module collects a company's ride entries for a month, bills each one
against the price list and sums them into an invoice with tax.
"""

import datetime as dt
import logging
import re
from decimal import Decimal
from typing import Iterable, List, Union

from cab_billing.calculators.entry_pricing import bill_entry
from cab_billing.models.entry import RideEntry
from cab_billing.models.invoice import Invoice, InvoiceLineItem
from cab_billing.models.pricing import PricingRule
from cab_billing.utils.logging_utils import log_function_call
from cab_billing.utils.numbers import round_currency

logger = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.18")


def parse_month(month: str) -> dt.date:
    """Parse a YYYY-MM month into the first day of that month.

    Raises:
        ValueError: If the month is not in YYYY-MM form

    Example:
        >>> parse_month("2026-02")
        datetime.date(2026, 2, 1)
    """
    if not isinstance(month, str) or not re.fullmatch(r"\d{4}-\d{2}", month):
        raise ValueError(f"Invalid month '{month}', expected YYYY-MM")
    try:
        return dt.datetime.strptime(month, "%Y-%m").date()
    except ValueError:
        raise ValueError(f"Invalid month '{month}', expected YYYY-MM")


class InvoiceAggregator:
    """Builds monthly invoices from ride entries.

    The aggregator:
    1. Selects a company's unbilled entries for the month
    2. Bills each entry using the price list
    3. Sums line item amounts into the subtotal
    4. Adds tax on the subtotal, rounded to whole currency units

    The returned invoice lists the consumed entry ids; marking those
    entries as billed is up to the storage layer.

    Attributes:
        tax_rate: Fraction of the subtotal charged as tax (0.18 = 18% GST)

    Example:
        >>> aggregator = InvoiceAggregator()
        >>> invoice = aggregator.build_invoice(entries, rules, "Acme Corp", "2026-02")
        >>> invoice.total == invoice.subtotal + invoice.tax
        True
    """

    def __init__(self, tax_rate: Union[Decimal, str, float] = DEFAULT_TAX_RATE):
        """Initialize the aggregator.

        Args:
            tax_rate: Fraction of the subtotal charged as tax

        Raises:
            ValueError: If the tax rate is outside 0-1
        """
        rate = Decimal(str(tax_rate))
        if not rate.is_finite() or rate < 0 or rate > 1:
            raise ValueError(f"tax_rate must be between 0 and 1, got {tax_rate}")
        self.tax_rate = rate

    def select_entries(
        self, entries: Iterable[RideEntry], company_name: str, month: str
    ) -> List[RideEntry]:
        """Select a company's unbilled entries for a month.

        Args:
            entries: All known ride entries
            company_name: Company to invoice
            month: Billing month in YYYY-MM form

        Returns:
            Matching entries ordered by date

        Raises:
            ValueError: If the month is not in YYYY-MM form
        """
        month_start = parse_month(month)
        selected = []
        skipped_billed = 0

        for entry in entries:
            if entry.company_name != company_name:
                continue
            if (
                entry.entry_date.year != month_start.year
                or entry.entry_date.month != month_start.month
            ):
                continue
            if entry.billed:
                skipped_billed += 1
                continue
            selected.append(entry)

        if skipped_billed:
            logger.info(
                f"Skipped {skipped_billed} already billed entries "
                f"for {company_name} in {month}"
            )

        return sorted(selected, key=lambda e: e.entry_date)

    def calculate_tax(self, subtotal: int) -> int:
        """Calculate tax on a subtotal, rounded to whole currency units.

        Example:
            >>> InvoiceAggregator().calculate_tax(1500)
            270
        """
        return round_currency(Decimal(subtotal) * self.tax_rate)

    @log_function_call
    def build_invoice(
        self,
        entries: Iterable[RideEntry],
        rules: Iterable[PricingRule],
        company_name: str,
        month: str,
    ) -> Invoice:
        """Build the invoice of a company for a month.

        Args:
            entries: All known ride entries
            rules: Pricing rules used to bill entries without recorded prices
            company_name: Company to invoice
            month: Billing month in YYYY-MM form

        Returns:
            Invoice with one line item per billed entry

        Raises:
            ValueError: If the month is not in YYYY-MM form
        """
        rules = list(rules)
        selected = self.select_entries(entries, company_name, month)

        line_items = []
        for entry in selected:
            billing = bill_entry(entry, rules)
            line_items.append(
                InvoiceLineItem(
                    entry_id=entry.entry_id,
                    date=entry.entry_date,
                    slot=entry.slot,
                    cab_type=entry.cab_type,
                    vehicle_number=entry.vehicle_number,
                    extra_kms=billing.extra_kms,
                    extra_hours=billing.extra_hours,
                    tolls=billing.tolls,
                    amount=billing.total,
                )
            )

        subtotal = sum(item.amount for item in line_items)
        tax = self.calculate_tax(subtotal)

        logger.info(
            f"Built invoice for {company_name} {month}: {len(line_items)} entries, "
            f"subtotal {subtotal}, tax {tax}"
        )

        return Invoice(
            company_name=company_name,
            month=month,
            line_items=line_items,
            subtotal=subtotal,
            tax=tax,
            total=subtotal + tax,
            entry_ids=[entry.entry_id for entry in selected if entry.entry_id],
        )
