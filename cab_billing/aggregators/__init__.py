"""Aggregators for building invoices from ride entries."""

from cab_billing.aggregators.invoice_aggregator import (
    DEFAULT_TAX_RATE,
    InvoiceAggregator,
    parse_month,
)

__all__ = ["DEFAULT_TAX_RATE", "InvoiceAggregator", "parse_month"]
