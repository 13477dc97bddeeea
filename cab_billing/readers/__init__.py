"""Readers for ride entry and pricing data."""

from cab_billing.readers.entry_reader import EntryReader
from cab_billing.readers.pricing_reader import PricingReader

__all__ = ["EntryReader", "PricingReader"]
