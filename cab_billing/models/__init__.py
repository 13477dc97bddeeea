"""Data models for the cab billing system.

This package contains Pydantic models for all business entities:
- BaseDataModel: Base class with common configuration
- UsageInput / BillingInput: Inputs of the entry billing computation
- RideEntry: A logged ride
- PricingRule: Company, cab type and slot pricing
- Invoice / InvoiceLineItem: Monthly company invoice
"""

from cab_billing.models.base import BaseDataModel
from cab_billing.models.entry import BillingInput, RideEntry, UsageInput
from cab_billing.models.invoice import Invoice, InvoiceLineItem
from cab_billing.models.pricing import PricingRule

__all__ = [
    "BaseDataModel",
    "BillingInput",
    "Invoice",
    "InvoiceLineItem",
    "PricingRule",
    "RideEntry",
    "UsageInput",
]
