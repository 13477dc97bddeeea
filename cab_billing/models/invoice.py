"""Invoice data models for the cab billing system.

This module defines the monthly invoice a company receives and the line
items it is built from. All amounts are whole currency units.
"""

import datetime as dt
from typing import List, Optional

from pydantic import Field, field_validator

from cab_billing.models.base import BaseDataModel


class InvoiceLineItem(BaseDataModel):
    """One billed ride on an invoice.

    Attributes:
        entry_id: Identifier of the billed entry
        date: Date of the ride
        slot: Slot the ride was booked for
        cab_type: Cab type of the vehicle
        vehicle_number: Vehicle registration number
        extra_kms: Billed kilometers beyond the slot allowance
        extra_hours: Billed hours beyond the slot allowance
        tolls: Toll charges
        amount: Total billed for the ride
    """

    entry_id: Optional[str] = Field(None, description="Entry identifier")
    date: dt.date = Field(..., description="Date of the ride")
    slot: str = Field("", description="Slot name")
    cab_type: Optional[str] = Field(None, description="Cab type")
    vehicle_number: Optional[str] = Field(None, description="Vehicle number")
    extra_kms: int = Field(0, ge=0, description="Extra kilometers")
    extra_hours: int = Field(0, ge=0, description="Extra hours")
    tolls: int = Field(0, ge=0, description="Toll charges")
    amount: int = Field(..., ge=0, description="Billed amount")


class Invoice(BaseDataModel):
    """Monthly invoice for a company.

    Attributes:
        company_name: Invoiced company
        month: Billing month in YYYY-MM form
        line_items: Billed rides, ordered by date
        subtotal: Sum of line item amounts
        tax: Tax on the subtotal
        total: Subtotal plus tax
        entry_ids: Entries consumed by this invoice, to be locked by storage

    Example:
        >>> invoice = Invoice(
        ...     company_name="Acme Corp",
        ...     month="2026-02",
        ...     line_items=[],
        ...     subtotal=0,
        ...     tax=0,
        ...     total=0,
        ... )
        >>> invoice.entry_count
        0
    """

    company_name: str = Field(..., min_length=1, description="Invoiced company")
    month: str = Field(..., pattern=r"^\d{4}-\d{2}$", description="Billing month")
    line_items: List[InvoiceLineItem] = Field(default_factory=list)
    subtotal: int = Field(..., ge=0, description="Sum of line item amounts")
    tax: int = Field(..., ge=0, description="Tax amount")
    total: int = Field(..., ge=0, description="Subtotal plus tax")
    entry_ids: List[str] = Field(default_factory=list)

    @field_validator("month")
    @classmethod
    def validate_month(cls, v: str) -> str:
        """Validate that the month is a real calendar month.

        Raises:
            ValueError: If the month is outside 01-12
        """
        month = int(v[5:7])
        if month < 1 or month > 12:
            raise ValueError(f"month must be between 01 and 12, got {v}")
        return v

    @property
    def entry_count(self) -> int:
        """Number of rides on the invoice."""
        return len(self.line_items)
