"""Ride entry data models for the cab billing system.

This module defines the inputs of the billing computation and the ride
entry record they are taken from:
- UsageInput: slot, start/end time and odometer readings of a ride
- BillingInput: UsageInput plus base rate, overage prices and tolls
- RideEntry: one logged ride as recorded by staff

Numeric and time fields are lenient. Values that cannot be interpreted
become None instead of failing validation, because billing must still
produce a number for an incomplete entry.
"""

import datetime as dt
from decimal import Decimal
from typing import Any, Mapping, Optional

from pydantic import ConfigDict, Field, field_validator

from cab_billing.models.base import BaseDataModel
from cab_billing.utils.numbers import to_number


class UsageInput(BaseDataModel):
    """Usage fields of a ride used to detect overage.

    Attributes:
        slot: Slot name (e.g. "4hr"); unknown slots carry no allowance
        start_time: Start time as "HH:MM" or "h:mm AM/PM"
        end_time: End time as "HH:MM" or "h:mm AM/PM"
        odometer_start: Odometer reading at pickup, None if unknown
        odometer_end: Odometer reading at drop, None if unknown

    Example:
        >>> usage = UsageInput(
        ...     slot="4hr",
        ...     start_time="09:00",
        ...     end_time="2:00 PM",
        ...     odometer_start="1000",
        ...     odometer_end=1050,
        ... )
        >>> usage.odometer_start
        Decimal('1000')
    """

    slot: str = Field("", description="Slot name")
    start_time: Optional[str] = Field(None, description="Ride start time")
    end_time: Optional[str] = Field(None, description="Ride end time")
    odometer_start: Optional[Decimal] = Field(None, description="Odometer at start")
    odometer_end: Optional[Decimal] = Field(None, description="Odometer at end")

    @field_validator("slot", mode="before")
    @classmethod
    def coerce_slot(cls, v: Any) -> str:
        """Treat a missing slot as the empty slot name."""
        if v is None:
            return ""
        return str(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def coerce_time(cls, v: Any) -> Optional[str]:
        """Normalize time values to strings, keeping blanks as None.

        dt.time values are rendered as "HH:MM" so they parse as 24-hour
        times later on.
        """
        if v is None:
            return None
        if isinstance(v, dt.time):
            return v.strftime("%H:%M")
        text = str(v).strip()
        return text or None

    @field_validator("odometer_start", "odometer_end", mode="before")
    @classmethod
    def coerce_reading(cls, v: Any) -> Optional[Decimal]:
        """Convert odometer readings, treating invalid values as unknown."""
        return to_number(v)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]):
        """Build an input from a record that may carry unrelated keys.

        Args:
            record: Mapping such as a stored entry document

        Returns:
            Instance of the calling class built from the known keys only
        """
        return cls(**{key: record[key] for key in cls.model_fields if key in record})


class BillingInput(UsageInput):
    """Everything needed to bill a single ride.

    Attributes:
        rate: Base fare for the slot
        extra_per_hour: Price per extra hour beyond the slot allowance
        extra_per_km: Price per extra kilometer beyond the slot allowance
        tolls: Toll charges paid during the ride

    All four amounts are optional; absent or invalid values bill as zero.

    Example:
        >>> billing_input = BillingInput(slot="8hr", rate="2000", tolls="")
        >>> billing_input.tolls is None
        True
    """

    rate: Optional[Decimal] = Field(None, description="Base fare")
    extra_per_hour: Optional[Decimal] = Field(None, description="Extra hour price")
    extra_per_km: Optional[Decimal] = Field(None, description="Extra km price")
    tolls: Optional[Decimal] = Field(None, description="Toll charges")

    @field_validator("rate", "extra_per_hour", "extra_per_km", "tolls", mode="before")
    @classmethod
    def coerce_amount(cls, v: Any) -> Optional[Decimal]:
        """Convert amounts, treating invalid values as absent."""
        return to_number(v)


class RideEntry(BillingInput):
    """A single billable ride logged against a company and vehicle.

    Attributes:
        entry_id: Identifier of the stored entry
        entry_date: Date of the ride
        company_name: Customer company name
        company_id: Customer company identifier used for pricing lookup
        vehicle_number: Registration number of the vehicle
        cab_type: Cab type (e.g. "Sedan", "SUV") used for pricing lookup
        driver_name: Driver of the ride
        pickup_location: Pickup point
        drop_location: Drop point
        notes: Free-text notes
        billed: Whether the entry is already part of an invoice

    Example:
        >>> entry = RideEntry(
        ...     entry_id="ENT-2402",
        ...     entry_date=dt.date(2026, 2, 10),
        ...     company_name="Globex",
        ...     cab_type="Sedan",
        ...     slot="4hr",
        ... )
        >>> entry.billed
        False
    """

    model_config = ConfigDict(extra="ignore")

    entry_id: Optional[str] = Field(None, description="Entry identifier")
    entry_date: dt.date = Field(..., description="Date of the ride")
    company_name: str = Field(..., min_length=1, description="Customer company")
    company_id: Optional[str] = Field(None, description="Customer company id")
    vehicle_number: Optional[str] = Field(None, description="Vehicle number")
    cab_type: Optional[str] = Field(None, description="Cab type")
    driver_name: Optional[str] = Field(None, description="Driver name")
    pickup_location: Optional[str] = Field(None, description="Pickup location")
    drop_location: Optional[str] = Field(None, description="Drop location")
    notes: Optional[str] = Field(None, description="Optional notes")
    billed: bool = Field(False, description="Whether the entry is invoiced")

    @field_validator("company_name")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Validate that string fields are not empty or whitespace only.

        Args:
            v: The value to validate
            info: Field validation info

        Returns:
            The validated value

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()
