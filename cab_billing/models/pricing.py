"""Pricing data model for the cab billing system.

A pricing rule fixes the base fare and overage prices a company pays for
one cab type in one slot.
"""

from decimal import Decimal
from typing import Union

from pydantic import Field, field_validator

from cab_billing.models.base import BaseDataModel


class PricingRule(BaseDataModel):
    """Represents the agreed price for a company, cab type and slot.

    Attributes:
        company_id: Customer company identifier
        cab_type: Cab type the price applies to (e.g. "SUV")
        slot: Slot name the price applies to (e.g. "8hr")
        rate: Base fare for the slot
        extra_per_hour: Price per hour beyond the slot allowance
        extra_per_km: Price per kilometer beyond the slot allowance

    Example:
        >>> rule = PricingRule(
        ...     company_id="CMP-001",
        ...     cab_type="SUV",
        ...     slot="4hr",
        ...     rate="1200",
        ...     extra_per_hour="150",
        ...     extra_per_km="10",
        ... )
        >>> rule.rate
        Decimal('1200')
    """

    company_id: str = Field(..., min_length=1, description="Company identifier")
    cab_type: str = Field(..., min_length=1, description="Cab type")
    slot: str = Field(..., min_length=1, description="Slot name")
    rate: Decimal = Field(..., ge=0, description="Base fare")
    extra_per_hour: Decimal = Field(
        Decimal("0"), ge=0, description="Price per extra hour"
    )
    extra_per_km: Decimal = Field(Decimal("0"), ge=0, description="Price per extra km")

    @field_validator("company_id", "cab_type", "slot")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Validate that string fields are not empty or whitespace only.

        Raises:
            ValueError: If the value is empty or whitespace only
        """
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()

    @field_validator("rate", "extra_per_hour", "extra_per_km", mode="before")
    @classmethod
    def convert_to_decimal(
        cls, v: Union[str, int, float, Decimal, None], info
    ) -> Decimal:
        """Convert numeric values to Decimal for precision.

        Missing overage prices default to zero; the base rate is required.

        Raises:
            ValueError: If the value cannot be converted to Decimal
        """
        if v is None or (isinstance(v, str) and not v.strip()):
            if info.field_name == "rate":
                raise ValueError("rate is required")
            return Decimal("0")
        try:
            value = v if isinstance(v, Decimal) else Decimal(str(v).strip())
        except (ArithmeticError, ValueError, TypeError) as e:
            raise ValueError(f"Cannot convert {v} to Decimal: {e}")
        if not value.is_finite():
            raise ValueError(f"Amount must be a finite number, got {v}")
        return value
