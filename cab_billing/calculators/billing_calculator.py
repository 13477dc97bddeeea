"""Billing calculator for ride entries.

This module turns a ride's usage and prices into what the customer is
billed:
- Base rate, overage prices and tolls are floored at zero
- Extra hour and extra kilometer costs are rounded to whole currency units
- The total is the rounded sum of rate, both overage costs and tolls

Each cost component is rounded on its own before it is added to the
total, and the total is rounded again.
"""

import logging
from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Dict, List

from cab_billing.calculators.usage_calculator import UsageResult, compute_usage
from cab_billing.models.entry import BillingInput
from cab_billing.utils.numbers import non_negative, round_currency

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BillingResult(UsageResult):
    """Complete billing breakdown for a single ride.

    Carries every UsageResult field plus the billed amounts.

    Attributes:
        rate: Base fare (clamped, rounded)
        extra_per_hour: Price per extra hour (clamped, rounded)
        extra_per_km: Price per extra kilometer (clamped, rounded)
        tolls: Toll charges (clamped, rounded)
        extra_time_cost: extra_hours × extra_per_hour, rounded
        extra_kms_cost: extra_kms × extra_per_km, rounded
        total: rate + extra_time_cost + extra_kms_cost + tolls, rounded

    Example:
        >>> result = compute_billing(BillingInput(slot="8hr", rate=2000))
        >>> result.total
        2000
    """

    rate: int
    extra_per_hour: int
    extra_per_km: int
    tolls: int
    extra_time_cost: int
    extra_kms_cost: int
    total: int

    def entry_fields(self) -> Dict[str, int]:
        """Billing fields as they are stored on a ride entry.

        Returns:
            Dictionary with the stored field names, where ``hours`` and
            ``kms`` hold the billed overage units
        """
        return {
            "rate": self.rate,
            "hours": self.extra_hours,
            "kms": self.extra_kms,
            "extra_per_hour": self.extra_per_hour,
            "extra_per_km": self.extra_per_km,
            "extra_time_cost": self.extra_time_cost,
            "extra_kms_cost": self.extra_kms_cost,
            "tolls": self.tolls,
            "total": self.total,
        }


def _usage_fields(usage: UsageResult) -> Dict[str, Any]:
    return {field.name: getattr(usage, field.name) for field in fields(UsageResult)}


def compute_billing(billing_input: BillingInput) -> BillingResult:
    """Calculate the billed amounts for a single ride.

    Args:
        billing_input: Usage, base rate, overage prices and tolls of the ride

    Returns:
        BillingResult with usage, rounded amounts and the total

    Example:
        >>> result = compute_billing(
        ...     BillingInput(
        ...         slot="4hr",
        ...         start_time="09:00",
        ...         end_time="14:00",
        ...         odometer_start=1000,
        ...         odometer_end=1050,
        ...         rate=1200,
        ...         extra_per_hour=150,
        ...         extra_per_km=10,
        ...         tolls=50,
        ...     )
        ... )
        >>> result.total
        1500
    """
    usage = compute_usage(billing_input)

    base_rate = non_negative(billing_input.rate)
    extra_per_hour = non_negative(billing_input.extra_per_hour)
    extra_per_km = non_negative(billing_input.extra_per_km)
    toll_charge = non_negative(billing_input.tolls)

    extra_time_cost = round_currency(usage.extra_hours * extra_per_hour)
    extra_kms_cost = round_currency(usage.extra_kms * extra_per_km)
    total = round_currency(
        base_rate + Decimal(extra_time_cost) + Decimal(extra_kms_cost) + toll_charge
    )

    logger.debug(
        f"Billed slot '{billing_input.slot}': {usage.extra_hours} extra hour(s), "
        f"{usage.extra_kms} extra km, total {total}"
    )

    return BillingResult(
        **_usage_fields(usage),
        rate=round_currency(base_rate),
        extra_per_hour=round_currency(extra_per_hour),
        extra_per_km=round_currency(extra_per_km),
        tolls=round_currency(toll_charge),
        extra_time_cost=extra_time_cost,
        extra_kms_cost=extra_kms_cost,
        total=total,
    )


def compute_billing_batch(billing_inputs: List[BillingInput]) -> List[BillingResult]:
    """Calculate billing for several rides.

    Args:
        billing_inputs: Rides to bill

    Returns:
        List of BillingResult objects in the same order as the inputs
    """
    return [compute_billing(billing_input) for billing_input in billing_inputs]
