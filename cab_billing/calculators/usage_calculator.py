"""Usage and overage calculation for ride entries.

This module implements:
- Slot limit lookup (included hours and kilometers per slot)
- Travelled time from start/end times, wrapping past midnight
- Travelled distance from odometer readings
- Extra hours and kilometers beyond the slot allowance

Overage is rounded up to whole units: 4h10m on a 4 hour slot bills one
extra hour. Missing or inconsistent data never produces overage.
"""

from dataclasses import dataclass
from decimal import ROUND_CEILING, Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from cab_billing.calculators.time_utils import (
    calculate_travelled_minutes,
    minutes_to_hours,
    parse_time_to_minutes,
)
from cab_billing.models.entry import UsageInput


@dataclass(frozen=True)
class SlotLimit:
    """Allowance included in a slot.

    Attributes:
        hours: Included duration in hours
        kms: Included distance in kilometers
    """

    hours: int
    kms: int


SLOT_LIMITS: Mapping[str, SlotLimit] = MappingProxyType(
    {
        "4hr": SlotLimit(hours=4, kms=40),
        "8hr": SlotLimit(hours=8, kms=80),
    }
)


@dataclass(frozen=True)
class UsageResult:
    """Usage of a ride measured against its slot allowance.

    Attributes:
        limits: Allowance of the slot, None for unknown slots
        travelled_minutes: Elapsed minutes, None if a time is missing
        travelled_hours: Elapsed hours (fractional), None if a time is missing
        travelled_kms: Odometer distance, None if unknown or inconsistent
        extra_hours: Whole hours beyond the allowance (never negative)
        extra_kms: Whole kilometers beyond the allowance (never negative)
    """

    limits: Optional[SlotLimit]
    travelled_minutes: Optional[int]
    travelled_hours: Optional[Decimal]
    travelled_kms: Optional[Decimal]
    extra_hours: int
    extra_kms: int


def resolve_slot_limits(slot: Optional[str]) -> Optional[SlotLimit]:
    """Look up the allowance of a slot.

    Args:
        slot: Slot name such as "4hr"

    Returns:
        SlotLimit for known slots, None otherwise

    Example:
        >>> resolve_slot_limits("8hr")
        SlotLimit(hours=8, kms=80)
        >>> resolve_slot_limits("12hr") is None
        True
    """
    if not slot:
        return None
    return SLOT_LIMITS.get(slot)


def calculate_travelled_kms(
    odometer_start: Optional[Decimal], odometer_end: Optional[Decimal]
) -> Optional[Decimal]:
    """Calculate the distance covered between two odometer readings.

    Returns:
        end - start, or None if a reading is missing or end is below start

    Example:
        >>> calculate_travelled_kms(Decimal("1000"), Decimal("1050"))
        Decimal('50')
        >>> calculate_travelled_kms(Decimal("100"), Decimal("90")) is None
        True
    """
    if odometer_start is None or odometer_end is None:
        return None
    if odometer_end < odometer_start:
        return None
    return odometer_end - odometer_start


def calculate_overage(used: Optional[Decimal], included: int) -> int:
    """Calculate whole units used beyond an allowance, rounding up.

    Example:
        >>> calculate_overage(Decimal("4.2"), 4)
        1
        >>> calculate_overage(Decimal("4"), 4)
        0
        >>> calculate_overage(None, 4)
        0
    """
    if used is None:
        return 0
    excess = (used - included).to_integral_value(rounding=ROUND_CEILING)
    return max(0, int(excess))


def compute_usage(usage_input: UsageInput) -> UsageResult:
    """Compute travelled time, distance and overage for a ride.

    Args:
        usage_input: Slot, times and odometer readings of the ride

    Returns:
        UsageResult with the measured usage and the overage against the
        slot allowance

    Example:
        >>> result = compute_usage(
        ...     UsageInput(
        ...         slot="4hr",
        ...         start_time="09:00",
        ...         end_time="14:00",
        ...         odometer_start=1000,
        ...         odometer_end=1050,
        ...     )
        ... )
        >>> (result.extra_hours, result.extra_kms)
        (1, 10)
    """
    limits = resolve_slot_limits(usage_input.slot)

    travelled_minutes = calculate_travelled_minutes(
        parse_time_to_minutes(usage_input.start_time),
        parse_time_to_minutes(usage_input.end_time),
    )
    travelled_hours = minutes_to_hours(travelled_minutes)
    travelled_kms = calculate_travelled_kms(
        usage_input.odometer_start, usage_input.odometer_end
    )

    if limits is None:
        extra_hours = 0
        extra_kms = 0
    else:
        extra_hours = calculate_overage(travelled_hours, limits.hours)
        extra_kms = calculate_overage(travelled_kms, limits.kms)

    return UsageResult(
        limits=limits,
        travelled_minutes=travelled_minutes,
        travelled_hours=travelled_hours,
        travelled_kms=travelled_kms,
        extra_hours=extra_hours,
        extra_kms=extra_kms,
    )
