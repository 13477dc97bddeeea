"""Pricing lookup for ride entries.

Resolves the company, cab type and slot price that applies to a ride and
combines it with the amounts recorded on the entry itself. Values on the
entry take precedence, so a manually entered rate overrides the price
list. A ride without matching pricing is still billed, with missing
amounts counting as zero.
"""

import logging
from typing import Iterable, List, Optional

from cab_billing.calculators.billing_calculator import BillingResult, compute_billing
from cab_billing.models.entry import BillingInput, RideEntry
from cab_billing.models.pricing import PricingRule
from cab_billing.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)


def find_pricing(
    rules: Iterable[PricingRule],
    company_id: Optional[str],
    cab_type: Optional[str],
    slot: Optional[str],
) -> Optional[PricingRule]:
    """Find the pricing rule for a company, cab type and slot.

    Args:
        rules: Available pricing rules
        company_id: Company identifier
        cab_type: Cab type of the vehicle
        slot: Slot name

    Returns:
        The first matching PricingRule, or None if nothing matches

    Example:
        >>> rule = find_pricing(rules, "CMP-001", "SUV", "4hr")
        >>> rule.rate
        Decimal('1200')
    """
    if not company_id or not cab_type or not slot:
        return None

    for rule in rules:
        if (
            rule.company_id == company_id
            and rule.cab_type == cab_type
            and rule.slot == slot
        ):
            return rule
    return None


def build_billing_input(entry: RideEntry, rules: Iterable[PricingRule]) -> BillingInput:
    """Combine a ride entry with its pricing into a billing input.

    Args:
        entry: The ride entry
        rules: Available pricing rules

    Returns:
        BillingInput where rate and overage prices come from the entry when
        recorded there, otherwise from the matching pricing rule
    """
    rule = find_pricing(rules, entry.company_id, entry.cab_type, entry.slot)
    if rule is None:
        logger.debug(
            f"No pricing for company '{entry.company_id}', cab type "
            f"'{entry.cab_type}', slot '{entry.slot}' (entry {entry.entry_id})"
        )

    rate = entry.rate
    extra_per_hour = entry.extra_per_hour
    extra_per_km = entry.extra_per_km
    if rule is not None:
        if rate is None:
            rate = rule.rate
        if extra_per_hour is None:
            extra_per_hour = rule.extra_per_hour
        if extra_per_km is None:
            extra_per_km = rule.extra_per_km

    return BillingInput(
        slot=entry.slot,
        start_time=entry.start_time,
        end_time=entry.end_time,
        odometer_start=entry.odometer_start,
        odometer_end=entry.odometer_end,
        rate=rate,
        extra_per_hour=extra_per_hour,
        extra_per_km=extra_per_km,
        tolls=entry.tolls,
    )


def bill_entry(entry: RideEntry, rules: Iterable[PricingRule]) -> BillingResult:
    """Calculate the billing of a ride entry using the price list.

    Example:
        >>> bill_entry(entry, rules).total
        1500
    """
    return compute_billing(build_billing_input(entry, rules))


@log_function_call
def bill_entries(
    entries: Iterable[RideEntry], rules: Iterable[PricingRule]
) -> List[BillingResult]:
    """Calculate billing for several entries, in order."""
    rules = list(rules)
    return [bill_entry(entry, rules) for entry in entries]
