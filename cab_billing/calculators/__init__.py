"""Calculator modules for the cab billing system."""

from cab_billing.calculators.billing_calculator import (
    BillingResult,
    compute_billing,
    compute_billing_batch,
)
from cab_billing.calculators.entry_pricing import (
    bill_entries,
    bill_entry,
    build_billing_input,
    find_pricing,
)
from cab_billing.calculators.time_utils import (
    calculate_travelled_minutes,
    convert_time_to_minutes,
    minutes_to_hours,
    parse_time_to_minutes,
)
from cab_billing.calculators.usage_calculator import (
    SLOT_LIMITS,
    SlotLimit,
    UsageResult,
    calculate_overage,
    calculate_travelled_kms,
    compute_usage,
    resolve_slot_limits,
)

__all__ = [
    # billing_calculator
    "BillingResult",
    "compute_billing",
    "compute_billing_batch",
    # entry_pricing
    "bill_entries",
    "bill_entry",
    "build_billing_input",
    "find_pricing",
    # time_utils
    "calculate_travelled_minutes",
    "convert_time_to_minutes",
    "minutes_to_hours",
    "parse_time_to_minutes",
    # usage_calculator
    "SLOT_LIMITS",
    "SlotLimit",
    "UsageResult",
    "calculate_overage",
    "calculate_travelled_kms",
    "compute_usage",
    "resolve_slot_limits",
]
