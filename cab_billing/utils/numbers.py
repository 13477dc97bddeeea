"""Lenient numeric coercion and currency rounding.

Entry fields arrive from forms and spreadsheets as strings, numbers or
nothing at all. These helpers turn them into Decimal values without ever
raising: anything that is not a finite number is treated as absent.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional

ZERO = Decimal("0")


def to_number(value: Any) -> Optional[Decimal]:
    """Convert a numeric-like value to a Decimal.

    Args:
        value: A Decimal, int, float, numeric string or None

    Returns:
        The value as a finite Decimal, or None for empty, blank,
        non-numeric, non-finite or beyond-float-range input

    Example:
        >>> to_number("42.5")
        Decimal('42.5')
        >>> to_number("") is None
        True
        >>> to_number("abc") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        try:
            if not math.isfinite(float(value)):
                return None
        except OverflowError:
            return None
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    # Anything past float range reads as Infinity on the entry forms
    if not number.is_finite() or not math.isfinite(float(number)):
        return None
    return number


def non_negative(value: Optional[Decimal]) -> Decimal:
    """Floor a possibly-absent amount at zero.

    Example:
        >>> non_negative(Decimal("-500"))
        Decimal('0')
        >>> non_negative(None)
        Decimal('0')
    """
    if value is None or value < ZERO:
        return ZERO
    return value


def round_currency(value: Optional[Decimal]) -> int:
    """Round an amount to whole currency units (half away from zero).

    Precision is widened to the number of integer digits, so large amounts
    round instead of signalling InvalidOperation.

    Example:
        >>> round_currency(Decimal("99.5"))
        100
        >>> round_currency(Decimal("149.49"))
        149
        >>> round_currency(Decimal("1e30"))
        1000000000000000000000000000000
    """
    if value is None:
        return 0
    amount = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 2)
        return int(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
