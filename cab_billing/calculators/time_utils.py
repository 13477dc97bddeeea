"""Time-of-day parsing and elapsed time utilities for ride entries.

This module provides low-level utilities for:
- Parsing entry times in 24-hour (``HH:MM``) or 12-hour (``h:mm AM/PM``) form
- Converting times to minutes since midnight
- Calculating travelled minutes across midnight

Parsing never raises: anything that is not a valid time of day is
reported as ``None`` so that incomplete entries can still be billed.
"""

import datetime as dt
import re
from decimal import Decimal
from typing import Optional, Union

MINUTES_PER_DAY = 24 * 60

_TWELVE_HOUR_PATTERN = re.compile(r"(\d{1,2})(?::(\d{2}))? ?(AM|PM)", re.ASCII)
_TWENTY_FOUR_HOUR_PATTERN = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


def convert_time_to_minutes(time: dt.time) -> int:
    """Convert a dt.time object to minutes since midnight.

    Args:
        time: The time to convert

    Returns:
        Number of minutes since midnight (0-1439)

    Example:
        >>> convert_time_to_minutes(dt.time(9, 30))
        570
        >>> convert_time_to_minutes(dt.time(23, 59))
        1439
    """
    return time.hour * 60 + time.minute


def parse_time_to_minutes(value: Union[str, dt.time, None]) -> Optional[int]:
    """Parse a time-of-day value into minutes since midnight.

    Accepted formats:
    - 12-hour: ``9 AM``, ``9:05 pm``, ``12:00 AM`` (hour 1-12, optional minutes)
    - 24-hour: ``9:05``, ``21:05`` (hour 0-23, minutes required)

    Surrounding whitespace is ignored, internal whitespace is collapsed and
    the AM/PM suffix is case-insensitive.

    Args:
        value: Time string, dt.time, or None

    Returns:
        Minutes since midnight (0-1439), or None if the value is empty or
        cannot be parsed

    Example:
        >>> parse_time_to_minutes("14:30")
        870
        >>> parse_time_to_minutes("2:30 PM")
        870
        >>> parse_time_to_minutes("12:00 AM")
        0
        >>> parse_time_to_minutes("25:00") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, dt.time):
        return convert_time_to_minutes(value)

    normalized = " ".join(str(value).split()).upper()
    if not normalized:
        return None

    match = _TWELVE_HOUR_PATTERN.fullmatch(normalized)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2)) if match.group(2) is not None else 0
        if hour < 1 or hour > 12 or minute > 59:
            return None
        # 12 AM is midnight, 12 PM is noon
        if hour == 12:
            hour = 0
        if match.group(3) == "PM":
            hour += 12
        return hour * 60 + minute

    match = _TWENTY_FOUR_HOUR_PATTERN.fullmatch(normalized)
    if match:
        hour = int(match.group(1))
        minute = int(match.group(2))
        if hour > 23 or minute > 59:
            return None
        return hour * 60 + minute

    return None


def calculate_travelled_minutes(
    start_minutes: Optional[int], end_minutes: Optional[int]
) -> Optional[int]:
    """Calculate elapsed minutes between two times of day.

    An end time earlier than the start time is a trip that crossed
    midnight, so a full day is added.

    Args:
        start_minutes: Start time in minutes since midnight, or None
        end_minutes: End time in minutes since midnight, or None

    Returns:
        Elapsed minutes (0-1439), or None if either time is missing

    Example:
        >>> calculate_travelled_minutes(540, 840)
        300
        >>> calculate_travelled_minutes(1380, 60)
        120
        >>> calculate_travelled_minutes(None, 60) is None
        True
    """
    if start_minutes is None or end_minutes is None:
        return None
    if end_minutes >= start_minutes:
        return end_minutes - start_minutes
    return end_minutes + MINUTES_PER_DAY - start_minutes


def minutes_to_hours(minutes: Optional[int]) -> Optional[Decimal]:
    """Convert minutes to fractional hours.

    Example:
        >>> minutes_to_hours(90)
        Decimal('1.5')
        >>> minutes_to_hours(None) is None
        True
    """
    if minutes is None:
        return None
    return Decimal(minutes) / Decimal(60)
