"""Utility helpers for lanepack.

Interval endpoints may be numbers, datetimes, dates or ISO-8601 strings.
Arithmetic metrics coerce them to float seconds (or plain numbers) here.
"""

from datetime import date, datetime, time, timezone
from typing import Any

from dateutil.parser import isoparse


def to_number(value: Any) -> float:
    """Convert an interval endpoint to a float for arithmetic.

    Accepts:
    - int / float: Passed through
    - datetime: POSIX timestamp; naive datetimes are read as UTC
    - date: Timestamp of midnight UTC
    - str: Parsed as ISO-8601 with dateutil, then as a datetime
    - anything else implementing __float__ (Decimal, Fraction, ...)

    Raises:
        TypeError: If the value has an unsupported type
        ValueError: If a string is not valid ISO-8601
    """
    if isinstance(value, bool):
        raise TypeError(f"Interval endpoint must not be a bool, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        value = isoparse(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp()
    if hasattr(value, "__float__"):
        return float(value)
    raise TypeError(
        f"Interval endpoint must be int, float, datetime, date or ISO-8601 str.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Hint: convert richer timestamp types to epoch numbers before packing"
    )
