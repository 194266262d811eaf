"""Coercion of caller-supplied dates to CalendarValue.

format() accepts several date shapes. This module turns each into a
CalendarValue and never raises for bad data: anything it cannot interpret
becomes CalendarValue.invalid(), which format() renders as "Invalid Date".

Accepted shapes:
    - CalendarValue: returned unchanged
    - aware datetime: wall-clock fields plus its UTC offset
    - naive datetime, date: read as UTC
    - int, float: milliseconds since the Unix epoch (bool is rejected)
    - str: ISO 8601, including expanded years such as "+012345-01-01"

Python 3.13+. Zero external dependencies.
"""

import logging
import re
from dataclasses import replace
from datetime import date, datetime, timedelta

from ldmlformat.constants import DEFAULT_ADDITIONAL_DIGITS, MAX_EPOCH_MS
from ldmlformat.core.value_types import CalendarValue

__all__ = ["to_calendar_value"]

logger = logging.getLogger(__name__)

# Expanded-year prefix: sign, 4 + additional_digits digits, then month/day etc.
_EXPANDED_YEAR_RE = re.compile(r"^([+-])(\d{4,})(-.*)?$")

# Remainder after an expanded year: calendar month and day, optional time.
# Week dates and ordinal dates depend on the year and are not accepted.
_CALENDAR_REST_RE = re.compile(r"^-\d{2}-\d{2}([T ].*)?$")


def _from_wall_clock(year: int, value: datetime) -> CalendarValue:
    """Build a value from the wall-clock fields of value, placed in year.

    The instant subtracts the exact offset, seconds included. The offset
    field is whole minutes, truncated toward zero, and only feeds X / x.
    """
    offset = value.utcoffset() or timedelta(0)
    local = CalendarValue.from_fields(
        year,
        value.month - 1,
        value.day,
        value.hour,
        value.minute,
        value.second,
        value.microsecond // 1000,
    )
    return replace(
        local,
        epoch_ms=local.epoch_ms - offset // timedelta(milliseconds=1),
        utc_offset_minutes=int(offset / timedelta(minutes=1)),
    )


def _from_datetime(value: datetime) -> CalendarValue:
    return _from_wall_clock(value.year, value)


def _from_expanded_year(sign: str, digits: str, rest: str | None) -> CalendarValue:
    year = int(digits)
    if sign == "-":
        year = -year
    if not rest:
        return CalendarValue.from_fields(year, 0, 1)
    if _CALENDAR_REST_RE.match(rest) is None:
        msg = f"Expanded year must be followed by -MM-DD, got {rest!r}"
        raise ValueError(msg)

    # datetime cannot hold the year; parse the remainder against a leap
    # stand-in year and rebuild the fields on the real one. Feb 29 of a
    # common year fails CalendarValue validation.
    return _from_wall_clock(year, datetime.fromisoformat(f"2000{rest}"))


def _from_string(value: str, additional_digits: int) -> CalendarValue:
    text = value.strip()
    expanded = _EXPANDED_YEAR_RE.match(text)
    try:
        if expanded is not None:
            sign, digits, rest = expanded.groups()
            if len(digits) != 4 + additional_digits:
                return CalendarValue.invalid()
            result = _from_expanded_year(sign, digits, rest)
            if abs(result.epoch_ms) > MAX_EPOCH_MS:
                return CalendarValue.invalid()
            return result
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug("Unparseable date string %r", value)
        return CalendarValue.invalid()
    return _from_datetime(parsed)


def to_calendar_value(
    value: object, *, additional_digits: int = DEFAULT_ADDITIONAL_DIGITS
) -> CalendarValue:
    """Coerce a date-like value to a CalendarValue.

    Args:
        value: CalendarValue, datetime, date, epoch milliseconds or ISO-8601 string
        additional_digits: Extra digits an expanded ISO-8601 year carries
            beyond four (0, 1 or 2)

    Returns:
        CalendarValue; CalendarValue.invalid() for values that do not
        denote a finite instant

    Examples:
        >>> to_calendar_value(0).year
        1970
        >>> to_calendar_value("1986-04-04T00:32:55.123").millisecond
        123
        >>> to_calendar_value("-000001-01-01").year
        -1
        >>> to_calendar_value(float("nan")).is_valid
        False
    """
    match value:
        case CalendarValue():
            return value
        case bool():
            return CalendarValue.invalid()
        case datetime():
            return _from_datetime(value)
        case date():
            return CalendarValue.from_fields(value.year, value.month - 1, value.day)
        case int() | float():
            return CalendarValue.from_epoch_ms(value)
        case str():
            return _from_string(value, additional_digits)
        case _:
            return CalendarValue.invalid()

