"""Calendar arithmetic for the proleptic Gregorian calendar.

Pure integer functions over civil dates, usable for any signed year
(astronomical numbering: year 0 is 1 BC, year -1 is 2 BC). Python's
datetime stops at year 1, so day counting is done here directly:

    - days_from_civil / civil_from_days: civil date <-> days since 1970-01-01
    - weekday_from_days: day of week (0 = Sunday)
    - ordinal_day, civil_week_year, civil_week: derived quantities of a civil date
    - day_of_year, iso_week, iso_week_year: public helpers taking a CalendarValue

Week numbering is parameterized by a WeekRule (first day of week, minimal
days of January in week 1). The ISO-8601 rule is Monday / 4.

Thread-safe. No state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from ldmlformat.constants import (
    DAYS_PER_WEEK,
    ISO_FIRST_WEEK_CONTAINS_DATE,
    ISO_WEEK_STARTS_ON,
)
from ldmlformat.diagnostics import ErrorTemplate, InvalidDateError

if TYPE_CHECKING:
    from ldmlformat.core.value_types import CalendarValue
    from ldmlformat.formatting.options import FormatOptions

__all__ = [
    "ISO_WEEK_RULE",
    "WeekRule",
    "civil_from_days",
    "civil_week",
    "civil_week_year",
    "day_of_year",
    "days_from_civil",
    "days_in_month",
    "is_leap_year",
    "iso_week",
    "iso_week_year",
    "ordinal_day",
    "weekday_from_days",
]

# Days between 0000-03-01 and 1970-01-01 in the proleptic Gregorian calendar.
_EPOCH_SHIFT = 719468
# Days in a 400-year Gregorian cycle.
_DAYS_PER_ERA = 146097
# 1970-01-01 was a Thursday.
_EPOCH_WEEKDAY = 4

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class WeekRule(NamedTuple):
    """Week numbering rule.

    Attributes:
        week_starts_on: First day of the week (0 = Sunday ... 6 = Saturday)
        first_week_contains_date: Week 1 is the week containing this day of January
    """

    week_starts_on: int
    first_week_contains_date: int


ISO_WEEK_RULE = WeekRule(ISO_WEEK_STARTS_ON, ISO_FIRST_WEEK_CONTAINS_DATE)


def is_leap_year(year: int) -> bool:
    """Return True if the (astronomical) year is a Gregorian leap year.

    Examples:
        >>> is_leap_year(1992), is_leap_year(1900), is_leap_year(2000), is_leap_year(0)
        (True, False, True, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month (1-based month)."""
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_LENGTHS[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a civil date to days since 1970-01-01.

    Counts in 400-year eras starting on March 1st so that the leap day is the
    last day of each computational year. Floor division makes the same
    arithmetic valid for negative years.

    Args:
        year: Astronomical year (0 = 1 BC)
        month: Month, 1-based
        day: Day of month, 1-based

    Returns:
        Signed day count; 0 for 1970-01-01

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2000, 3, 1)
        11017
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_shifted_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_shifted_year
    )
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to a civil date.

    Inverse of days_from_civil().

    Returns:
        (year, month, day) with 1-based month and day
    """
    z = days + _EPOCH_SHIFT
    era = z // _DAYS_PER_ERA
    day_of_era = z - era * _DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_shifted_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_shifted_year + 2) // 153
    day = day_of_shifted_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return (year, month, day)


def weekday_from_days(days: int) -> int:
    """Return the day of week for a day count (0 = Sunday ... 6 = Saturday)."""
    return (days + _EPOCH_WEEKDAY) % DAYS_PER_WEEK


def _start_of_week(days: int, week_starts_on: int) -> int:
    return days - (weekday_from_days(days) - week_starts_on) % DAYS_PER_WEEK


def _start_of_week_year(year: int, rule: WeekRule) -> int:
    anchor = days_from_civil(year, 1, rule.first_week_contains_date)
    return _start_of_week(anchor, rule.week_starts_on)


def ordinal_day(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day within the civil year (1-based month)."""
    return days_from_civil(year, month, day) - days_from_civil(year, 1, 1) + 1


def civil_week_year(year: int, month: int, day: int, rule: WeekRule = ISO_WEEK_RULE) -> int:
    """Return the week-numbering year a civil date's week belongs to.

    Near year boundaries this can be the previous or the next calendar year:
    the last days of December may fall in week 1 of the next year, and the
    first days of January may fall in the last week of the previous year.
    """
    days = days_from_civil(year, month, day)
    if days >= _start_of_week_year(year + 1, rule):
        return year + 1
    if days >= _start_of_week_year(year, rule):
        return year
    return year - 1


def civil_week(year: int, month: int, day: int, rule: WeekRule = ISO_WEEK_RULE) -> int:
    """Return the week number [1..53] of a civil date under the given rule."""
    days = days_from_civil(year, month, day)
    start = _start_of_week_year(civil_week_year(year, month, day, rule), rule)
    return (days - start) // DAYS_PER_WEEK + 1


# ---------------------------------------------------------------------------
# CalendarValue helpers
# ---------------------------------------------------------------------------


def _require_valid(value: CalendarValue, operation: str) -> None:
    if not value.is_valid:
        raise InvalidDateError(ErrorTemplate.invalid_date(operation))


def _week_rule(options: FormatOptions | None) -> WeekRule:
    return ISO_WEEK_RULE if options is None else options.week_rule


def day_of_year(value: CalendarValue, options: FormatOptions | None = None) -> int:  # noqa: ARG001
    """Return the 1-based day of year of a calendar value.

    Args:
        value: Calendar value (wall-clock fields are used)
        options: Accepted for signature symmetry with the week helpers; unused

    Raises:
        InvalidDateError: If value does not represent a finite instant

    Examples:
        >>> from ldmlformat.core.value_types import CalendarValue
        >>> day_of_year(CalendarValue.from_fields(1992, 11, 31))
        366
    """
    _require_valid(value, "day_of_year")
    return ordinal_day(value.year, value.month + 1, value.day)


def iso_week(value: CalendarValue, options: FormatOptions | None = None) -> int:
    """Return the week number [1..53] of a calendar value.

    Uses the ISO-8601 rule unless options configure a locale week.

    Raises:
        InvalidDateError: If value does not represent a finite instant

    Examples:
        >>> from ldmlformat.core.value_types import CalendarValue
        >>> iso_week(CalendarValue.from_fields(1986, 3, 4))
        14
    """
    _require_valid(value, "iso_week")
    return civil_week(value.year, value.month + 1, value.day, _week_rule(options))


def iso_week_year(value: CalendarValue, options: FormatOptions | None = None) -> int:
    """Return the signed week-numbering year of a calendar value.

    Uses the ISO-8601 rule unless options configure a locale week.

    Raises:
        InvalidDateError: If value does not represent a finite instant

    Examples:
        >>> from ldmlformat.core.value_types import CalendarValue
        >>> iso_week_year(CalendarValue.from_fields(2013, 11, 30))
        2014
        >>> iso_week_year(CalendarValue.from_fields(2016, 0, 1))
        2015
    """
    _require_valid(value, "iso_week_year")
    return civil_week_year(value.year, value.month + 1, value.day, _week_rule(options))
