"""Core date model shared by the formatting and runtime layers.

This package holds the value type and the arithmetic that every formatter
reads. It depends only on constants and diagnostics:

    core <- formatting <- driver

Exports:
    CalendarValue: Immutable civil-calendar snapshot of an instant
    to_calendar_value: Coerce datetime, epoch milliseconds or ISO strings
    day_of_year, iso_week, iso_week_year: Calendar arithmetic helpers
    WeekRule, ISO_WEEK_RULE: Week numbering rules

Python 3.13+.
"""

from .calendar import ISO_WEEK_RULE, WeekRule, day_of_year, iso_week, iso_week_year
from .coercion import to_calendar_value
from .value_types import CalendarValue

__all__ = [
    "ISO_WEEK_RULE",
    "CalendarValue",
    "WeekRule",
    "day_of_year",
    "iso_week",
    "iso_week_year",
    "to_calendar_value",
]
