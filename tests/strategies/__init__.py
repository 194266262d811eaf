"""Hypothesis strategies for ldmlformat property-based testing.

Usage:
    from tests.strategies import calendar_values, literal_texts
    from tests.strategies.calendar import year_boundary_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    calendar_values, year_boundary_values
"""

from .calendar import (
    aware_datetimes,
    calendar_values,
    datetime_years,
    implemented_letters,
    literal_texts,
    plain_literal_texts,
    signed_years,
    utc_offsets,
    year_boundary_values,
)

__all__ = [
    "aware_datetimes",
    "calendar_values",
    "datetime_years",
    "implemented_letters",
    "literal_texts",
    "plain_literal_texts",
    "signed_years",
    "utc_offsets",
    "year_boundary_values",
]
