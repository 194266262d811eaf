"""Hypothesis strategies for calendar values and date patterns.

Provides strategies for CalendarValue instances across the full signed year
range, aware datetimes, UTC offsets and pattern fragments.

Usage:
    from hypothesis import given
    from tests.strategies.calendar import calendar_values, literal_texts

    @given(value=calendar_values(), text=literal_texts)
    def test_literal_passthrough(value, text):
        ...
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from ldmlformat.core.calendar import days_in_month
from ldmlformat.core.value_types import CalendarValue

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn, SearchStrategy

# ============================================================================
# YEARS AND OFFSETS
# ============================================================================

# Signed astronomical years, BC included (0 = 1 BC)
signed_years: SearchStrategy[int] = st.integers(min_value=-9999, max_value=9999)

# Years datetime can represent
datetime_years: SearchStrategy[int] = st.integers(min_value=1, max_value=9999)

# Real-world UTC offsets in minutes: -12:00 .. +14:00, quarter-hour steps
utc_offsets: SearchStrategy[int] = st.integers(min_value=-48, max_value=56).map(
    lambda quarters: quarters * 15
)


# ============================================================================
# CALENDAR VALUES
# ============================================================================


@composite
def calendar_values(
    draw: DrawFn,
    years: SearchStrategy[int] = signed_years,
    offsets: SearchStrategy[int] = st.just(0),
) -> CalendarValue:
    """Generate valid CalendarValue instances.

    Events emitted:
    - era={AD|BC}: Which side of year 1 the value falls on
    """
    year = draw(years)
    month = draw(st.integers(min_value=0, max_value=11))
    day = draw(st.integers(min_value=1, max_value=days_in_month(year, month + 1)))
    event(f"era={'AD' if year > 0 else 'BC'}")
    return CalendarValue.from_fields(
        year,
        month,
        day,
        draw(st.integers(min_value=0, max_value=23)),
        draw(st.integers(min_value=0, max_value=59)),
        draw(st.integers(min_value=0, max_value=59)),
        draw(st.integers(min_value=0, max_value=999)),
        utc_offset_minutes=draw(offsets),
    )


@composite
def year_boundary_values(draw: DrawFn) -> CalendarValue:
    """Generate dates in the first or last week of a year.

    These are the dates where the ISO week-numbering year can differ from
    the calendar year.
    """
    year = draw(st.integers(min_value=1, max_value=9999))
    if draw(st.booleans()):
        event("boundary=january")
        return CalendarValue.from_fields(year, 0, draw(st.integers(min_value=1, max_value=7)))
    event("boundary=december")
    return CalendarValue.from_fields(year, 11, draw(st.integers(min_value=25, max_value=31)))


@composite
def aware_datetimes(draw: DrawFn) -> datetime:
    """Generate timezone-aware datetimes with fixed offsets."""
    naive = draw(
        st.datetimes(
            min_value=datetime(1, 1, 2),  # noqa: DTZ001
            max_value=datetime(9999, 12, 30),  # noqa: DTZ001
        )
    )
    offset = draw(utc_offsets)
    tz = UTC if offset == 0 else timezone(timedelta(minutes=offset))
    return naive.replace(tzinfo=tz)


# ============================================================================
# PATTERN FRAGMENTS
# ============================================================================

# Text without ASCII letters or quotes: scans as a single literal
plain_literal_texts: SearchStrategy[str] = st.text(
    alphabet=st.characters(
        exclude_categories=("Cs",),
        exclude_characters="'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    ),
    min_size=1,
    max_size=30,
)

# Arbitrary text, letters and quotes included (for quoting round trips)
literal_texts: SearchStrategy[str] = st.text(
    alphabet=st.characters(exclude_categories=("Cs",)),
    min_size=1,
    max_size=30,
)

# Pattern letters the formatter table implements
implemented_letters: SearchStrategy[str] = st.sampled_from(
    sorted("GyYuQqMLwdDEecahHKkmsSXxtT")
)
