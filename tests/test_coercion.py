"""Tests for to_calendar_value() date coercion."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta, timezone
from decimal import Decimal

import pytest
from hypothesis import given

from ldmlformat.core.coercion import to_calendar_value
from ldmlformat.core.value_types import CalendarValue
from tests.strategies import aware_datetimes

IST = timezone(timedelta(hours=5, minutes=30))


class TestDatetimes:
    """datetime and date inputs."""

    def test_aware_datetime_keeps_wall_clock_and_offset(self) -> None:
        """Fields are wall-clock; the instant is the true UTC instant."""
        value = to_calendar_value(datetime(2020, 1, 1, 5, 30, tzinfo=IST))
        assert (value.year, value.month, value.day, value.hour, value.minute) == (
            2020, 0, 1, 5, 30,
        )
        assert value.utc_offset_minutes == 330
        assert value.epoch_ms == datetime(2020, 1, 1, tzinfo=UTC).timestamp() * 1000

    def test_naive_datetime_is_utc(self) -> None:
        """Naive datetimes are read as UTC."""
        value = to_calendar_value(datetime(1986, 4, 4, 0, 32, 55, 123000))  # noqa: DTZ001
        assert value.utc_offset_minutes == 0
        assert value.epoch_ms == 512958775123

    def test_microseconds_truncate(self) -> None:
        """Sub-millisecond precision is dropped."""
        value = to_calendar_value(datetime(2020, 1, 1, microsecond=123999, tzinfo=UTC))
        assert value.millisecond == 123

    def test_date_is_midnight_utc(self) -> None:
        """A date becomes midnight UTC."""
        value = to_calendar_value(date(1992, 12, 31))
        assert (value.year, value.month, value.day, value.hour) == (1992, 11, 31, 0)
        assert value.utc_offset_minutes == 0

    @given(moment=aware_datetimes())
    def test_instant_matches_timestamp(self, moment: datetime) -> None:
        """epoch_ms equals the datetime's own timestamp, truncated to ms."""
        value = to_calendar_value(moment)
        delta = moment - datetime(1970, 1, 1, tzinfo=UTC)
        assert value.epoch_ms == delta // timedelta(milliseconds=1)

    @pytest.mark.parametrize(
        ("offset", "minutes"),
        [
            (-timedelta(minutes=5, seconds=30), -5),
            (timedelta(minutes=19, seconds=32), 19),
        ],
    )
    def test_offset_with_seconds_keeps_exact_instant(
        self, offset: timedelta, minutes: int
    ) -> None:
        """Sub-minute offsets shift the instant exactly; the offset field truncates."""
        moment = datetime(2020, 1, 1, 12, tzinfo=timezone(offset))
        value = to_calendar_value(moment)
        delta = moment - datetime(1970, 1, 1, tzinfo=UTC)
        assert value.epoch_ms == delta // timedelta(milliseconds=1)
        assert value.utc_offset_minutes == minutes
        assert (value.hour, value.minute) == (12, 0)


class TestNumbers:
    """Epoch-millisecond inputs."""

    def test_zero_is_epoch(self) -> None:
        """0 is 1970-01-01T00:00Z."""
        value = to_calendar_value(0)
        assert (value.year, value.month, value.day) == (1970, 0, 1)

    def test_float(self) -> None:
        """Floats are milliseconds, truncated."""
        assert to_calendar_value(512958775123.9).epoch_ms == 512958775123

    @pytest.mark.parametrize("raw", [math.nan, math.inf, -math.inf, True, False])
    def test_invalid_numbers(self, raw: object) -> None:
        """Non-finite numbers and booleans are invalid."""
        assert not to_calendar_value(raw).is_valid


class TestStrings:
    """ISO-8601 string inputs."""

    def test_local_datetime(self) -> None:
        """Date-time without offset is UTC."""
        value = to_calendar_value("1986-04-04T00:32:55.123")
        assert value == CalendarValue.from_fields(1986, 3, 4, 0, 32, 55, 123)

    def test_date_only(self) -> None:
        """Date-only strings are midnight."""
        assert to_calendar_value("1992-12-31") == CalendarValue.from_fields(1992, 11, 31)

    def test_with_offset(self) -> None:
        """An explicit offset is kept."""
        value = to_calendar_value("1986-04-04T00:32:55.123+02:00")
        assert value.hour == 0
        assert value.utc_offset_minutes == 120
        assert value.epoch_ms == 512958775123 - 2 * 3_600_000

    def test_zulu(self) -> None:
        """Z is offset zero."""
        value = to_calendar_value("2020-01-01T00:00:00Z")
        assert value.utc_offset_minutes == 0
        assert value.epoch_ms == 1577836800000

    @pytest.mark.parametrize(
        ("text", "fields"),
        [
            ("+012345-06-07", (12345, 5, 7)),
            ("-000001-01-01", (-1, 0, 1)),
            ("+000000-01-01", (0, 0, 1)),
            ("+002020-02-29", (2020, 1, 29)),
        ],
    )
    def test_expanded_years(self, text: str, fields: tuple[int, int, int]) -> None:
        """Six-digit signed years are accepted by default."""
        value = to_calendar_value(text)
        assert (value.year, value.month, value.day) == fields

    def test_expanded_year_with_time_and_offset(self) -> None:
        """The remainder after the year may carry time and offset."""
        value = to_calendar_value("+012345-06-07T08:09:10+01:00")
        assert (value.year, value.hour, value.minute, value.second) == (12345, 8, 9, 10)
        assert value.utc_offset_minutes == 60

    def test_year_only_expanded(self) -> None:
        """A bare expanded year is January 1st."""
        assert to_calendar_value("-000100") == CalendarValue.from_fields(-100, 0, 1)

    @pytest.mark.parametrize(
        ("text", "additional_digits", "valid"),
        [
            ("+2020-01-01", 0, True),
            ("+2020-01-01", 2, False),
            ("+02020-01-01", 1, True),
            ("+02020-01-01", 2, False),
            ("+002020-01-01", 1, False),
        ],
    )
    def test_additional_digits_controls_expanded_width(
        self, text: str, additional_digits: int, valid: bool
    ) -> None:
        """The expanded year must have exactly 4 + additional_digits digits."""
        value = to_calendar_value(text, additional_digits=additional_digits)
        assert value.is_valid is valid

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "not a date",
            "2020-13-01",
            "2019-02-29",
            "+002019-02-29",
            "+999999-01-01",
            "+002020-1-1",
            "+002001-W01-1",
            "+002020-001",
        ],
    )
    def test_unparseable_strings_are_invalid(self, text: str) -> None:
        """Bad strings never raise; they become invalid values."""
        assert not to_calendar_value(text).is_valid


class TestOtherInputs:
    """Passthrough and unsupported inputs."""

    def test_calendar_value_passthrough(self) -> None:
        """A CalendarValue is returned as is."""
        value = CalendarValue.from_fields(-44, 2, 15)
        assert to_calendar_value(value) is value

    @pytest.mark.parametrize("raw", [None, object(), Decimal(0), [2020, 1, 1]])
    def test_unsupported_types_are_invalid(self, raw: object) -> None:
        """Unsupported types become invalid values."""
        assert not to_calendar_value(raw).is_valid
