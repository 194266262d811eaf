"""Core value type consumed by the formatter.

Defines CalendarValue, an immutable snapshot of a point in time expressed as
civil-calendar fields plus the instant it denotes. Unlike datetime it covers
year 0 and negative (BC) years, and it can represent an invalid instant,
which format() turns into the "Invalid Date" sentinel.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ldmlformat.constants import (
    MAX_EPOCH_MS,
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from ldmlformat.core.calendar import (
    civil_from_days,
    days_from_civil,
    days_in_month,
    weekday_from_days,
)

__all__ = ["CalendarValue"]


@dataclass(frozen=True, slots=True)
class CalendarValue:
    """Immutable civil-calendar snapshot of an instant.

    The calendar fields are wall-clock fields at ``utc_offset_minutes`` from
    UTC; formatters read them as if they were already in the display zone.
    Only the timezone (X, x) and timestamp (t, T) directives look at
    ``epoch_ms`` and ``utc_offset_minutes``.

    Use CalendarValue.from_fields() or CalendarValue.from_epoch_ms() to
    construct instances; both keep the fields and the instant consistent.

    Attributes:
        year: Signed astronomical year (0 = 1 BC, -1 = 2 BC)
        month: Month, 0-based [0..11]
        day: Day of month [1..31]
        hour: Hour [0..23]
        minute: Minute [0..59]
        second: Second [0..59]
        millisecond: Millisecond [0..999]
        epoch_ms: Milliseconds since 1970-01-01T00:00Z; NaN when invalid
        utc_offset_minutes: Offset of the wall clock from UTC, east positive

    Examples:
        >>> value = CalendarValue.from_fields(1986, 3, 4, 0, 32, 55, 123)
        >>> value.epoch_ms
        512958775123
        >>> CalendarValue.invalid().is_valid
        False
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    millisecond: int = 0
    epoch_ms: int | float = 0
    utc_offset_minutes: int = 0

    def __post_init__(self) -> None:
        """Validate field ranges of a valid value.

        Raises:
            ValueError: If any calendar field is out of range
        """
        if not self.is_valid:
            return
        if not 0 <= self.month <= 11:
            msg = f"CalendarValue.month must be in [0, 11], got {self.month}"
            raise ValueError(msg)
        max_day = days_in_month(self.year, self.month + 1)
        if not 1 <= self.day <= max_day:
            msg = f"CalendarValue.day must be in [1, {max_day}], got {self.day}"
            raise ValueError(msg)
        for name, upper in (("hour", 23), ("minute", 59), ("second", 59), ("millisecond", 999)):
            field_value = getattr(self, name)
            if not 0 <= field_value <= upper:
                msg = f"CalendarValue.{name} must be in [0, {upper}], got {field_value}"
                raise ValueError(msg)

    @classmethod
    def invalid(cls) -> CalendarValue:
        """Return the invalid value (NaN instant)."""
        return cls(year=0, month=0, day=1, epoch_ms=math.nan)

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        utc_offset_minutes: int = 0,
    ) -> CalendarValue:
        """Build a value from wall-clock fields.

        Args:
            year: Signed astronomical year
            month: Month, 0-based
            day: Day of month
            hour: Hour [0..23]
            minute: Minute [0..59]
            second: Second [0..59]
            millisecond: Millisecond [0..999]
            utc_offset_minutes: Offset of the wall clock from UTC, east positive

        Returns:
            CalendarValue whose instant is the wall-clock time minus the offset

        Raises:
            ValueError: If any field is out of range
        """
        if not 0 <= month <= 11:
            msg = f"CalendarValue.month must be in [0, 11], got {month}"
            raise ValueError(msg)
        days = days_from_civil(year, month + 1, day)
        local_ms = (
            days * MS_PER_DAY
            + hour * MS_PER_HOUR
            + minute * MS_PER_MINUTE
            + second * MS_PER_SECOND
            + millisecond
        )
        return cls(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
            epoch_ms=local_ms - utc_offset_minutes * MS_PER_MINUTE,
            utc_offset_minutes=utc_offset_minutes,
        )

    @classmethod
    def from_epoch_ms(
        cls, epoch_ms: int | float, *, utc_offset_minutes: int = 0
    ) -> CalendarValue:
        """Build a value from milliseconds since the Unix epoch.

        Fractional milliseconds are truncated toward zero. NaN, infinities and
        instants beyond MAX_EPOCH_MS produce the invalid value.

        Args:
            epoch_ms: Milliseconds since 1970-01-01T00:00Z
            utc_offset_minutes: Offset of the wall clock to derive fields for

        Returns:
            CalendarValue with wall-clock fields at the given offset
        """
        if abs(epoch_ms) > MAX_EPOCH_MS or math.isnan(epoch_ms):
            return cls.invalid()
        instant = math.trunc(epoch_ms)
        days, remainder = divmod(instant + utc_offset_minutes * MS_PER_MINUTE, MS_PER_DAY)
        year, month, day = civil_from_days(days)
        hour, remainder = divmod(remainder, MS_PER_HOUR)
        minute, remainder = divmod(remainder, MS_PER_MINUTE)
        second, millisecond = divmod(remainder, MS_PER_SECOND)
        return cls(
            year=year,
            month=month - 1,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            millisecond=millisecond,
            epoch_ms=instant,
            utc_offset_minutes=utc_offset_minutes,
        )

    @property
    def is_valid(self) -> bool:
        """True if the value denotes a finite instant."""
        return math.isfinite(self.epoch_ms)

    @property
    def days(self) -> int:
        """Days since 1970-01-01 of the wall-clock date."""
        return days_from_civil(self.year, self.month + 1, self.day)

    @property
    def weekday(self) -> int:
        """Day of week of the wall-clock date (0 = Sunday ... 6 = Saturday)."""
        return weekday_from_days(self.days)
