"""Localizer capability consumed by the unit formatters.

The formatter table never hardcodes names: eras, quarters, months, weekdays,
day periods and ordinal suffixes all come from a Localizer passed explicitly
to every call. LocaleContext is the Babel-backed implementation; any object
with these methods works (tests use a small stub).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ldmlformat.enums import Context, Unit, Width

__all__ = ["Localizer", "add_leading_zeros"]


def add_leading_zeros(value: int, target_length: int) -> str:
    """Render abs(value) in decimal, left-padded with '0' to target_length.

    The sign is dropped; callers that render signed quantities prepend it.

    Examples:
        >>> add_leading_zeros(94, 5)
        '00094'
        >>> add_leading_zeros(-1, 2)
        '01'
        >>> add_leading_zeros(1986, 2)
        '1986'
    """
    return str(abs(value)).rjust(target_length, "0")


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class Localizer(Protocol):
    """Source of all locale-specific text used by format().

    Implementations must be safe for concurrent read-only use.

    Index conventions:
        era: 1 for AD (year > 0), -1 for BC
        quarter: 1..4
        month: 0..11
        weekday: 0 = Sunday ... 6 = Saturday
        hour: 0..23
    """

    def era(self, era: int, *, width: Width) -> str:
        """Era name, e.g. "AD" / "Anno Domini" / "A"."""
        ...

    def quarter(self, quarter: int, *, width: Width, context: Context) -> str:
        """Quarter name, e.g. "Q2" / "2nd quarter"."""
        ...

    def month(self, month: int, *, width: Width, context: Context) -> str:
        """Month name, e.g. "Apr" / "April" / "A"."""
        ...

    def weekday(self, weekday: int, *, width: Width, context: Context) -> str:
        """Weekday name, e.g. "Fri" / "Friday" / "F" / "Fr"."""
        ...

    def time_of_day(self, hour: int, *, width: Width) -> str:
        """Day period for an hour, e.g. "AM" / "PM"."""
        ...

    def number(
        self,
        value: int,
        *,
        leading_zeros: int = 0,
        ordinal: bool = False,
        unit: Unit | None = None,
    ) -> str:
        """Numeric rendering padded to leading_zeros digits, optionally ordinal."""
        ...

    def ordinal_number(self, value: int, *, unit: Unit | None = None) -> str:
        """Ordinal rendering, e.g. "4th"."""
        ...
# pylint: enable=unnecessary-ellipsis
