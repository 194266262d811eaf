"""LocaleContext Example - Localized Names, Ordinals and Fallback.

Demonstrates formatting one date in several locales, using a locale's CLDR
week rule, and what happens with an unknown locale code.

Scenarios covered:
1. Month, weekday and ordinal output across locales
2. Locale week numbering via LocaleContext.week_options()
3. Graceful fallback vs strict validation
4. A custom Localizer

Python 3.13+.
"""

from __future__ import annotations

import logging

import ldmlformat
from ldmlformat import CalendarValue, LocaleContext
from ldmlformat.enums import Context, Unit, Width

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

DATE = CalendarValue.from_fields(1986, 3, 1, 14, 5)


def example_1_locales() -> None:
    """Example 1: The same pattern in several locales."""
    print("=" * 60)
    print("Example 1: Localized Names")
    print("=" * 60)

    for code in ("en-US", "fr-FR", "de-DE", "lv-LV", "es-ES"):
        ctx = LocaleContext.create(code)
        result = ldmlformat.format(DATE, "EEEE, do MMMM y", localizer=ctx)
        print(f"  {code}: {result}")


def example_2_week_rules() -> None:
    """Example 2: ISO weeks vs the locale's CLDR week."""
    print("\n" + "=" * 60)
    print("Example 2: Week Numbering")
    print("=" * 60)

    new_year = CalendarValue.from_fields(2005, 0, 1)
    print(f"  ISO:   {ldmlformat.format(new_year, 'w')}")
    for code in ("en-US", "de-DE"):
        ctx = LocaleContext.create(code)
        week = ldmlformat.format(new_year, "w", ctx.week_options(), localizer=ctx)
        print(f"  {code}: {week}")


def example_3_fallback() -> None:
    """Example 3: Unknown locales fall back to en_US with a warning."""
    print("\n" + "=" * 60)
    print("Example 3: Fallback")
    print("=" * 60)

    ctx = LocaleContext.create("xx-UNKNOWN")
    print(f"  is_fallback={ctx.is_fallback}: {ldmlformat.format(DATE, 'MMMM', localizer=ctx)}")

    try:
        LocaleContext.create_or_raise("xx-UNKNOWN")
    except ValueError as e:
        print(f"  create_or_raise: {e}")


class ShoutingLocalizer:
    """Wraps a LocaleContext and upper-cases every name."""

    def __init__(self, inner: LocaleContext) -> None:
        self._inner = inner

    def era(self, era: int, *, width: Width) -> str:
        return self._inner.era(era, width=width).upper()

    def quarter(self, quarter: int, *, width: Width, context: Context) -> str:
        return self._inner.quarter(quarter, width=width, context=context).upper()

    def month(self, month: int, *, width: Width, context: Context) -> str:
        return self._inner.month(month, width=width, context=context).upper()

    def weekday(self, weekday: int, *, width: Width, context: Context) -> str:
        return self._inner.weekday(weekday, width=width, context=context).upper()

    def time_of_day(self, hour: int, *, width: Width) -> str:
        return self._inner.time_of_day(hour, width=width).upper()

    def number(
        self,
        value: int,
        *,
        leading_zeros: int = 0,
        ordinal: bool = False,
        unit: Unit | None = None,
    ) -> str:
        return self._inner.number(
            value, leading_zeros=leading_zeros, ordinal=ordinal, unit=unit
        ).upper()

    def ordinal_number(self, value: int, *, unit: Unit | None = None) -> str:
        return self.number(value, ordinal=True, unit=unit)


def example_4_custom_localizer() -> None:
    """Example 4: Any object with the Localizer methods can be passed."""
    print("\n" + "=" * 60)
    print("Example 4: Custom Localizer")
    print("=" * 60)

    shouting = ShoutingLocalizer(LocaleContext.create("en-US"))
    print(f"  {ldmlformat.format(DATE, 'EEEE, MMMM do', localizer=shouting)}")
    # Output: TUESDAY, APRIL 1ST


if __name__ == "__main__":
    example_1_locales()
    example_2_week_rules()
    example_3_fallback()
    example_4_custom_localizer()
