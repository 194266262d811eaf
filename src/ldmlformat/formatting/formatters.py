"""Unit formatter table: one function per implemented pattern letter.

Every formatter has the signature::

    (length, value, localizer, options) -> str

where ``length`` is the directive's run length (unbounded), ``value`` a valid
CalendarValue, ``localizer`` the source of all names and numerals, and
``options`` the resolved FormatOptions. Lengths past the documented range fall
through to the widest form, the way CLDR treats over-long runs.

Numeric output always goes through Localizer.number() so padding and ordinal
suffixes are applied in one place. Only ``u`` renders a sign; every other
numeric directive renders the absolute value.

Letters reserved by Unicode TR35 but not implemented are listed in
RESERVED_DIRECTIVES; the driver rejects them with a distinct diagnostic code.

Thread-safe. The table is a read-only mapping.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from types import MappingProxyType
from typing import TypeAlias

from ldmlformat.core.calendar import day_of_year, iso_week, iso_week_year
from ldmlformat.core.value_types import CalendarValue
from ldmlformat.enums import Context, Unit, Width
from ldmlformat.formatting.options import FormatOptions
from ldmlformat.runtime.localizer import Localizer, add_leading_zeros

__all__ = [
    "FORMATTERS",
    "RESERVED_DIRECTIVES",
    "UnitFormatter",
    "add_leading_zeros",
]

UnitFormatter: TypeAlias = Callable[[int, CalendarValue, Localizer, FormatOptions], str]

# Letters Unicode TR35 assigns a meaning that this table does not implement:
# milliseconds in day, cyclic year, week of month, day of week in month,
# flexible day periods, time zone names, related Gregorian year, skeleton-only
# hour letters.
RESERVED_DIRECTIVES: frozenset[str] = frozenset("ABCFJOUVWZbgjlrvz")


def _render_number(
    value: int,
    length: int,
    localizer: Localizer,
    options: FormatOptions,
    unit: Unit | None = None,
    *,
    signed: bool = False,
) -> str:
    digits = localizer.number(abs(value), leading_zeros=length, ordinal=options.ordinal, unit=unit)
    if signed and value < 0:
        return "-" + digits
    return digits


def _display_year(signed_year: int) -> int:
    # Astronomical year 0 is 1 BC, -1 is 2 BC.
    return signed_year if signed_year > 0 else 1 - signed_year


def _render_year(
    year: int, length: int, localizer: Localizer, options: FormatOptions
) -> str:
    if length == 2:
        return _render_number(year % 100, 2, localizer, options, Unit.YEAR)
    return _render_number(year, length, localizer, options, Unit.YEAR)


def _text_width(length: int) -> Width:
    # 3 -> abbreviated, 5 -> narrow, 4 and longer runs -> wide
    match length:
        case 3:
            return Width.ABBREVIATED
        case 5:
            return Width.NARROW
        case _:
            return Width.WIDE


def _format_offset(offset_minutes: int, delimiter: str = "") -> str:
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return sign + add_leading_zeros(hours, 2) + delimiter + add_leading_zeros(minutes, 2)


# ---------------------------------------------------------------------------
# Era and years
# ---------------------------------------------------------------------------


def _era(length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions) -> str:
    era = 1 if value.year > 0 else -1
    if length <= 3:
        return localizer.era(era, width=Width.ABBREVIATED)
    if length == 5:
        return localizer.era(era, width=Width.NARROW)
    return localizer.era(era, width=Width.WIDE)


def _year(length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions) -> str:
    # | Year     |     y | yy |   yyy |  yyyy | yyyyy |
    # |----------|-------|----|-------|-------|-------|
    # | AD 1     |     1 | 01 |   001 |  0001 | 00001 |
    # | AD 123   |   123 | 23 |   123 |  0123 | 00123 |
    # | AD 12345 | 12345 | 45 | 12345 | 12345 | 12345 |
    return _render_year(_display_year(value.year), length, localizer, options)


def _week_year(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    week_year = iso_week_year(value, options)
    return _render_year(_display_year(week_year), length, localizer, options)


def _extended_year(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    # 1 BC -> 0, 2 BC -> -1; uu pads instead of truncating
    return _render_number(value.year, length, localizer, options, Unit.YEAR, signed=True)


# ---------------------------------------------------------------------------
# Quarter and month
# ---------------------------------------------------------------------------


def _quarter_formatter(context: Context) -> UnitFormatter:
    def format_quarter(
        length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
    ) -> str:
        quarter = value.month // 3 + 1
        if length <= 2:
            return _render_number(quarter, length, localizer, options, Unit.QUARTER)
        width = Width.ABBREVIATED if length == 3 else Width.WIDE
        return localizer.quarter(quarter, width=width, context=context)

    return format_quarter


def _month_formatter(context: Context) -> UnitFormatter:
    def format_month(
        length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
    ) -> str:
        if length <= 2:
            return _render_number(value.month + 1, length, localizer, options, Unit.MONTH)
        return localizer.month(value.month, width=_text_width(length), context=context)

    return format_month


# ---------------------------------------------------------------------------
# Week and day
# ---------------------------------------------------------------------------


def _week(length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions) -> str:
    return _render_number(iso_week(value, options), length, localizer, options, Unit.WEEK)


def _day_of_month(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(value.day, length, localizer, options, Unit.DATE)


def _day_of_year(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(
        day_of_year(value, options), length, localizer, options, Unit.DAY_OF_YEAR
    )


def _weekday_formatter(context: Context) -> UnitFormatter:
    def format_weekday(
        length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
    ) -> str:
        match length:
            case 1 | 2 | 3:
                width = Width.ABBREVIATED
            case 5:
                width = Width.NARROW
            case 6:
                width = Width.SHORT
            case _:
                width = Width.WIDE
        return localizer.weekday(value.weekday, width=width, context=context)

    return format_weekday


# ---------------------------------------------------------------------------
# Time of day
# ---------------------------------------------------------------------------


def _day_period(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return localizer.time_of_day(value.hour, width=Width.NARROW)


def _hour_1_12(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(value.hour % 12 or 12, length, localizer, options, Unit.HOUR)


def _hour_0_23(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(value.hour, length, localizer, options, Unit.HOUR)


def _hour_0_11(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(value.hour % 12, length, localizer, options, Unit.HOUR)


def _hour_1_24(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(value.hour or 24, length, localizer, options, Unit.HOUR)


def _minute(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(value.minute, length, localizer, options, Unit.MINUTE)


def _second(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(value.second, length, localizer, options, Unit.SECOND)


def _fraction(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    # Truncates: 123 ms -> S "1", SS "12", SSSS "1230"
    if length <= 3:
        fraction = value.millisecond // 10 ** (3 - length)
    else:
        fraction = value.millisecond * 10 ** (length - 3)
    return _render_number(fraction, length, localizer, options)


# ---------------------------------------------------------------------------
# Time zone offset and timestamps
# ---------------------------------------------------------------------------


def _offset_formatter(*, zulu: bool) -> UnitFormatter:
    def format_offset(
        length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
    ) -> str:
        offset = value.utc_offset_minutes
        if zulu and offset == 0:
            return "Z"
        match length:
            case 1:
                # Hours and optional minutes
                if offset % 60 == 0:
                    sign = "+" if offset >= 0 else "-"
                    return sign + add_leading_zeros(abs(offset) // 60, 2)
                return _format_offset(offset)
            case 2 | 4:
                # Offsets carry no seconds, so XXXX matches XX
                return _format_offset(offset)
            case _:
                return _format_offset(offset, ":")

    return format_offset


def _seconds_timestamp(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    seconds = int(value.epoch_ms) // 1000
    return _render_number(seconds, length, localizer, options, Unit.TIMESTAMP)


def _milliseconds_timestamp(
    length: int, value: CalendarValue, localizer: Localizer, options: FormatOptions
) -> str:
    return _render_number(int(value.epoch_ms), length, localizer, options, Unit.TIMESTAMP)


FORMATTERS: MappingProxyType[str, UnitFormatter] = MappingProxyType(
    {
        "G": _era,
        "y": _year,
        "Y": _week_year,
        "u": _extended_year,
        "Q": _quarter_formatter(Context.FORMATTING),
        "q": _quarter_formatter(Context.STANDALONE),
        "M": _month_formatter(Context.FORMATTING),
        "L": _month_formatter(Context.STANDALONE),
        "w": _week,
        "d": _day_of_month,
        "D": _day_of_year,
        "E": _weekday_formatter(Context.FORMATTING),
        "e": _weekday_formatter(Context.FORMATTING),
        "c": _weekday_formatter(Context.STANDALONE),
        "a": _day_period,
        "h": _hour_1_12,
        "H": _hour_0_23,
        "K": _hour_0_11,
        "k": _hour_1_24,
        "m": _minute,
        "s": _second,
        "S": _fraction,
        "X": _offset_formatter(zulu=True),
        "x": _offset_formatter(zulu=False),
        "t": _seconds_timestamp,
        "T": _milliseconds_timestamp,
    }
)
