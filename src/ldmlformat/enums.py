"""Enumerations for ldmlformat type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so localizers written against plain
strings ("wide", "standalone") accept them unchanged.

Python 3.13+.
"""

from enum import StrEnum


class Width(StrEnum):
    """Display width requested from a localizer.

    StrEnum provides automatic string conversion: str(Width.WIDE) == "wide"
    """

    NARROW = "narrow"
    """Single letter or shortest form: A, J, T"""

    SHORT = "short"
    """Short weekday form between narrow and abbreviated: Tu"""

    ABBREVIATED = "abbreviated"
    """Common abbreviation: AD, Jan, Tue, Q1"""

    WIDE = "wide"
    """Full name: Anno Domini, January, Tuesday, 1st quarter"""


class Context(StrEnum):
    """Grammatical context for month, weekday and quarter names.

    Some languages decline names differently when they stand alone
    (calendar headers) than when embedded in a full date.
    """

    FORMATTING = "formatting"
    """Name embedded in a date: 'd MMMM' -> '4 aprile'"""

    STANDALONE = "standalone"
    """Name used on its own: 'LLLL' -> 'Aprile'"""


class Unit(StrEnum):
    """Calendar unit a number stands for.

    Passed to Localizer.number() and Localizer.ordinal_number() so that
    languages whose ordinal suffix depends on the counted noun can decline it.
    """

    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    WEEK = "week"
    DATE = "date"
    DAY_OF_YEAR = "dayOfYear"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    TIMESTAMP = "timestamp"


__all__ = [
    "Context",
    "Unit",
    "Width",
]
