"""ldmlformat - Unicode TR35 date pattern formatting.

Formats dates with CLDR-style patterns ("yyyy-MM-dd", "do 'of' MMMM",
"h:mm a") using locale data from Babel. Supports years outside datetime's
range, ISO-8601 and locale week numbering, and an ordinal modifier ("do").

Public API:
    format - Format a date according to a pattern
    CalendarValue - Immutable date value (any signed year)
    FormatOptions - Week rule and protected-token options
    Localizer - Protocol for custom locale sources
    LocaleContext - Babel-backed Localizer
    to_calendar_value - Coerce datetime, epoch milliseconds or ISO strings

Exceptions:
    DateFormatError - Base exception class
    ArityError, PatternTypeError - Malformed calls
    OptionRangeError - Option outside its recognized set
    UnknownDirectiveError - Unimplemented or unknown pattern letter
    InvalidDateError - Calendar helper called with an invalid date

Submodules:
    ldmlformat.core - CalendarValue and calendar arithmetic
    ldmlformat.formatting - Scanner, formatter table and driver
    ldmlformat.runtime - Localizer protocol, LocaleContext, ordinal rules
    ldmlformat.diagnostics - Error types, codes and formatters
"""

from .core import CalendarValue, to_calendar_value
from .diagnostics import (
    ArityError,
    DateFormatError,
    InvalidDateError,
    OptionRangeError,
    PatternTypeError,
    UnknownDirectiveError,
)
from .formatting import FormatOptions
from .formatting import format_date as format  # noqa: A004
from .runtime import LocaleContext, Localizer

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("ldmlformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArityError",
    "CalendarValue",
    "DateFormatError",
    "FormatOptions",
    "InvalidDateError",
    "LocaleContext",
    "Localizer",
    "OptionRangeError",
    "PatternTypeError",
    "UnknownDirectiveError",
    "__version__",
    "format",
    "to_calendar_value",
]
