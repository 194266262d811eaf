"""Shared constants for ldmlformat.

This module provides centralized configuration constants used across
the core, formatting, and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Sentinels: Output produced for values that cannot be formatted
- Calendar: Fixed quantities of the proleptic Gregorian calendar
- Week rules: ISO-8601 and locale-week defaults
- Cache limits: Memory bounds for caching subsystems
- Pattern syntax: Directive alphabet and quoting

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Sentinels
    "INVALID_DATE",
    # Calendar
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "DAYS_PER_WEEK",
    "MAX_EPOCH_MS",
    # Week rules
    "ISO_WEEK_STARTS_ON",
    "ISO_FIRST_WEEK_CONTAINS_DATE",
    "DEFAULT_WEEK_STARTS_ON",
    "DEFAULT_FIRST_WEEK_CONTAINS_DATE",
    "DEFAULT_ADDITIONAL_DIGITS",
    # Locale
    "DEFAULT_LOCALE",
    "MAX_LOCALE_CACHE_SIZE",
    # Pattern syntax
    "DIRECTIVE_ALPHABET",
    "QUOTE",
    "ORDINAL_MODIFIER",
]

# ============================================================================
# SENTINELS
# ============================================================================

# Returned by format() for a value that does not represent a finite instant.
# Callers format untrusted dates in bulk, so this is a value, not an exception.
INVALID_DATE: str = "Invalid Date"

# ============================================================================
# CALENDAR
# ============================================================================

MS_PER_SECOND: int = 1000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR
DAYS_PER_WEEK: int = 7

# Largest representable instant magnitude: 100,000,000 days either side of the epoch.
MAX_EPOCH_MS: int = 100_000_000 * MS_PER_DAY

# ============================================================================
# WEEK RULES
# ============================================================================
#
# Weekday numbering throughout the package: 0 = Sunday ... 6 = Saturday.
#
# ISO-8601 week: weeks start on Monday, week 1 is the week containing
# January 4th (equivalently, the first week with at least 4 days in January).
# Used by `w` and `Y` unless the caller configures a locale week.
ISO_WEEK_STARTS_ON: int = 1
ISO_FIRST_WEEK_CONTAINS_DATE: int = 4

# Locale-week defaults, applied to whichever field a caller leaves unset once
# they configure a locale week (see FormatOptions.week_rule).
DEFAULT_WEEK_STARTS_ON: int = 0
DEFAULT_FIRST_WEEK_CONTAINS_DATE: int = 1

# Extra digits accepted in ISO-8601 expanded years (+YYYYYY) during coercion.
DEFAULT_ADDITIONAL_DIGITS: int = 2

# ============================================================================
# LOCALE
# ============================================================================

# Locale used when format() is called without an explicit localizer.
DEFAULT_LOCALE: str = "en_US"

# Maximum cached LocaleContext instances.
# Prevents unbounded memory growth in multi-locale applications.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

# Unicode TR35 reserves all unquoted ASCII letters as pattern letters.
DIRECTIVE_ALPHABET: frozenset[str] = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)

QUOTE: str = "'"

# Non-standard modifier letter: applies an ordinal suffix to the preceding directive.
ORDINAL_MODIFIER: str = "o"
