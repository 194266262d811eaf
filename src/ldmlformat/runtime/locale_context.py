"""Locale context: the Babel-backed Localizer.

This module provides locale-aware names and numerals without global state
mutation. Uses Babel's CLDR data for eras, months, weekdays, quarters, day
periods, ordinal rules and week data.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Implements the Localizer protocol consumed by the formatter table
    - No dependency on Python's locale module (avoids global state)
    - Instances are cached per normalized locale code (LRU, thread-safe)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates

from ldmlformat.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from ldmlformat.diagnostics import ErrorTemplate
from ldmlformat.enums import Context, Unit, Width
from ldmlformat.locale_utils import normalize_locale
from ldmlformat.runtime.localizer import add_leading_zeros
from ldmlformat.runtime.ordinal_rules import ordinal_suffix

if TYPE_CHECKING:
    from ldmlformat.formatting.options import FormatOptions

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

_BABEL_CONTEXTS: dict[Context, str] = {
    Context.FORMATTING: "format",
    Context.STANDALONE: "stand-alone",
}


def _babel_width(width: Width) -> str:
    # Only weekdays have a "short" width in CLDR; other fields use abbreviated.
    return "abbreviated" if width is Width.SHORT else str(width)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration implementing the Localizer protocol.

    Use LocaleContext.create() factory to construct instances with proper validation.
    Direct construction via __init__ is not recommended (bypasses validation).

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse. Use class
        methods for cache management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.month(3, width=Width.WIDE, context=Context.FORMATTING)
        'April'
        >>> ctx.ordinal_number(4)
        '4th'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.locale_code  # Original code preserved
        'invalid-locale'
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Multiple threads can
        share the same instance without synchronization. Cache operations
        are protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        Thread-safe via RLock.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale codes (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> _ = LocaleContext.create('en-US')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'locales': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US.
        This method always succeeds - use create_or_raise() if you need strict validation.

        Thread Safety:
            Uses OrderedDict with RLock for thread-safe LRU caching.
            Concurrent calls with same locale_code return the same instance.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV', 'de-DE')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US fallback
            while preserving the original locale_code for debugging.
        """
        # "en-US" and "en_US" map to the same cache entry
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except (UnknownLocaleError, ValueError) as e:
            logger.warning(
                "%s (%s)", ErrorTemplate.locale_unknown(locale_code, DEFAULT_LOCALE).message, e
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have inserted meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Strict validation method that raises ValueError for invalid locales.
        Not cached.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV', 'de-DE')

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Get pre-validated Babel Locale object for this context."""
        return self._babel_locale

    # ------------------------------------------------------------------
    # Localizer protocol
    # ------------------------------------------------------------------

    def era(self, era: int, *, width: Width) -> str:
        """Era name; era is 1 for AD and -1 for BC."""
        names = babel_dates.get_era_names(_babel_width(width), locale=self._babel_locale)
        return str(names[1 if era > 0 else 0])

    def quarter(self, quarter: int, *, width: Width, context: Context) -> str:
        """Quarter name for quarter 1..4."""
        names = babel_dates.get_quarter_names(
            _babel_width(width), _BABEL_CONTEXTS[context], locale=self._babel_locale
        )
        return str(names[quarter])

    def month(self, month: int, *, width: Width, context: Context) -> str:
        """Month name for a 0-based month."""
        names = babel_dates.get_month_names(
            _babel_width(width), _BABEL_CONTEXTS[context], locale=self._babel_locale
        )
        return str(names[month + 1])

    def weekday(self, weekday: int, *, width: Width, context: Context) -> str:
        """Weekday name; weekday 0 is Sunday."""
        names = babel_dates.get_day_names(
            str(width), _BABEL_CONTEXTS[context], locale=self._babel_locale
        )
        # Babel numbers days from Monday
        return str(names[(weekday + 6) % 7])

    def time_of_day(self, hour: int, *, width: Width) -> str:
        """AM/PM marker for an hour 0..23."""
        names = babel_dates.get_period_names(
            _babel_width(width), "format", locale=self._babel_locale
        )
        return str(names["am" if hour < 12 else "pm"])

    def number(
        self,
        value: int,
        *,
        leading_zeros: int = 0,
        ordinal: bool = False,
        unit: Unit | None = None,  # noqa: ARG002
    ) -> str:
        """Render abs(value) padded to leading_zeros digits.

        With ordinal=True the locale's ordinal suffix is appended, chosen from
        the numeric value (so "04" for the 4th renders "04th" in English).
        Locales without a known suffix render the bare digits.
        """
        digits = add_leading_zeros(value, leading_zeros)
        if not ordinal:
            return digits
        suffix = ordinal_suffix(abs(value), str(self._babel_locale))
        return digits if suffix is None else digits + suffix

    def ordinal_number(self, value: int, *, unit: Unit | None = None) -> str:
        """Render value with the locale's ordinal suffix, e.g. "4th"."""
        return self.number(value, ordinal=True, unit=unit)

    # ------------------------------------------------------------------
    # Week data
    # ------------------------------------------------------------------

    def week_options(self) -> "FormatOptions":
        """Return FormatOptions carrying this locale's CLDR week rule.

        Examples:
            >>> LocaleContext.create('en-US').week_options().week_rule
            WeekRule(week_starts_on=0, first_week_contains_date=1)
            >>> LocaleContext.create('de-DE').week_options().week_rule
            WeekRule(week_starts_on=1, first_week_contains_date=4)
        """
        # Lazy import: formatting imports runtime at package level
        from ldmlformat.formatting.options import FormatOptions  # noqa: PLC0415

        return FormatOptions(
            # Babel numbers days from Monday
            week_starts_on=(self._babel_locale.first_week_day + 1) % 7,
            first_week_contains_date=self._babel_locale.min_week_days,
        )
