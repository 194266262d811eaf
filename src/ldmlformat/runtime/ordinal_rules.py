"""CLDR ordinal rules and ordinal suffixes using Babel.

Category selection ("one", "two", "few", "many", "other") comes from Babel's
CLDR ordinal plural rules. CLDR publishes no suffix strings for numeric
ordinals, so the suffix attached to each category is kept here for the
languages that write ordinals as digits plus a suffix.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import logging

from babel.core import UnknownLocaleError

from ldmlformat.diagnostics import ErrorTemplate
from ldmlformat.locale_utils import get_babel_locale

__all__ = ["ordinal_suffix", "select_ordinal_category"]

logger = logging.getLogger(__name__)

# Languages whose suffix depends on the ordinal category.
_CATEGORY_SUFFIXES: dict[str, dict[str, str]] = {
    "en": {"one": "st", "two": "nd", "few": "rd", "other": "th"},
    "fr": {"one": "er", "other": "e"},
    "sv": {"one": ":a", "other": ":e"},
}

# Languages that use one suffix for every ordinal.
_UNIFORM_SUFFIXES: dict[str, str] = {
    "cs": ".",
    "da": ".",
    "de": ".",
    "es": "º",
    "et": ".",
    "fi": ".",
    "hr": ".",
    "hu": ".",
    "it": "º",
    "lt": "-as",
    "lv": ".",
    "nb": ".",
    "nl": "e",
    "nn": ".",
    "no": ".",
    "pl": ".",
    "pt": "º",
    "sk": ".",
    "sl": ".",
    "tr": ".",
}


def select_ordinal_category(n: int, locale: str) -> str:
    """Select the CLDR ordinal category for a number.

    Args:
        n: Number to categorize
        locale: Locale code (e.g., "en_US", "sv-SE")

    Returns:
        Ordinal category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_ordinal_category(1, "en_US")
        'one'
        >>> select_ordinal_category(12, "en_US")
        'other'
        >>> select_ordinal_category(23, "en_US")
        'few'

    If locale parsing fails, every number is "other".
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return "other"
    return locale_obj.ordinal_form(n)


def ordinal_suffix(n: int, locale: str) -> str | None:
    """Return the suffix that turns the digits of n into an ordinal.

    Args:
        n: Non-negative number being rendered
        locale: Locale code

    Returns:
        Suffix string, or None when no suffix is known for the locale

    Examples:
        >>> ordinal_suffix(22, "en-US")
        'nd'
        >>> ordinal_suffix(3, "de_DE")
        '.'
    """
    language = locale.replace("-", "_").split("_", 1)[0].lower()
    uniform = _UNIFORM_SUFFIXES.get(language)
    if uniform is not None:
        return uniform

    table = _CATEGORY_SUFFIXES.get(language)
    category = select_ordinal_category(n, locale)
    if table is None or category not in table:
        logger.debug("%s", ErrorTemplate.ordinal_data_missing(locale, category).message)
        return None
    return table[category]
