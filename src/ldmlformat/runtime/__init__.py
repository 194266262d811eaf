"""Locale services consumed by the formatter table.

Exports:
    Localizer: Protocol every locale source implements
    LocaleContext: Babel-backed Localizer with a per-locale LRU cache
    select_ordinal_category, ordinal_suffix: CLDR ordinal rules

Python 3.13+. Uses Babel for i18n.
"""

from .locale_context import LocaleContext
from .localizer import Localizer
from .ordinal_rules import ordinal_suffix, select_ordinal_category

__all__ = [
    "LocaleContext",
    "Localizer",
    "ordinal_suffix",
    "select_ordinal_category",
]
