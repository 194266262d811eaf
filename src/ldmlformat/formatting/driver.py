"""Format driver: validates a call, scans the pattern and joins the output.

format_date() is exported as ``ldmlformat.format``. Call-shape and option
errors abort the call before any output is produced. A date that does not
denote a finite instant is not an error: it short-circuits to the
"Invalid Date" sentinel without scanning the pattern, so callers can format
untrusted dates in bulk without per-item exception handling.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

from ldmlformat.constants import (
    DEFAULT_ADDITIONAL_DIGITS,
    DEFAULT_LOCALE,
    INVALID_DATE,
    ORDINAL_MODIFIER,
)
from ldmlformat.core.coercion import to_calendar_value
from ldmlformat.diagnostics import (
    ArityError,
    ErrorTemplate,
    PatternTypeError,
    UnknownDirectiveError,
)
from ldmlformat.formatting.formatters import FORMATTERS, RESERVED_DIRECTIVES
from ldmlformat.formatting.options import FormatOptions, resolve_options
from ldmlformat.formatting.tokens import Directive, Token, scan_pattern
from ldmlformat.runtime.locale_context import LocaleContext

if TYPE_CHECKING:
    from ldmlformat.core.value_types import CalendarValue
    from ldmlformat.runtime.localizer import Localizer

__all__ = ["format_date"]

logger = logging.getLogger(__name__)

_MISSING = object()

# Tokens easily confused with calendar year / day of month:
# (letter, lengths) -> (intended token prefix, acknowledging option)
_PROTECTED_TOKENS: dict[str, tuple[frozenset[int], str, str]] = {
    "Y": (frozenset({2, 4}), "y", "use_additional_week_year_token"),
    "D": (frozenset({1, 2}), "d", "use_additional_day_of_year_token"),
}


def _coerce_pattern(pattern: object) -> str:
    if isinstance(pattern, str):
        return pattern
    if type(pattern).__str__ is object.__str__:
        raise PatternTypeError(ErrorTemplate.pattern_not_string(type(pattern).__name__))
    return str(pattern)


def _warn_protected(directive: Directive, options: FormatOptions) -> None:
    protected = _PROTECTED_TOKENS.get(directive.letter)
    if protected is None:
        return
    lengths, intended, option_name = protected
    if directive.length not in lengths or getattr(options, option_name):
        return
    diagnostic = ErrorTemplate.protected_token(
        directive.text, intended * directive.length, option_name
    )
    logger.warning("%s", diagnostic.message)


def _render_directive(
    directive: Directive,
    value: CalendarValue,
    localizer: Localizer,
    options: FormatOptions,
) -> str:
    formatter = FORMATTERS.get(directive.letter)
    if formatter is None:
        if directive.letter in RESERVED_DIRECTIVES:
            diagnostic = ErrorTemplate.directive_reserved(directive.text, directive.position)
        else:
            diagnostic = ErrorTemplate.directive_unknown(directive.text, directive.position)
        raise UnknownDirectiveError(
            diagnostic, letter=directive.letter, position=directive.position
        )
    _warn_protected(directive, options)
    return formatter(directive.length, value, localizer, options)


def _render_tokens(
    tokens: Iterator[Token],
    value: CalendarValue,
    localizer: Localizer,
    options: FormatOptions,
) -> Iterator[str]:
    # A directive is held back one token so a following "o" can mark it ordinal.
    pending: Directive | None = None
    for token in tokens:
        if isinstance(token, Directive) and token.letter == ORDINAL_MODIFIER:
            if pending is None or token.length != 1:
                raise UnknownDirectiveError(
                    ErrorTemplate.ordinal_without_target(token.text, token.position),
                    letter=token.letter,
                    position=token.position,
                )
            yield _render_directive(pending, value, localizer, options.with_ordinal())
            pending = None
            continue

        if pending is not None:
            yield _render_directive(pending, value, localizer, options)
            pending = None

        if isinstance(token, Directive):
            pending = token
        else:
            yield token.text

    if pending is not None:
        yield _render_directive(pending, value, localizer, options)


def format_date(
    date: object = _MISSING,
    pattern: object = _MISSING,
    options: FormatOptions | Mapping[str, object] | None = None,
    *,
    localizer: Localizer | None = None,
) -> str:
    """Format a date according to a Unicode TR35 pattern.

    Args:
        date: CalendarValue, datetime, date, epoch milliseconds or ISO-8601 string
        pattern: Date pattern, e.g. "yyyy-MM-dd'T'HH:mm"; non-str objects are
            converted with str() if their type defines __str__
        options: FormatOptions, a mapping of option values, or None
        localizer: Source of names and numerals (default: en-US LocaleContext)

    Returns:
        The formatted string, or "Invalid Date" when date does not denote a
        finite instant

    Raises:
        ArityError: If date or pattern is not supplied
        PatternTypeError: If pattern has no string representation of its own
        OptionRangeError: If an option value is outside its recognized set
        UnknownDirectiveError: If the pattern contains an unquoted letter with
            no formatter, or a misplaced ordinal modifier

    Examples:
        >>> from ldmlformat.core.value_types import CalendarValue
        >>> value = CalendarValue.from_fields(1986, 3, 4, 0, 32, 55, 123)
        >>> format_date(value, "yyyy-MM-dd")
        '1986-04-04'
        >>> format_date(value, "do 'of' MMMM")
        '4th of April'
        >>> format_date(float("nan"), "yyyy")
        'Invalid Date'
    """
    if date is _MISSING or pattern is _MISSING:
        received = sum(arg is not _MISSING for arg in (date, pattern))
        raise ArityError(ErrorTemplate.arity_mismatch(received))

    pattern_text = _coerce_pattern(pattern)
    resolved = resolve_options(options)
    additional_digits = (
        DEFAULT_ADDITIONAL_DIGITS
        if resolved.additional_digits is None
        else resolved.additional_digits
    )

    value = to_calendar_value(date, additional_digits=additional_digits)
    if not value.is_valid:
        logger.debug("Date %r is not a finite instant", date)
        return INVALID_DATE

    if localizer is None:
        localizer = LocaleContext.create(DEFAULT_LOCALE)

    logger.debug("Formatting %r with pattern %r", value, pattern_text)
    return "".join(_render_tokens(scan_pattern(pattern_text), value, localizer, resolved))
