"""Format options and their normalization.

FormatOptions is validated on construction; resolve_options() accepts the
shapes callers actually pass (None, a FormatOptions, or a mapping with
snake_case or camelCase keys) and returns a validated FormatOptions.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from numbers import Real

from ldmlformat.constants import (
    DEFAULT_FIRST_WEEK_CONTAINS_DATE,
    DEFAULT_WEEK_STARTS_ON,
)
from ldmlformat.core.calendar import ISO_WEEK_RULE, WeekRule
from ldmlformat.diagnostics import ErrorTemplate, OptionRangeError

__all__ = [
    "FormatOptions",
    "normalize_additional_digits",
    "resolve_options",
]

_ADDITIONAL_DIGITS_ALLOWED = (0, 1, 2)

# camelCase aliases accepted in option mappings.
_OPTION_ALIASES: dict[str, str] = {
    "additionalDigits": "additional_digits",
    "weekStartsOn": "week_starts_on",
    "firstWeekContainsDate": "first_week_contains_date",
    "useAdditionalWeekYearToken": "use_additional_week_year_token",
    "useAdditionalDayOfYearToken": "use_additional_day_of_year_token",
}

_PUBLIC_OPTIONS = frozenset(_OPTION_ALIASES.values())


def normalize_additional_digits(value: object) -> int | None:
    """Coerce an additional_digits option to one of 0, 1, 2 or None.

    Accepts integers, integral reals (2.0) and decimal strings ("2").

    Args:
        value: Raw option value

    Returns:
        0, 1, 2, or None when the option is absent

    Raises:
        OptionRangeError: If the value does not convert to 0, 1, 2 or None

    Examples:
        >>> normalize_additional_digits("1")
        1
        >>> normalize_additional_digits(None) is None
        True
        >>> normalize_additional_digits(float("nan"))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        OptionRangeError: additional_digits must be 0, 1, 2 or None, got nan
    """
    if value is None:
        return None

    number: int | None = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, Real) and math.isfinite(value) and float(value).is_integer():
        number = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        number = int(value.strip())

    if number not in _ADDITIONAL_DIGITS_ALLOWED:
        raise OptionRangeError(
            ErrorTemplate.option_out_of_range("additional_digits", value, "0, 1, 2 or None"),
            option_name="additional_digits",
        )
    return number


def _check_int_range(name: str, value: object, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise OptionRangeError(
            ErrorTemplate.option_type_mismatch(name, value, "int"), option_name=name
        )
    if not low <= value <= high:
        raise OptionRangeError(
            ErrorTemplate.option_out_of_range(name, value, f"between {low} and {high}"),
            option_name=name,
        )


def _check_bool(name: str, value: object) -> None:
    if not isinstance(value, bool):
        raise OptionRangeError(
            ErrorTemplate.option_type_mismatch(name, value, "bool"), option_name=name
        )


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options recognized by format().

    Week numbering (directives ``w`` and ``Y``) follows ISO-8601 while both
    week fields are None. Setting either one switches to a locale week, with
    the unset field taking its default (week_starts_on=0, Sunday;
    first_week_contains_date=1).

    Attributes:
        additional_digits: Extra year digits accepted in ISO-8601 expanded-year
            strings during date coercion (0, 1, 2; None means 2)
        week_starts_on: First day of the week, 0 = Sunday ... 6 = Saturday
        first_week_contains_date: Week 1 contains this day of January (1..7)
        use_additional_week_year_token: Acknowledge intentional YY / YYYY use
        use_additional_day_of_year_token: Acknowledge intentional D / DD use
        ordinal: Internal flag set by the driver for a directive followed by
            the ``o`` modifier

    Raises:
        OptionRangeError: On construction with a value outside its recognized set
    """

    additional_digits: int | None = None
    week_starts_on: int | None = None
    first_week_contains_date: int | None = None
    use_additional_week_year_token: bool = False
    use_additional_day_of_year_token: bool = False
    ordinal: bool = False

    def __post_init__(self) -> None:
        """Validate option values."""
        if self.additional_digits is not None and (
            isinstance(self.additional_digits, bool)
            or self.additional_digits not in _ADDITIONAL_DIGITS_ALLOWED
        ):
            raise OptionRangeError(
                ErrorTemplate.option_out_of_range(
                    "additional_digits", self.additional_digits, "0, 1, 2 or None"
                ),
                option_name="additional_digits",
            )
        if self.week_starts_on is not None:
            _check_int_range("week_starts_on", self.week_starts_on, 0, 6)
        if self.first_week_contains_date is not None:
            _check_int_range("first_week_contains_date", self.first_week_contains_date, 1, 7)
        _check_bool("use_additional_week_year_token", self.use_additional_week_year_token)
        _check_bool("use_additional_day_of_year_token", self.use_additional_day_of_year_token)
        _check_bool("ordinal", self.ordinal)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> FormatOptions:
        """Build options from a mapping with snake_case or camelCase keys.

        Args:
            mapping: Option values, e.g. {"weekStartsOn": 1}

        Returns:
            Validated FormatOptions

        Raises:
            OptionRangeError: On unknown keys or out-of-range values
        """
        values: dict[str, object] = {}
        for key, value in mapping.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in _PUBLIC_OPTIONS:
                raise OptionRangeError(ErrorTemplate.option_unknown(key), option_name=key)
            values[name] = value
        if "additional_digits" in values:
            values["additional_digits"] = normalize_additional_digits(
                values["additional_digits"]
            )
        return cls(**values)  # type: ignore[arg-type]

    @property
    def week_rule(self) -> WeekRule:
        """Week numbering rule in effect for these options."""
        if self.week_starts_on is None and self.first_week_contains_date is None:
            return ISO_WEEK_RULE
        return WeekRule(
            DEFAULT_WEEK_STARTS_ON if self.week_starts_on is None else self.week_starts_on,
            (
                DEFAULT_FIRST_WEEK_CONTAINS_DATE
                if self.first_week_contains_date is None
                else self.first_week_contains_date
            ),
        )

    def with_ordinal(self) -> FormatOptions:
        """Return a copy with the ordinal flag set."""
        return replace(self, ordinal=True)


def resolve_options(options: FormatOptions | Mapping[str, object] | None) -> FormatOptions:
    """Normalize the options argument of format().

    Args:
        options: None, a FormatOptions, or a mapping of option values

    Returns:
        Validated FormatOptions (defaults when None)

    Raises:
        OptionRangeError: On unknown keys, wrong types or out-of-range values
    """
    if options is None:
        return FormatOptions()
    if isinstance(options, FormatOptions):
        return options
    if isinstance(options, Mapping):
        return FormatOptions.from_mapping(options)
    raise OptionRangeError(
        ErrorTemplate.option_type_mismatch("options", options, "FormatOptions or mapping"),
        option_name="options",
    )
