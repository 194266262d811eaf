"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL (Unicode TR35, dates part)
    _DOCS_BASE = "https://www.unicode.org/reports/tr35/tr35-dates.html"

    @staticmethod
    def invalid_date(operation: str) -> Diagnostic:
        """Calendar arithmetic received a non-finite instant.

        Args:
            operation: Name of the calendar function that was called

        Returns:
            Diagnostic for INVALID_DATE
        """
        msg = f"{operation}() requires a valid date, got a non-finite instant"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE,
            message=msg,
            hint="Check CalendarValue.is_valid before calling calendar helpers",
        )

    @staticmethod
    def arity_mismatch(received: int) -> Diagnostic:
        """format() called with fewer than two positional arguments.

        Args:
            received: Number of positional arguments actually supplied

        Returns:
            Diagnostic for ARITY_MISMATCH
        """
        msg = f"format() requires 2 arguments (date, pattern), but only {received} present"
        return Diagnostic(
            code=DiagnosticCode.ARITY_MISMATCH,
            message=msg,
            hint="Call format(date, pattern) or format(date, pattern, options)",
        )

    @staticmethod
    def pattern_not_string(type_name: str) -> Diagnostic:
        """Pattern argument cannot be converted to a string.

        Args:
            type_name: Type name of the rejected pattern

        Returns:
            Diagnostic for PATTERN_NOT_STRING
        """
        msg = f"Pattern must be a string, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOT_STRING,
            message=msg,
            received=type_name,
            hint="Pass a str or an object that defines __str__",
        )

    @staticmethod
    def option_out_of_range(option_name: str, value: object, allowed: str) -> Diagnostic:
        """Option value outside its recognized set.

        Args:
            option_name: Option name (snake_case)
            value: The rejected value
            allowed: Human-readable description of the accepted values

        Returns:
            Diagnostic for OPTION_OUT_OF_RANGE
        """
        msg = f"{option_name} must be {allowed}, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_OUT_OF_RANGE,
            message=msg,
            option_name=option_name,
            received=repr(value),
        )

    @staticmethod
    def option_type_mismatch(option_name: str, value: object, expected: str) -> Diagnostic:
        """Option value of the wrong type.

        Args:
            option_name: Option name (snake_case)
            value: The rejected value
            expected: Expected type name

        Returns:
            Diagnostic for OPTION_TYPE_MISMATCH
        """
        msg = f"{option_name} must be {expected}, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.OPTION_TYPE_MISMATCH,
            message=msg,
            option_name=option_name,
            received=repr(value),
        )

    @staticmethod
    def option_unknown(option_name: str) -> Diagnostic:
        """Options mapping contains an unrecognized key.

        Args:
            option_name: The unrecognized key

        Returns:
            Diagnostic for OPTION_UNKNOWN
        """
        msg = f"Unknown format option '{option_name}'"
        return Diagnostic(
            code=DiagnosticCode.OPTION_UNKNOWN,
            message=msg,
            option_name=option_name,
            hint=(
                "Recognized options: additional_digits, week_starts_on, "
                "first_week_contains_date, use_additional_week_year_token, "
                "use_additional_day_of_year_token"
            ),
        )

    @staticmethod
    def directive_unknown(directive: str, position: int) -> Diagnostic:
        """Unquoted pattern letter that is neither implemented nor reserved.

        Args:
            directive: The full letter run, e.g. "ii"
            position: 0-based offset in the pattern

        Returns:
            Diagnostic for DIRECTIVE_UNKNOWN
        """
        letter = directive[0]
        msg = f"Pattern contains an unescaped latin alphabet character '{letter}'"
        return Diagnostic(
            code=DiagnosticCode.DIRECTIVE_UNKNOWN,
            message=msg,
            position=position,
            directive=directive,
            hint=f"Quote literal text with single quotes, e.g. '{directive}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Date_Field_Symbol_Table",
        )

    @staticmethod
    def directive_reserved(directive: str, position: int) -> Diagnostic:
        """Pattern letter reserved by Unicode TR35 but not implemented.

        Args:
            directive: The full letter run, e.g. "zzzz"
            position: 0-based offset in the pattern

        Returns:
            Diagnostic for DIRECTIVE_RESERVED
        """
        letter = directive[0]
        msg = f"Pattern letter '{letter}' is reserved but not implemented"
        return Diagnostic(
            code=DiagnosticCode.DIRECTIVE_RESERVED,
            message=msg,
            position=position,
            directive=directive,
            hint=f"Quote literal text with single quotes, e.g. '{directive}'",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Date_Field_Symbol_Table",
        )

    @staticmethod
    def ordinal_without_target(directive: str, position: int) -> Diagnostic:
        """Ordinal modifier not directly after a directive.

        Args:
            directive: The modifier run, e.g. "o" or "oo"
            position: 0-based offset in the pattern

        Returns:
            Diagnostic for ORDINAL_WITHOUT_TARGET
        """
        msg = "Ordinal modifier 'o' must directly follow a single date field"
        return Diagnostic(
            code=DiagnosticCode.ORDINAL_WITHOUT_TARGET,
            message=msg,
            position=position,
            directive=directive,
            hint="Write it after a numeric field, e.g. 'do' -> '4th'",
        )

    @staticmethod
    def protected_token(directive: str, intended: str, option_name: str) -> Diagnostic:
        """Token commonly confused with a calendar-year or day-of-month token.

        Args:
            directive: The token used, e.g. "YYYY"
            intended: The token usually meant, e.g. "yyyy"
            option_name: Option that acknowledges intentional use

        Returns:
            Diagnostic for PROTECTED_TOKEN (warning severity)
        """
        msg = (
            f"Pattern uses '{directive}'; did you mean '{intended}'? "
            f"Set {option_name}=True if '{directive}' is intended"
        )
        return Diagnostic(
            code=DiagnosticCode.PROTECTED_TOKEN,
            message=msg,
            directive=directive,
            option_name=option_name,
            severity="warning",
        )

    @staticmethod
    def locale_unknown(locale_code: str, fallback: str) -> Diagnostic:
        """Locale code with no CLDR data; a fallback locale is used instead.

        Args:
            locale_code: The requested locale code
            fallback: Locale used in its place

        Returns:
            Diagnostic for LOCALE_UNKNOWN (warning severity)
        """
        msg = f"Unknown locale '{locale_code}', falling back to {fallback}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            received=locale_code,
            hint="Use LocaleContext.create_or_raise() to reject unknown locales",
            severity="warning",
        )

    @staticmethod
    def ordinal_data_missing(locale_code: str, category: str) -> Diagnostic:
        """No ordinal suffix is known for a locale's ordinal category.

        Args:
            locale_code: Locale whose suffix table was consulted
            category: CLDR ordinal category, e.g. "few"

        Returns:
            Diagnostic for ORDINAL_DATA_MISSING (warning severity)
        """
        msg = f"No ordinal suffix for category '{category}' in locale {locale_code}"
        return Diagnostic(
            code=DiagnosticCode.ORDINAL_DATA_MISSING,
            message=msg,
            received=locale_code,
            hint="The number is rendered without a suffix",
            severity="warning",
        )
