"""Exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
Concrete classes also derive from the matching builtin exception so callers
can catch them as TypeError / ValueError.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArityError",
    "DateFormatError",
    "InvalidDateError",
    "OptionRangeError",
    "PatternTypeError",
    "UnknownDirectiveError",
]


class DateFormatError(Exception):
    """Base exception for all ldmlformat errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize DateFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidDateError(DateFormatError, ValueError):
    """Calendar arithmetic was asked about a non-finite instant.

    format() never raises this; it returns the "Invalid Date" sentinel
    instead. Calendar helpers called directly raise it so that dependent
    computations do not silently propagate garbage.
    """


class ArityError(DateFormatError, TypeError):
    """format() was called with fewer than its two required arguments."""


class PatternTypeError(DateFormatError, TypeError):
    """The pattern argument has no string representation of its own."""


class OptionRangeError(DateFormatError, ValueError):
    """An option value lies outside its documented recognized set.

    Attributes:
        option_name: Name of the rejected option
    """

    def __init__(self, message: str | Diagnostic, *, option_name: str = "") -> None:
        """Initialize OptionRangeError.

        Args:
            message: Error message string OR Diagnostic object
            option_name: Name of the rejected option
        """
        super().__init__(message)
        self.option_name = option_name


class UnknownDirectiveError(DateFormatError, ValueError):
    """The pattern contains an unquoted letter with no formatter.

    Raised for letters reserved by Unicode TR35 but not implemented, for
    letters outside the reserved set, and for a misplaced ordinal modifier.
    Aborts the call: no partial output is produced.

    Attributes:
        letter: The offending pattern letter
        position: 0-based offset of the letter run in the pattern
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        letter: str = "",
        position: int = -1,
    ) -> None:
        """Initialize UnknownDirectiveError.

        Args:
            message: Error message string OR Diagnostic object
            letter: The offending pattern letter
            position: 0-based offset of the letter run in the pattern
        """
        super().__init__(message)
        self.letter = letter
        self.position = position
