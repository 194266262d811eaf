"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Date value errors (non-finite instants)
        2000-2999: Call shape errors (arity, argument types)
        3000-3999: Option errors (values outside their recognized set)
        4000-4999: Pattern errors (unknown, reserved or misplaced letters)
        5000-5999: Locale warnings (fallback, missing locale data)
    """

    # Date value errors (1000-1999)
    INVALID_DATE = 1001

    # Call shape errors (2000-2999)
    ARITY_MISMATCH = 2001
    PATTERN_NOT_STRING = 2002

    # Option errors (3000-3999)
    OPTION_OUT_OF_RANGE = 3001
    OPTION_TYPE_MISMATCH = 3002
    OPTION_UNKNOWN = 3003

    # Pattern errors (4000-4999)
    DIRECTIVE_UNKNOWN = 4001
    DIRECTIVE_RESERVED = 4002
    ORDINAL_WITHOUT_TARGET = 4003
    PROTECTED_TOKEN = 4004

    # Locale warnings (5000-5999)
    LOCALE_UNKNOWN = 5001
    ORDINAL_DATA_MISSING = 5002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context for a
    caller to point at the offending pattern letter or option.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: 0-based character offset in the pattern (pattern errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        directive: Offending directive text, e.g. "YYYY" (pattern errors)
        option_name: Offending option name (option errors)
        received: repr() of the rejected value (option and type errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    position: int | None = None
    hint: str | None = None
    help_url: str | None = None
    directive: str | None = None
    option_name: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[DIRECTIVE_RESERVED]: Pattern letter 'W' is reserved but not implemented
              --> pattern offset 5
              = directive: WW
              = help: Quote literal text with single quotes, e.g. 'W'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
