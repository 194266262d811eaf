"""Diagnostic system for date formatting errors.

Provides structured error diagnostics with codes, pattern offsets, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArityError,
    DateFormatError,
    InvalidDateError,
    OptionRangeError,
    PatternTypeError,
    UnknownDirectiveError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArityError",
    "DateFormatError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidDateError",
    "OptionRangeError",
    "OutputFormat",
    "PatternTypeError",
    "UnknownDirectiveError",
]
