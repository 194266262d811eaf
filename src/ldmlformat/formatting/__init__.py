"""Pattern scanning, the unit formatter table and the format driver.

Exports:
    format_date: Format a date according to a Unicode TR35 pattern
    FormatOptions: Validated format options
    FORMATTERS: Read-only mapping of pattern letter -> unit formatter
    scan_pattern: Tokenize a pattern into Directive and Literal tokens

Python 3.13+.
"""

from .driver import format_date
from .formatters import FORMATTERS, RESERVED_DIRECTIVES, add_leading_zeros
from .options import FormatOptions, normalize_additional_digits, resolve_options
from .tokens import Directive, Literal, Token, escape_literal, scan_pattern

__all__ = [
    "FORMATTERS",
    "RESERVED_DIRECTIVES",
    "Directive",
    "FormatOptions",
    "Literal",
    "Token",
    "add_leading_zeros",
    "escape_literal",
    "format_date",
    "normalize_additional_digits",
    "resolve_options",
    "scan_pattern",
]
