"""Pattern tokenizer for Unicode TR35 date patterns.

Splits a pattern into directives (runs of one repeated ASCII letter) and
literal text. Quoting follows CLDR:

    - Single quotes delimit literal text: 'at' produces "at"
    - Two consecutive single quotes '' produce a literal single quote
    - '' inside quoted text also produces a literal single quote
    - An unterminated quoted span extends to the end of the pattern

Adjacent literal text (plain characters, quoted spans, escaped quotes) is
coalesced into a single Literal token.

Examples:
    "h 'o''clock' a" -> Directive(h), Literal(" o'clock "), Directive(a)
    "yyyy-MM-dd"     -> Directive(yyyy), Literal("-"), Directive(MM), ...
    "d.MM.yyyy"      -> Directive(d), Literal("."), Directive(MM), ...

Thread-safe. No state: every call scans its pattern afresh.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from ldmlformat.constants import DIRECTIVE_ALPHABET, QUOTE

__all__ = [
    "Directive",
    "Literal",
    "Token",
    "escape_literal",
    "scan_pattern",
]


@dataclass(frozen=True, slots=True)
class Directive:
    """Run of one repeated pattern letter.

    Attributes:
        letter: The pattern letter, e.g. "y"
        length: Run length, e.g. 4 for "yyyy" (no upper bound)
        position: 0-based offset of the run in the pattern
    """

    letter: str
    length: int
    position: int = 0

    @property
    def text(self) -> str:
        """The directive as written in the pattern."""
        return self.letter * self.length


@dataclass(frozen=True, slots=True)
class Literal:
    """Text emitted verbatim, with quote escapes already decoded."""

    text: str


Token: TypeAlias = Directive | Literal


def scan_pattern(pattern: str) -> Iterator[Token]:
    """Tokenize a date pattern left to right.

    Scanning is total: every string, including one with an unterminated
    quote, yields a finite token sequence. The iterator is one-shot;
    scan again to restart.

    Args:
        pattern: Date pattern, e.g. "yyyy-MM-dd'T'HH:mm"

    Yields:
        Directive and Literal tokens in pattern order

    Examples:
        >>> list(scan_pattern("''h"))
        [Literal(text="'"), Directive(letter='h', length=1, position=2)]
    """
    literal_chars: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == QUOTE:
            # '' outside quoted section -> literal single quote
            if i + 1 < n and pattern[i + 1] == QUOTE:
                literal_chars.append(QUOTE)
                i += 2
                continue

            i += 1  # Skip opening quote
            while i < n:
                if pattern[i] == QUOTE:
                    if i + 1 < n and pattern[i + 1] == QUOTE:
                        literal_chars.append(QUOTE)
                        i += 2
                    else:
                        i += 1  # Closing quote
                        break
                else:
                    literal_chars.append(pattern[i])
                    i += 1
            continue

        if char in DIRECTIVE_ALPHABET:
            if literal_chars:
                yield Literal("".join(literal_chars))
                literal_chars = []
            j = i + 1
            while j < n and pattern[j] == char:
                j += 1
            yield Directive(char, j - i, i)
            i = j
            continue

        literal_chars.append(char)
        i += 1

    if literal_chars:
        yield Literal("".join(literal_chars))


def escape_literal(text: str) -> str:
    """Quote text so that scan_pattern() reads it back as one literal.

    Leading quotes are written as bare '' escapes: a quoted span may not
    open with '' because the scanner reads that as an escape outside a span.

    Examples:
        >>> escape_literal("o'clock")
        "'o''clock'"
        >>> escape_literal("'s")
        "'''s'"
        >>> escape_literal("")
        ''
    """
    rest = text.lstrip(QUOTE)
    prefix = QUOTE * 2 * (len(text) - len(rest))
    if not rest:
        return prefix
    return prefix + QUOTE + rest.replace(QUOTE, QUOTE * 2) + QUOTE
