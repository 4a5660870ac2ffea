"""Capacity limits for a translation run."""

from __future__ import annotations

from dataclasses import dataclass, fields

DEFAULT_MAX_ENTRIES = 100
DEFAULT_MAX_TEXT = 999
DEFAULT_MAX_LEXEME = 128

# Largest value an integer literal may carry (signed 32-bit)
MAX_NUMBER = 2**31 - 1


@dataclass(frozen=True, slots=True)
class Limits:
    """Bounds on symbol table growth and identifier length.

    max_entries: total symbol table entries, keywords included.
    max_text: total characters of interned lexeme text, keywords included.
    max_lexeme: longest identifier or keyword the lexer will scan.
    """

    max_entries: int = DEFAULT_MAX_ENTRIES
    max_text: int = DEFAULT_MAX_TEXT
    max_lexeme: int = DEFAULT_MAX_LEXEME

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{f.name} must be a positive integer, got {value!r}")
