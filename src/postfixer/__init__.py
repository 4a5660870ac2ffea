"""Infix-to-postfix expression translator."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from postfixer.limits import Limits

__version__ = "0.1.0"


def translate(infile: TextIO, outfile: TextIO, limits: Limits | None = None) -> int:
    """Translate every statement in *infile* to postfix on *outfile*.

    A fresh symbol table seeded with the keywords is used for each call.
    Returns the number of statements translated; raises a TranslateError
    subclass on the first error, leaving earlier output in place.
    """
    from postfixer.parser import parse
    from postfixer.symtable import SymbolTable

    table = SymbolTable.with_keywords(limits)
    return parse(infile, outfile, table)


def translate_text(source: str, limits: Limits | None = None) -> str:
    """Translate source text and return the postfix output."""
    import io

    out = io.StringIO()
    translate(io.StringIO(source), out, limits)
    return out.getvalue()
