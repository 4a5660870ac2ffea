"""--debug token and symbol table dump to stderr."""

from __future__ import annotations

import io
import sys
from typing import TextIO

from postfixer.errors import TranslateError
from postfixer.lexer import Lexer
from postfixer.limits import Limits
from postfixer.symtable import SymbolTable
from postfixer.tokens import Token, TokenType


def scan_tokens(
    source: str, limits: Limits | None = None
) -> tuple[list[Token], TranslateError | None]:
    """Lex *source* with a fresh table, stopping at EOF or the first error.

    Returns the tokens scanned and the error that ended the scan, if any.
    """
    lexer = Lexer(io.StringIO(source), SymbolTable.with_keywords(limits))
    tokens: list[Token] = []
    try:
        while True:
            tok = lexer.next_token()
            tokens.append(tok)
            if tok.type == TokenType.EOF:
                return tokens, None
    except TranslateError as exc:
        return tokens, exc


def dump_tokens(
    tokens: list[Token],
    error: TranslateError | None = None,
    *,
    file: TextIO = sys.stderr,
) -> None:
    """Print one line per token: position, type, and value.

    A lexing *error* that cut the stream short is printed last.
    """
    file.write("Tokens\n")
    for tok in tokens:
        pos = f"{tok.position.line}:{tok.position.column}"
        file.write(f"  {pos:<8} {tok.type.name:<10}")
        if tok.type == TokenType.NUMBER:
            file.write(f" {tok.value}")
        elif tok.type == TokenType.IDENTIFIER or (
            tok.type in (TokenType.DIV, TokenType.MOD) and tok.value is not None
        ):
            file.write(f" {tok.raw!r} (handle {tok.value})")
        elif tok.type != TokenType.EOF:
            file.write(f" {tok.raw!r}")
        file.write("\n")
    if error is not None:
        file.write(f"  {error}\n")


def dump_symbols(table: SymbolTable, *, file: TextIO = sys.stderr) -> None:
    """Print the symbol table in handle order, followed by usage totals."""
    file.write("Symbols\n")
    for handle, entry in enumerate(table):
        file.write(f"  {handle:>4} {entry.category.name:<10} {entry.lexeme!r}\n")
    limits = table.limits
    file.write(
        f"  {len(table)}/{limits.max_entries} entries, "
        f"{table.text_size}/{limits.max_text} characters\n"
    )
