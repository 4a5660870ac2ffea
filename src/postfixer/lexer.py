"""Lexer: pulls characters from a text stream and produces tokens on demand."""

from __future__ import annotations

import io
from typing import TextIO

from postfixer.errors import LexemeTooLong, NumberTooLarge, SymbolTableError
from postfixer.limits import MAX_NUMBER
from postfixer.symtable import SymbolTable
from postfixer.tokens import (
    SINGLE_CHAR_TOKENS,
    Position,
    Token,
    TokenType,
    is_digit,
    is_ident_char,
    is_letter,
)

COMMENT_CHAR = "#"


class Lexer:
    """Tokenize an expression stream one token at a time.

    Identifier-shaped lexemes are resolved through *table*, which grows as
    new identifiers are seen.
    """

    def __init__(self, stream: TextIO, table: SymbolTable) -> None:
        self._stream = stream
        self._table = table
        self._pending: str | None = None
        self._line = 1
        self._col = 1
        self._line_text: list[str] = []

    @property
    def line(self) -> int:
        """Current input line, 1-based."""
        return self._line

    @property
    def table(self) -> SymbolTable:
        return self._table

    def next_token(self) -> Token:
        """Scan and return the next token; EOF is returned indefinitely at the end."""
        while True:
            ch = self._peek()
            start = self._current_pos()

            if ch == "":
                return Token(TokenType.EOF, None, "", start)

            if ch in " \t":
                self._advance()
                continue

            if ch == "\n":
                self._advance()
                continue

            if ch == COMMENT_CHAR:
                self._skip_comment()
                continue

            if is_digit(ch):
                return self._lex_number(start)

            if is_letter(ch):
                return self._lex_word(start)

            self._advance()
            tt = SINGLE_CHAR_TOKENS.get(ch, TokenType.CHAR)
            value = ch if tt == TokenType.CHAR else None
            return Token(tt, value, ch, start)

    def tokenize(self) -> list[Token]:
        """Drain the stream and return every token, EOF included."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == TokenType.EOF:
                return tokens

    # ------------------------------------------------------------------
    # Character helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col)

    def _peek(self) -> str:
        if self._pending is None:
            self._pending = self._stream.read(1)
        return self._pending

    def _advance(self) -> str:
        ch = self._peek()
        self._pending = None
        if ch == "\n":
            self._line += 1
            self._col = 1
            self._line_text.clear()
        elif ch:
            self._col += 1
            self._line_text.append(ch)
        return ch

    @property
    def line_text(self) -> str:
        """Text of the current line read so far."""
        return "".join(self._line_text)

    def error_line(self) -> str:
        """Read to the end of the current line and return all of it.

        Consumes input, so only call this when translation is about to abort.
        """
        while self._peek() not in ("\n", ""):
            self._advance()
        return self.line_text

    # ------------------------------------------------------------------
    # Scanners
    # ------------------------------------------------------------------

    def _skip_comment(self) -> None:
        self._advance()  # consume comment marker
        while True:
            ch = self._advance()
            if ch in ("\n", ""):
                return

    def _lex_number(self, start: Position) -> Token:
        digits = []
        value = 0
        while is_digit(self._peek()):
            ch = self._advance()
            digits.append(ch)
            value = value * 10 + (ord(ch) - ord("0"))
            if value > MAX_NUMBER:
                text = "".join(digits)
                if is_digit(self._peek()):
                    text += "..."
                raise NumberTooLarge(
                    f"integer literal {text} exceeds {MAX_NUMBER}", start, self.error_line()
                )
        return Token(TokenType.NUMBER, value, "".join(digits), start)

    def _lex_word(self, start: Position) -> Token:
        max_lexeme = self._table.limits.max_lexeme
        chars = []
        while is_ident_char(self._peek()):
            chars.append(self._advance())
            if len(chars) > max_lexeme:
                raise LexemeTooLong(
                    f"lexeme longer than {max_lexeme} characters", start, self.error_line()
                )
        text = "".join(chars)

        try:
            handle = self._table.intern(text)
        except SymbolTableError as exc:
            raise exc.located(start, self.error_line()) from None

        return Token(self._table.category(handle), handle, text, start)


def tokenize(source: str, table: SymbolTable | None = None) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    if table is None:
        table = SymbolTable.with_keywords()
    return Lexer(io.StringIO(source), table).tokenize()
