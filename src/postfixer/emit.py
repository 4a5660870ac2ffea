"""Postfix emitter: writes tokens to the output sink as they are reduced."""

from __future__ import annotations

from typing import TextIO

from postfixer.symtable import SymbolTable
from postfixer.tokens import Token, TokenType

# How each operator renders in the output stream
OPERATOR_TEXT: dict[TokenType, str] = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.DIV: "DIV",
    TokenType.MOD: "%",
}

SEPARATOR = " "
STATEMENT_END = ";\n"


class Emitter:
    """Append rendered tokens to *out*, each followed by a separator."""

    def __init__(self, out: TextIO, table: SymbolTable) -> None:
        self._out = out
        self._table = table
        self._statements = 0

    @property
    def statements(self) -> int:
        """Number of statements terminated so far."""
        return self._statements

    def render(self, token: Token) -> str:
        if token.type in OPERATOR_TEXT:
            return OPERATOR_TEXT[token.type]
        if token.type == TokenType.NUMBER:
            return str(token.value)
        if token.type == TokenType.IDENTIFIER:
            assert isinstance(token.value, int)
            return self._table.lexeme(token.value)
        raise ValueError(f"cannot emit {token.describe()}")

    def emit(self, token: Token) -> None:
        self._out.write(self.render(token) + SEPARATOR)

    def end_statement(self) -> None:
        self._out.write(STATEMENT_END)
        self._statements += 1
