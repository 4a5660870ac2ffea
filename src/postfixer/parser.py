"""Expression parser: recursive descent that emits postfix as it goes.

Grammar::

    stmt_list -> (expr ';')*
    expr      -> term (('+' | '-') term)*
    term      -> factor (('*' | '/' | div | mod) factor)*
    factor    -> '(' expr ')' | NUM | ID

Operands are emitted before the operator that combines them, so the output
is postfix without an expression tree ever being built.
"""

from __future__ import annotations

from typing import TextIO

from postfixer.emit import Emitter
from postfixer.errors import ParseError
from postfixer.lexer import Lexer
from postfixer.symtable import SymbolTable
from postfixer.tokens import TOKEN_NAMES, Token, TokenType


class Parser:
    """One-token-lookahead parser driving a Lexer and an Emitter."""

    def __init__(self, lexer: Lexer, emitter: Emitter) -> None:
        self._lexer = lexer
        self._emitter = emitter
        self._lookahead: Token | None = None

    def parse(self) -> int:
        """Translate statements until end of input; return the statement count."""
        self._lookahead = self._lexer.next_token()
        while self._lookahead.type != TokenType.EOF:
            self._expr()
            self._match(TokenType.SEMI)
            self._emitter.end_statement()
        return self._emitter.statements

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def _expr(self) -> None:
        self._term()
        while self._peek().type in _ADD_OPS:
            op = self._peek()
            self._match(op.type)
            self._term()
            self._emitter.emit(op)

    def _term(self) -> None:
        self._factor()
        while self._peek().type in _MUL_OPS:
            op = self._peek()
            self._match(op.type)
            self._factor()
            self._emitter.emit(op)

    def _factor(self) -> None:
        tok = self._peek()
        if tok.type == TokenType.LPAREN:
            self._match(TokenType.LPAREN)
            self._expr()
            self._match(TokenType.RPAREN)
        elif tok.type in (TokenType.NUMBER, TokenType.IDENTIFIER):
            self._emitter.emit(tok)
            self._match(tok.type)
        else:
            raise self._error(f"syntax error: unexpected {tok.describe()} in factor", tok)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        assert self._lookahead is not None
        return self._lookahead

    def _match(self, tt: TokenType) -> None:
        tok = self._peek()
        if tok.type != tt:
            raise self._error(
                f"syntax error: expected {TOKEN_NAMES[tt]}, found {tok.describe()}", tok
            )
        self._lookahead = self._lexer.next_token()

    def _error(self, message: str, tok: Token) -> ParseError:
        return ParseError(message, tok.position, self._lexer.error_line())


_ADD_OPS: frozenset[TokenType] = frozenset({TokenType.PLUS, TokenType.MINUS})
_MUL_OPS: frozenset[TokenType] = frozenset(
    {TokenType.STAR, TokenType.SLASH, TokenType.DIV, TokenType.MOD}
)


def parse(infile: TextIO, outfile: TextIO, table: SymbolTable) -> int:
    """Convenience function: translate *infile* to *outfile* using *table*."""
    lexer = Lexer(infile, table)
    return Parser(lexer, Emitter(outfile, table)).parse()
