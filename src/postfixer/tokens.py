"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Literal single-character tokens
    PLUS = auto()  # +
    MINUS = auto()  # -
    STAR = auto()  # *
    SLASH = auto()  # / or \
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    SEMI = auto()  # ;
    CHAR = auto()  # any other character, value is the character

    # Content
    NUMBER = auto()  # digit run, value is the integer
    IDENTIFIER = auto()  # letter (letter|digit)*, value is the symbol handle

    # Keywords
    DIV = auto()  # div
    MOD = auto()  # mod or %

    EOF = auto()


# Characters that map straight onto a token type
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "\\": TokenType.SLASH,
    "%": TokenType.MOD,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMI,
}

# Display names used in diagnostics
TOKEN_NAMES: dict[TokenType, str] = {
    TokenType.PLUS: "'+'",
    TokenType.MINUS: "'-'",
    TokenType.STAR: "'*'",
    TokenType.SLASH: "'/'",
    TokenType.LPAREN: "'('",
    TokenType.RPAREN: "')'",
    TokenType.SEMI: "';'",
    TokenType.NUMBER: "number",
    TokenType.IDENTIFIER: "identifier",
    TokenType.DIV: "'div'",
    TokenType.MOD: "'mod'",
    TokenType.EOF: "end of input",
}


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token.

    ``value`` is the integer for NUMBER, the symbol-table handle for
    IDENTIFIER and spelled-out keywords, the character for CHAR, and None
    otherwise. ``raw`` is the source text the token was scanned from.
    """

    type: TokenType
    value: int | str | None
    raw: str
    position: Position

    def describe(self) -> str:
        """Human-readable description for error messages."""
        if self.type == TokenType.CHAR:
            return f"{self.raw!r}"
        if self.type == TokenType.NUMBER:
            return f"number {self.raw}"
        if self.type == TokenType.IDENTIFIER:
            return f"identifier '{self.raw}'"
        if self.type in (TokenType.DIV, TokenType.MOD):
            return f"'{self.raw}'"
        return TOKEN_NAMES[self.type]


def is_letter(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_letter(ch) or is_digit(ch)
