"""Shared test fixtures and helpers."""

from __future__ import annotations

import io

import pytest

from postfixer import translate_text
from postfixer.lexer import Lexer
from postfixer.limits import Limits
from postfixer.symtable import SymbolTable
from postfixer.tokens import Token, TokenType


@pytest.fixture
def table() -> SymbolTable:
    """A fresh keyword-seeded symbol table."""
    return SymbolTable.with_keywords()


@pytest.fixture
def lex(table):
    """Return a helper that tokenizes source and returns tokens (excluding EOF).

    The helper shares the ``table`` fixture, so tests can inspect it afterwards.
    """

    def _lex(source: str) -> list[Token]:
        tokens = Lexer(io.StringIO(source), table).tokenize()
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


@pytest.fixture
def run():
    """Return a helper that translates source and returns the output lines."""

    def _run(source: str, limits: Limits | None = None) -> list[str]:
        return translate_text(source, limits).splitlines()

    return _run


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_raws(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token source texts match the expected list."""
    actual = [t.raw for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
