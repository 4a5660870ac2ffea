"""Symbol table that interns identifier and keyword lexemes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from postfixer.errors import TableFull, TextArenaFull
from postfixer.limits import Limits
from postfixer.tokens import TokenType

# Fixed keywords, seeded before any input is read
KEYWORDS: tuple[tuple[str, TokenType], ...] = (
    ("div", TokenType.DIV),
    ("mod", TokenType.MOD),
)


@dataclass(frozen=True, slots=True)
class Entry:
    """One interned lexeme and the token category it lexes as."""

    lexeme: str
    category: TokenType


class SymbolTable:
    """Append-only table of unique lexemes, addressed by integer handles.

    Handles are assigned in insertion order starting at 0 and never reused.
    """

    def __init__(self, limits: Limits | None = None) -> None:
        self._limits = limits if limits is not None else Limits()
        self._entries: list[Entry] = []
        self._index: dict[str, int] = {}
        self._text_size = 0

    @classmethod
    def with_keywords(cls, limits: Limits | None = None) -> SymbolTable:
        """Create a table seeded with the fixed keywords."""
        table = cls(limits)
        for lexeme, category in KEYWORDS:
            table.insert(lexeme, category)
        return table

    @property
    def limits(self) -> Limits:
        return self._limits

    @property
    def text_size(self) -> int:
        """Total characters of interned lexeme text."""
        return self._text_size

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __contains__(self, text: object) -> bool:
        return text in self._index

    def lookup(self, text: str) -> int | None:
        """Return the handle for *text*, or None if it was never inserted."""
        return self._index.get(text)

    def insert(self, text: str, category: TokenType) -> int:
        """Append a new entry and return its handle.

        Raises TableFull or TextArenaFull when a bound would be exceeded.
        The caller must have checked lookup() first.
        """
        if text in self._index:
            raise ValueError(f"lexeme {text!r} is already interned")
        if len(self._entries) >= self._limits.max_entries:
            raise TableFull(f"symbol table full ({self._limits.max_entries} entries)")
        if self._text_size + len(text) > self._limits.max_text:
            raise TextArenaFull(
                f"lexeme storage full ({self._limits.max_text} characters)"
            )

        handle = len(self._entries)
        self._entries.append(Entry(text, category))
        self._index[text] = handle
        self._text_size += len(text)
        return handle

    def intern(self, text: str, category: TokenType = TokenType.IDENTIFIER) -> int:
        """Return the handle for *text*, inserting it on a miss."""
        handle = self.lookup(text)
        if handle is None:
            handle = self.insert(text, category)
        return handle

    def entry(self, handle: int) -> Entry:
        return self._entries[handle]

    def lexeme(self, handle: int) -> str:
        return self._entries[handle].lexeme

    def category(self, handle: int) -> TokenType:
        return self._entries[handle].category
