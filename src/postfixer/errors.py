"""Error types with line-numbered diagnostics and source context."""

from __future__ import annotations

from postfixer.tokens import Position


class TranslateError(Exception):
    """Base class for every fatal translation error.

    ``str(exc)`` is the one-line diagnostic ``line <n>: <message>``; errors
    raised before a position is known (e.g. while seeding the symbol table)
    render as the bare message.
    """

    def __init__(
        self,
        message: str,
        position: Position | None = None,
        source_line: str = "",
    ) -> None:
        self.message = message
        self.position = position
        self.source_line = source_line
        super().__init__(self.diagnostic())

    def diagnostic(self) -> str:
        if self.position is None:
            return self.message
        return f"line {self.position.line}: {self.message}"

    def located(self, position: Position, source_line: str = "") -> TranslateError:
        """Return a copy of this error attached to *position*."""
        return type(self)(self.message, position, source_line)

    def format(self, filename: str = "input.inf") -> str:
        """Render a multi-line report with the offending line underlined."""
        if self.position is None:
            return f"error: {self.message}\n  --> {filename}"

        col = self.position.column
        source_line = self.source_line.rstrip("\n").rstrip("\r")

        # Underline at least one char, but stay within the line
        underline_len = max(1, min(2, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class SymbolTableError(TranslateError):
    """Raised when an insert would exceed a symbol table bound."""


class TableFull(SymbolTableError):
    """The symbol table already holds its maximum number of entries."""


class TextArenaFull(SymbolTableError):
    """The cumulative interned lexeme text would exceed its bound."""


class LexError(TranslateError):
    """Raised on the first lexing error."""


class LexemeTooLong(LexError):
    """An identifier or keyword run exceeded the lexeme buffer capacity."""


class NumberTooLarge(LexError):
    """An integer literal does not fit in a signed 32-bit value."""


class ParseError(TranslateError):
    """Raised on the first syntax error: the token stream left the grammar."""
