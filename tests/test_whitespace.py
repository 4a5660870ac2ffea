"""Test whitespace, newline, and comment skipping."""

import io

from postfixer.lexer import Lexer
from postfixer.tokens import TokenType

from .conftest import assert_types, assert_values


class TestWhitespace:
    def test_spaces_and_tabs(self, lex):
        tokens = lex(" \t 1 \t\t 2 ")
        assert_types(tokens, [TokenType.NUMBER, TokenType.NUMBER])

    def test_newlines_skipped(self, lex):
        tokens = lex("\n1\n\n2\n")
        assert_values(tokens, [1, 2])

    def test_whitespace_only(self, lex):
        assert lex("  \n\t\n ") == []


class TestComments:
    def test_comment_to_end_of_line(self, lex):
        tokens = lex("1 # 2 3\n4")
        assert_values(tokens, [1, 4])

    def test_comment_at_eof(self, lex):
        tokens = lex("1 # trailing")
        assert_values(tokens, [1])

    def test_comment_only(self, lex):
        assert lex("# nothing here\n") == []

    def test_comment_swallows_operators(self, lex):
        tokens = lex("x; # y + z;\n")
        assert_types(tokens, [TokenType.IDENTIFIER, TokenType.SEMI])

    def test_comment_does_not_intern(self, lex, table):
        size = len(table)
        lex("# foo bar\n")
        assert len(table) == size


class TestLineCounting:
    def test_starts_at_one(self, table):
        assert Lexer(io.StringIO(""), table).line == 1

    def test_newline_increments(self, table):
        lexer = Lexer(io.StringIO("1\n\n2"), table)
        lexer.next_token()
        assert lexer.line == 1
        tok = lexer.next_token()
        assert tok.position.line == 3
        assert lexer.line == 3

    def test_comment_newline_counted(self, lex):
        tokens = lex("1 + # comment\n 2;")
        assert tokens[2].position.line == 2

    def test_consecutive_comments(self, lex):
        tokens = lex("# a\n# b\n# c\nx")
        assert tokens[0].position.line == 4

    def test_comment_without_newline_at_eof(self, table):
        lexer = Lexer(io.StringIO("# only"), table)
        assert lexer.next_token().type == TokenType.EOF
        assert lexer.line == 1
