"""
Lexical scanner for the PostgreSQL DDL subset understood by the parser.

The lexer is a pull source: the parser calls ``next_token()`` for one token at
a time. Iterating a lexer yields every token up to and including ``EOF``, or up
to the ``ILLEGAL`` token of an unrecoverable error (unterminated string,
quoted identifier, dollar quote or block comment).
"""

import re
from typing import Iterator

from pg_converge_core.lib.token import Token, TokenType, lookup_ident

_WHITESPACE = " \t\n\r\f\v"

_PUNCTUATION = {
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "=": TokenType.EQUAL,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ".": TokenType.DOT,
}

_DOLLAR_TAG = re.compile(r"\$(?:[A-Za-z_][A-Za-z_0-9]*)?\$")


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_identifier_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_identifier_cont(char: str) -> bool:
    return char.isalpha() or _is_digit(char) or char in ("_", "$")


class Lexer:
    """
    Converts DDL text into tokens.

    Args:
        input: The SQL text to scan
        input_name: Display name used in error messages (usually a file name)
    """

    def __init__(self, input: str, input_name: str = "<string>"):
        self.input = input
        self.input_name = input_name
        self._position = 0
        self._line = 1
        self._done = False

    def __iter__(self) -> Iterator[Token]:
        while not self._done:
            yield self.next_token()

    @property
    def line(self) -> int:
        return self._line

    def next_token(self) -> Token:
        """Scan and return the next significant token."""
        if self._done:
            return Token(TokenType.EOF, "", self._line)

        while True:
            self._skip_whitespace()
            if self._char() == "-" and self._peek() == "-":
                self._skip_line_comment()
                continue
            if self._char() == "/" and self._peek() == "*":
                start, line = self._position, self._line
                if not self._skip_block_comment():
                    return self._fatal(start, line)
                continue
            break

        start, line = self._position, self._line
        char = self._char()

        if char == "":
            self._done = True
            return Token(TokenType.EOF, "", line)
        if char == '"':
            return self._lex_quoted_identifier(start, line)
        if _is_identifier_start(char):
            return self._lex_identifier(start, line)
        if _is_digit(char) or (char == "." and _is_digit(self._peek())):
            return self._lex_number(start, line)
        if char == "'":
            return self._lex_string(start, line)
        if char == "$":
            return self._lex_dollar_string(start, line)
        if char == "\\" and self._peek().isalpha():
            return self._lex_backslash_command(start, line)
        if char == ":":
            if self._peek() == ":":
                self._advance(2)
                return self._emit(TokenType.TYPECAST, start, line)
            self._advance()
            return self._emit(TokenType.ILLEGAL, start, line)
        if char in _PUNCTUATION:
            self._advance()
            return self._emit(_PUNCTUATION[char], start, line)

        self._advance()
        return self._emit(TokenType.ILLEGAL, start, line)

    # Character access

    def _char(self) -> str:
        if self._position >= len(self.input):
            return ""
        return self.input[self._position]

    def _peek(self) -> str:
        if self._position + 1 >= len(self.input):
            return ""
        return self.input[self._position + 1]

    def _advance(self, count: int = 1) -> None:
        for _ in range(count):
            if self._position >= len(self.input):
                return
            if self.input[self._position] == "\n":
                self._line += 1
            self._position += 1

    def _emit(self, token_type: TokenType, start: int, line: int) -> Token:
        return Token(token_type, self.input[start:self._position], line)

    def _fatal(self, start: int, line: int) -> Token:
        self._done = True
        return self._emit(TokenType.ILLEGAL, start, line)

    # Skipped input

    def _skip_whitespace(self) -> None:
        while self._char() != "" and self._char() in _WHITESPACE:
            self._advance()

    def _skip_line_comment(self) -> None:
        # -- comment up to (not including) the newline
        while self._char() not in ("", "\n"):
            self._advance()

    def _skip_block_comment(self) -> bool:
        # /* block comment /* nested */ */
        self._advance(2)
        depth = 0
        while True:
            char, peek = self._char(), self._peek()
            if char == "":
                return False
            if char == "/" and peek == "*":
                depth += 1
                self._advance(2)
            elif char == "*" and peek == "/":
                self._advance(2)
                if depth == 0:
                    return True
                depth -= 1
            else:
                self._advance()

    # Tokens

    def _lex_quoted_identifier(self, start: int, line: int) -> Token:
        # "foo""bar" keeps its quotes; the parser unquotes it
        self._advance()
        while True:
            char = self._char()
            if char == "":
                return self._fatal(start, line)
            if char == '"':
                if self._peek() == '"':
                    self._advance(2)
                    continue
                self._advance()
                break
            self._advance()
        return self._emit(TokenType.IDENTIFIER, start, line)

    def _lex_identifier(self, start: int, line: int) -> Token:
        self._advance()
        while _is_identifier_cont(self._char()):
            self._advance()
        return self._emit(lookup_ident(self.input[start:self._position]), start, line)

    def _lex_number(self, start: int, line: int) -> Token:
        # 42, 3.5, 4., .001 (no exponent form)
        while _is_digit(self._char()):
            self._advance()
        if self._char() == ".":
            self._advance()
            while _is_digit(self._char()):
                self._advance()
        return self._emit(TokenType.NUMBER, start, line)

    def _lex_string(self, start: int, line: int) -> Token:
        # 'Dianne''s horse' and 'Dianne\'s horse' are both one literal
        self._advance()
        while True:
            char = self._char()
            if char == "":
                return self._fatal(start, line)
            if char == "'":
                if self._peek() == "'":
                    self._advance(2)
                    continue
                self._advance()
                break
            if char == "\\" and self._peek() == "'":
                self._advance(2)
                continue
            self._advance()
        return self._emit(TokenType.STRING, start, line)

    def _lex_dollar_string(self, start: int, line: int) -> Token:
        # $$body$$ or $tag$body$tag$
        match = _DOLLAR_TAG.match(self.input, start)
        if match is None:
            self._advance()
            return self._emit(TokenType.ILLEGAL, start, line)
        tag = match.group(0)
        end = self.input.find(tag, match.end())
        if end == -1:
            self._advance(len(self.input) - start)
            return self._fatal(start, line)
        self._advance(end + len(tag) - start)
        return self._emit(TokenType.STRING, start, line)

    def _lex_backslash_command(self, start: int, line: int) -> Token:
        # psql meta-command such as \connect, runs to end of line
        while self._char() not in ("", "\n"):
            self._advance()
        return Token(TokenType.BACKSLASH_COMMAND, self.input[start:self._position].rstrip(), line)


__all__ = [
    "Lexer",
]
