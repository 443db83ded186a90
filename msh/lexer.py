"""Splits a command line into words, pipes and redirection operators."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

_SPACES = frozenset(" \t\n\v\f\r")
_OPERATORS = frozenset("|<>")


class TokenType(enum.Enum):
    """Kinds of token; NONE marks the end of the input."""

    NONE = enum.auto()
    ARG = enum.auto()
    PIPE = enum.auto()
    GRT = enum.auto()
    LSR = enum.auto()
    D_GRT = enum.auto()
    D_LSR = enum.auto()


_REDIRECTS = frozenset({TokenType.GRT, TokenType.LSR, TokenType.D_GRT, TokenType.D_LSR})


@dataclass(frozen=True)
class Token:
    """A token and the exact text it was read from."""

    type: TokenType
    text: str | None = None


END = Token(TokenType.NONE, None)


def is_delimiter(char: str) -> bool:
    """Return True if *char* ends an unquoted word."""
    return char in _OPERATORS or char in _SPACES


def is_redirect(token_type: TokenType) -> bool:
    """Return True for the four redirection operators."""
    return token_type in _REDIRECTS


def skip_spaces(line: str, pos: int) -> int:
    """Return the first position at or after *pos* that is not whitespace."""
    while pos < len(line) and line[pos] in _SPACES:
        pos += 1
    return pos


def _scan_word(line: str, pos: int) -> int:
    in_single = in_double = False
    while pos < len(line):
        char = line[pos]
        if is_delimiter(char) and not (in_single or in_double):
            break
        if char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        pos += 1
    return pos


def _scan(line: str, pos: int) -> Token:
    char = line[pos]
    following = line[pos + 1:pos + 2]
    if char == "|":
        return Token(TokenType.PIPE, char)
    if char == ">":
        if following == ">":
            return Token(TokenType.D_GRT, ">>")
        return Token(TokenType.GRT, char)
    if char == "<":
        if following == "<":
            return Token(TokenType.D_LSR, "<<")
        return Token(TokenType.LSR, char)
    return Token(TokenType.ARG, line[pos:_scan_word(line, pos)])


class Lexer:
    """Reads tokens one at a time from a command line."""

    def __init__(self, line: str) -> None:
        self.line = line
        self.pos = 0

    def next_token(self) -> Token:
        """Return the next token, or a NONE token once the line is used up."""
        self.pos = skip_spaces(self.line, self.pos)
        if self.pos >= len(self.line):
            return END
        token = _scan(self.line, self.pos)
        self.pos += len(token.text)
        return token

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()).type is not TokenType.NONE:
            yield token


def tokenize(line: str) -> list[Token]:
    """Return every token of *line*, without the closing NONE token."""
    return list(Lexer(line))