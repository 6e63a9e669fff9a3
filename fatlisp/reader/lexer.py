"""
  fatlisp lexer

- Pull-based: `lex` is a generator, tokens are produced on demand
- Every token remembers its offset and the Source it came from, so errors
  raised much later (during evaluation) can still render name:line:column
- The stream always ends with exactly one EOF or ERROR token
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


WHITESPACE = frozenset(" \t\n")
DIGITS = frozenset("0123456789")
NUMBER_CHARS = frozenset("+-.0123456789")
# A number must be followed by one of these (or end of input)
NUMBER_END = frozenset(" \t\n()")
IDENTIFIER_END = frozenset(' \t\n()"')


@dataclass(frozen=True)
class Source:
    name: str
    text: str = field(repr=False)

    def locate(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of character `offset`.

        Columns count UTF-8 bytes, so non-ASCII text earlier on the line
        moves the column by its encoded width.
        """
        prefix = self.text[:offset]
        line = prefix.count("\n") + 1
        line_start = prefix.rfind("\n") + 1
        column = len(prefix[line_start:].encode("utf-8", "surrogatepass")) + 1
        return line, column


class TokenKind(Enum):
    ERROR = "error"
    EOF = "eof"
    START_LIST = "start_list"
    CLOSE_LIST = "close_list"
    NUMBER = "number"
    IDENTIFIER = "identifier"
    STRING = "string"
    QUOTE = "quote"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    pos: int
    # Raw token text; for ERROR tokens the error message
    text: str
    source: Source = field(compare=False, repr=False)

    def where(self) -> str:
        line, column = self.source.locate(self.pos)
        return f"{self.source.name}:{line}:{column}"

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "EOF"
        if self.kind is TokenKind.ERROR:
            return self.text
        if len(self.text) > 10:
            return f'"{self.text[:10]}"...'
        return f'"{self.text}"'


def lex(source: str, name: str = "<string>") -> Iterator[Token]:
    """Token generator: yields Tokens until EOF or the first ERROR."""
    src = Source(name, source)
    n = len(source)
    pos = 0
    nesting = 0

    def emit(kind: TokenKind, start: int) -> Token:
        return Token(kind, start, source[start:pos], src)

    def error(start: int, message: str) -> Token:
        return Token(TokenKind.ERROR, start, message, src)

    while True:
        while pos < n and source[pos] in WHITESPACE:
            pos += 1

        if pos >= n:
            if nesting > 0:
                yield error(pos, "Unexpected EOF")
            else:
                yield emit(TokenKind.EOF, pos)
            return

        start = pos
        current_char = source[pos]

        if current_char == "(":
            pos += 1
            nesting += 1
            yield emit(TokenKind.START_LIST, start)

        elif current_char == ")":
            if nesting == 0:
                yield error(start, "Unexpected )")
                return
            pos += 1
            nesting -= 1
            yield emit(TokenKind.CLOSE_LIST, start)

        elif current_char == "'":
            pos += 1
            yield emit(TokenKind.QUOTE, start)

        elif current_char == '"':
            pos += 1
            while True:
                if pos >= n:
                    yield error(start, "unexpected end of file")
                    return
                ch = source[pos]
                pos += 1
                if ch == "\\":
                    pos += 1
                elif ch == '"':
                    break
            yield emit(TokenKind.STRING, start)

        elif current_char in DIGITS or (
            current_char in "+-" and pos + 1 < n and source[pos + 1] in DIGITS
        ):
            pos += 1
            while pos < n and source[pos] in NUMBER_CHARS:
                pos += 1
            if pos < n and source[pos] not in NUMBER_END:
                yield error(start, "Invalid number")
                return
            yield emit(TokenKind.NUMBER, start)

        else:
            while pos < n and source[pos] not in IDENTIFIER_END:
                pos += 1
            yield emit(TokenKind.IDENTIFIER, start)


class TokenStream:
    """Single-token lookahead over a token iterator."""

    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.advance()) is not None:
            yield token
