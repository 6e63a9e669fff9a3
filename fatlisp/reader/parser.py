"""
  fatlisp parser

Turns the token stream into a tree of Values in a single pass, using an
explicit stack of open lists instead of recursion:

    source "(def x '(1 2)) x"
    root   List([List([Identifier('def'), Identifier('x'),
                        List([Identifier('quote'), List([Int(1), Int(2)])])]),
                 Identifier('x')])

Quote markers are not expanded while reading. The parser only records where
the quoted value will land (list + index) and rewrites those slots to
`(quote <value>)` once the whole tree has been read, so `'(1 2)` works even
though the quoted list is still open when the quote is seen.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from fatlisp.errors import FatlispLexError, FatlispParseError
from fatlisp.reader.lexer import Token, TokenKind, TokenStream, lex
from fatlisp.types.value import (
    Bool,
    Float,
    Identifier,
    Int,
    List,
    Nil,
    String,
    Value,
    fits_int64,
)

logger = logging.getLogger(__name__)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Tokens that may legally follow a quote marker
QUOTABLE = frozenset(
    {
        TokenKind.NUMBER,
        TokenKind.IDENTIFIER,
        TokenKind.STRING,
        TokenKind.START_LIST,
        TokenKind.QUOTE,
    }
)


@dataclass
class Quote:
    """A pending quote: `list.items[index]` becomes `(form <value>)`."""

    list: List
    index: int
    origin: Token
    form: str = "quote"


def parse_identifier(token: Token) -> Value:
    match token.text:
        case "true":
            return Bool(True, origin=token)
        case "false":
            return Bool(False, origin=token)
        case "nil":
            return Nil(origin=token)
        case name:
            return Identifier(name, origin=token)


def parse_number(token: Token) -> Value:
    """Int if the text is a signed 64-bit integer, else Float."""
    text = token.text
    if INTEGER_RE.fullmatch(text):
        i = int(text)
        if fits_int64(i):
            return Int(i, origin=token)
    try:
        return Float(float(text), origin=token)
    except ValueError:
        raise FatlispParseError("invalid number", token) from None


def parse_string(token: Token) -> Value:
    # Strip off the quotes that are included in the token
    return String(token.text[1:-1], origin=token)


class Parser:
    def __init__(self, source: str, name: str = "<string>"):
        self.name = name
        self.source = source
        self.tokens = TokenStream(lex(source, name))
        self.root = List()
        # Open lists, innermost last; the root is never popped
        self.stack: list[List] = [self.root]
        self.quotes: list[Quote] = []

    @property
    def current(self) -> List:
        return self.stack[-1]

    def parse(self) -> List:
        for token in self.tokens:
            match token.kind:
                case TokenKind.START_LIST:
                    lst = List(origin=token)
                    self.current.append(lst)
                    self.stack.append(lst)

                case TokenKind.CLOSE_LIST:
                    self.stack.pop()

                case TokenKind.IDENTIFIER:
                    self.current.append(parse_identifier(token))

                case TokenKind.NUMBER:
                    self.current.append(parse_number(token))

                case TokenKind.STRING:
                    self.current.append(parse_string(token))

                case TokenKind.QUOTE:
                    self.record_quote(token)

                case TokenKind.ERROR:
                    raise FatlispLexError(token.text, token)

                case TokenKind.EOF:
                    break

        self.expand_quotes()
        logger.debug(
            "parsed %s: %d top-level forms, %d quotes expanded",
            self.name,
            len(self.root),
            len(self.quotes),
        )
        return self.root

    def record_quote(self, token: Token) -> None:
        following = self.tokens.peek()
        if following is None or (
            following.kind not in QUOTABLE and following.kind is not TokenKind.ERROR
        ):
            raise FatlispParseError("quote is missing a value", token)
        self.quotes.append(Quote(self.current, len(self.current), token))

    def expand_quotes(self) -> None:
        # In recorded order, so ''a becomes (quote (quote a))
        for q in self.quotes:
            quoted = List([Identifier(q.form, origin=q.origin), q.list.items[q.index]], origin=q.origin)
            q.list.replace(q.index, quoted)


def parse(source: str, name: str = "<string>") -> List:
    """Parse `source` into a root List holding its top-level forms."""
    return Parser(source, name).parse()
