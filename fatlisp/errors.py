from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fatlisp.reader.lexer import Token


class FatlispError(Exception):
    """ Base class for all fatlisp errors"""

    def __init__(self, message: str, origin: Token | None = None):
        super().__init__(message)
        self.message = message
        self.origin = origin
        # Top-level results evaluated before the failing form
        self.results: list[Any] = []

    def located(self, origin: Token | None) -> FatlispError:
        """Attach `origin` unless the error already knows where it happened."""
        if self.origin is None:
            self.origin = origin
        return self

    def __str__(self) -> str:
        if self.origin is None:
            return self.message
        return f"{self.origin.where()} {self.message}"


class FatlispSyntaxError(FatlispError):
    """ Raised when source text cannot be read into a tree"""


class FatlispLexError(FatlispSyntaxError):
    """ Raised for malformed numbers, unterminated strings and unbalanced lists"""


class FatlispParseError(FatlispSyntaxError):
    """ Raised when a token cannot be turned into a value"""


class FatlispResolutionError(FatlispError):
    """ Raised when an identifier has no binding in the environment chain"""


class FatlispArityError(FatlispError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class FatlispTypeError(FatlispError):
    """ Raised when the types of arguments passed to a function are incorrect"""


class FatlispApplicationError(FatlispError):
    """ Raised when the head of a list is neither a function nor a special form"""


class FatlispArithmeticError(FatlispError):
    """ Raised for integer overflow and integer division by zero"""


class FatlispRecursionError(FatlispError):
    """ Raised when evaluation nests deeper than the host stack allows"""
