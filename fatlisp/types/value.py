"""Value model for fatlisp.

Each variant of the tagged union is its own frozen dataclass, so the type tag
(`typ`) is fixed by the class and can never disagree with the payload. Code
that needs the payload matches on the class:

    match value:
        case Int(value=i): ...
        case List(items=items): ...

Every value may carry the Token it was parsed from (`origin`). The origin is
only used to position error messages; it takes no part in equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from fatlisp.reader.lexer import Token


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Type(Enum):
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    IDENTIFIER = "Identifier"
    LIST = "List"
    FN = "Fn"
    NIL = "Nil"
    BOOL = "Bool"
    FORM = "Form"

    def __str__(self) -> str:
        return self.value


NUMERIC = (Type.INT, Type.FLOAT)


@dataclass(frozen=True)
class Value:
    typ: ClassVar[Type]
    origin: Token | None = field(default=None, kw_only=True, compare=False, repr=False)


@dataclass(frozen=True)
class Int(Value):
    typ: ClassVar[Type] = Type.INT
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float(Value):
    typ: ClassVar[Type] = Type.FLOAT
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class String(Value):
    typ: ClassVar[Type] = Type.STRING
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Identifier(Value):
    typ: ClassVar[Type] = Type.IDENTIFIER
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Bool(Value):
    typ: ClassVar[Type] = Type.BOOL
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Nil(Value):
    typ: ClassVar[Type] = Type.NIL

    def __str__(self) -> str:
        return "nil"


@dataclass(frozen=True)
class List(Value):
    typ: ClassVar[Type] = Type.LIST
    items: list[Value] = field(default_factory=list)

    # The parser is the only caller of append/replace; once a tree is
    # returned from parse() it is not modified again.
    def append(self, value: Value) -> None:
        self.items.append(value)

    def replace(self, index: int, value: Value) -> None:
        self.items[index] = value

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "(" + " ".join(str(item) for item in self.items) + ")"


NIL = Nil()
TRUE = Bool(True)
FALSE = Bool(False)


def is_truthy(value: Value) -> bool:
    """Only nil and false are false; 0, "" and () are true."""
    match value:
        case Nil():
            return False
        case Bool(value=b):
            return b
        case _:
            return True


def fits_int64(i: int) -> bool:
    return INT64_MIN <= i <= INT64_MAX
