from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Optional, Sequence

from fatlisp.errors import FatlispArityError, FatlispTypeError
from fatlisp.types.value import Type, Value

if TYPE_CHECKING:
    from fatlisp.reader.lexer import Token


UNBOUNDED = -1


def _arguments(count: int) -> str:
    return "argument" if count == 1 else "arguments"


@dataclass(frozen=True)
class Signature:
    """Arity and argument-type contract shared by functions and special forms.

    `max_args` of UNBOUNDED (-1) accepts any number of trailing arguments.
    `required_types` maps a 0-based argument position to the types accepted
    there; positions that are not listed accept anything.
    """

    name: str
    min_args: int
    max_args: int = UNBOUNDED
    required_types: Optional[Mapping[int, tuple[Type, ...]]] = None

    @classmethod
    def exactly(
        cls,
        name: str,
        count: int,
        required_types: Optional[Mapping[int, tuple[Type, ...]]] = None,
    ) -> Signature:
        return cls(name, count, count, required_types)

    def with_name(self, name: str) -> Signature:
        return Signature(name, self.min_args, self.max_args, self.required_types)

    def describe_arity(self) -> str:
        if self.max_args == UNBOUNDED:
            return f"at least {self.min_args} {_arguments(self.min_args)}"
        if self.min_args == self.max_args:
            return f"{self.min_args} {_arguments(self.min_args)}"
        return f"{self.min_args} to {self.max_args} arguments"

    def check(self, args: Sequence[Value], origin: Token | None = None) -> None:
        """Validate `args`; raise FatlispArityError or FatlispTypeError."""
        count = len(args)
        if count < self.min_args or (self.max_args != UNBOUNDED and count > self.max_args):
            raise FatlispArityError(
                f"{self.name} expects {self.describe_arity()}. Got {count}.", origin
            )
        if not self.required_types:
            return
        for index, types in self.required_types.items():
            if index >= count:
                continue
            arg = args[index]
            if arg.typ not in types:
                expected = " or ".join(str(t) for t in types)
                raise FatlispTypeError(
                    f"argument {index + 1} of {self.name} should be of type {expected}. Got {arg.typ}.",
                    arg.origin or origin,
                )
