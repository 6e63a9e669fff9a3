"""Function and special-form values.

Unlike the other variants these are plain classes rather than frozen
dataclasses: `def` renames a function after creation, and two callables are
only ever equal when they are the same object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Sequence

from fatlisp.types.signature import Signature
from fatlisp.types.value import Type, Value

if TYPE_CHECKING:
    from fatlisp.types.environment import Environment

    NativeFn = Callable[[Sequence[Value]], Value]
    EvaluatorFn = Callable[[Value, Environment], Value]
    FormFn = Callable[[Sequence[Value], Environment, EvaluatorFn], Value]

# Name carried by functions created with `fn` until `def` names them
ANONYMOUS = "function"


class Function(Value):
    """A callable receiving already-evaluated arguments.

    Closures created by `fn` keep the environment they were defined in as
    `env`; built-ins have no env.
    """

    typ: ClassVar[Type] = Type.FN

    def __init__(self, signature: Signature, fn: NativeFn, env: Environment | None = None):
        self.signature = signature
        self.fn = fn
        self.env = env

    @property
    def name(self) -> str:
        return self.signature.name

    @property
    def is_anonymous(self) -> bool:
        return self.signature.name == ANONYMOUS

    def rename(self, name: str) -> None:
        self.signature = self.signature.with_name(name)

    def __call__(self, args: Sequence[Value]) -> Value:
        return self.fn(args)

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return f"<fn {self.name}>"

    def __repr__(self) -> str:
        return f"Function({self.name!r})"


class SpecialForm(Value):
    """A callable receiving its arguments unevaluated, plus the caller's env."""

    typ: ClassVar[Type] = Type.FORM

    def __init__(self, signature: Signature, fn: FormFn):
        self.signature = signature
        self.fn = fn

    @property
    def name(self) -> str:
        return self.signature.name

    def __call__(self, args: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
        return self.fn(args, env, evaluate_fn)

    def __eq__(self, other: object) -> bool:
        return self is other

    __hash__ = object.__hash__

    def __str__(self) -> str:
        return f"<form {self.name}>"

    def __repr__(self) -> str:
        return f"SpecialForm({self.name!r})"
