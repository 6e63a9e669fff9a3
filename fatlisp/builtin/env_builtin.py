"""Built-in functions for the fatlisp runtime environment.

This module defines arithmetic and output built-ins and the registration
helpers that install them, together with the special forms, into a fresh
global environment. Nothing here is process-global: every environment gets
its own Function and SpecialForm instances.
"""
from __future__ import annotations

import math
import sys
from typing import Callable, Sequence, TextIO

from fatlisp.builtin.compare import compare, equal
from fatlisp.errors import FatlispArithmeticError, FatlispTypeError
from fatlisp.evaluation.special_forms import new_special_forms
from fatlisp.types.callables import Function
from fatlisp.types.environment import Environment
from fatlisp.types.signature import Signature, UNBOUNDED
from fatlisp.types.value import NIL, NUMERIC, Float, Int, Value, fits_int64


# -------------------------------
# Arithmetic
# -------------------------------
def _number(value: Value) -> int | float:
    match value:
        case Int(value=n) | Float(value=n):
            return n
    raise FatlispTypeError(f"unexpected type {value.typ}", value.origin)


def _int_result(i: int) -> Int:
    if not fits_int64(i):
        raise FatlispArithmeticError("integer overflow")
    return Int(i)


def _arithmetic(
    int_op: Callable[[int, int], int], float_op: Callable[[float, float], float]
) -> Callable[[Sequence[Value]], Value]:
    """Build a binary numeric built-in: Float if either side is a Float, else Int."""

    def op(args: Sequence[Value]) -> Value:
        x, y = args
        a, b = _number(x), _number(y)
        if isinstance(x, Float) or isinstance(y, Float):
            return Float(float_op(float(a), float(b)))
        return _int_result(int_op(a, b))

    return op


def _int_divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise FatlispArithmeticError("division by zero")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _float_divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0.0 is +-inf, 0.0/0.0 is nan."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


add = _arithmetic(lambda a, b: a + b, lambda a, b: a + b)
subtract = _arithmetic(lambda a, b: a - b, lambda a, b: a - b)
multiply = _arithmetic(lambda a, b: a * b, lambda a, b: a * b)
divide = _arithmetic(_int_divide, _float_divide)


# -------------------------------
# Output
# -------------------------------
def make_puts(out: TextIO | None = None) -> Callable[[Sequence[Value]], Value]:
    """(puts a b ...) writes each argument followed by a space, then a newline."""

    def puts(args: Sequence[Value]) -> Value:
        # Resolved per call so a redirected sys.stdout is honoured
        stream = out if out is not None else sys.stdout
        for v in args:
            stream.write(f"{v} ")
        stream.write("\n")
        return NIL

    return puts


# -------------------------------
# Registration
# -------------------------------
NUMERIC_PAIR = {0: NUMERIC, 1: NUMERIC}

BUILTINS: list[tuple[tuple[str, ...], Signature, Callable[[Sequence[Value]], Value]]] = [
    (("add", "+"), Signature.exactly("add", 2, NUMERIC_PAIR), add),
    (("subtract", "-"), Signature.exactly("subtract", 2, NUMERIC_PAIR), subtract),
    (("multiply", "*"), Signature.exactly("multiply", 2, NUMERIC_PAIR), multiply),
    (("divide", "/"), Signature.exactly("divide", 2, NUMERIC_PAIR), divide),
    (("compare",), Signature.exactly("compare", 2), compare),
    (("equal", "="), Signature.exactly("equal", 2), equal),
]

PUTS_SIGNATURE = Signature("puts", 0, UNBOUNDED)


def new_builtins(out: TextIO | None = None) -> dict[str, Value]:
    """Fresh built-in functions, keyed by every name they are bound under."""
    table: dict[str, Value] = {}
    for names, signature, fn in BUILTINS:
        for name in names:
            table[name] = Function(signature.with_name(name), fn)
    table["puts"] = Function(PUTS_SIGNATURE, make_puts(out))
    return table


def register(env: Environment, out: TextIO | None = None) -> None:
    """Install special forms and built-ins into `env`."""
    env.update(new_special_forms())
    env.update(new_builtins(out))


def new_global_environment(out: TextIO | None = None) -> Environment:
    env = Environment()
    register(env, out)
    return env
