"""Ordering and equality built-ins: compare, equal."""

from __future__ import annotations

from typing import Sequence

from fatlisp.errors import FatlispTypeError
from fatlisp.types.value import Bool, Float, Int, List, String, Value


def _sign(a, b) -> Int:
    if a > b:
        return Int(1)
    elif a == b:
        return Int(0)
    return Int(-1)


def compare(args: Sequence[Value]) -> Value:
    """(compare x y) => -1, 0 or 1.

    Numbers compare by value, promoting to float when an Int meets a Float.
    Strings compare by code point. Anything else is a type error.
    """
    x, y = args
    match x, y:
        case Int(value=a), Int(value=b):
            return _sign(a, b)
        case (Int(value=a) | Float(value=a)), (Int(value=b) | Float(value=b)):
            return _sign(float(a), float(b))
        case String(value=a), String(value=b):
            return _sign(a, b)
        case _ if x.typ is not y.typ:
            raise FatlispTypeError(f"can't compare {x.typ} with {y.typ}", y.origin or x.origin)
        case _:
            raise FatlispTypeError(f"can't compare type {x.typ}", x.origin)


def values_equal(x: Value, y: Value) -> bool:
    """Equality used by `equal`.

    Values of different types are never equal (1 and 1.0 included). Lists are
    equal element by element; functions and special forms only to themselves.
    """
    if x.typ is not y.typ:
        return False
    match x, y:
        case List(items=xs), List(items=ys):
            return len(xs) == len(ys) and all(values_equal(a, b) for a, b in zip(xs, ys))
        case _:
            return x == y


def equal(args: Sequence[Value]) -> Value:
    """(equal x y) => true or false."""
    x, y = args
    return Bool(values_equal(x, y))
