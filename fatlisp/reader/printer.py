"""
  fatlisp printer

`str(value)` is the display form used by `puts`: strings raw, floats as
Python prints them. `to_source` is its reader-facing counterpart; what it
writes lexes and parses back into an equal tree:

    to_source(parse('(puts "hi" 10000000000000000000)').items[0])
    # => '(puts "hi" 10000000000000000000.0)'
"""

from __future__ import annotations

import math
from decimal import Decimal

from fatlisp.errors import FatlispTypeError
from fatlisp.types.value import Float, List, String, Value


def float_source(x: float) -> str:
    """Positional notation with a '.', never an exponent."""
    if not math.isfinite(x):
        raise FatlispTypeError(f"can't write {x!r} as source")
    text = repr(x)
    if "e" in text or "E" in text:
        # repr keeps the shortest round-tripping digits; only the layout changes
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text


def to_source(value: Value) -> str:
    match value:
        case String(value=s):
            # the raw text keeps any backslash escapes the lexer skipped over
            return f'"{s}"'
        case Float(value=x):
            return float_source(x)
        case List(items=items):
            return "(" + " ".join(to_source(item) for item in items) + ")"
        case _:
            return str(value)
