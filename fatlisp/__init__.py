# fatlisp: a small parenthesised language, read into a tree of typed Values
# and evaluated against a lexically scoped Environment chain.
#
#   from fatlisp import run
#   run("(def double (fn (x) (+ x x))) (double 21)")
#   # => [Identifier(name='double'), Int(value=42)]

from typing import Callable

from fatlisp.types.value import Value

# Evaluator function type: passed to special forms so they can evaluate
# their arguments in an environment of their choosing
EvaluatorFn = Callable[..., Value]

from fatlisp.errors import FatlispError  # noqa: E402
from fatlisp.interpreter import Interpreter, run  # noqa: E402
from fatlisp.reader.parser import parse  # noqa: E402
from fatlisp.reader.printer import to_source  # noqa: E402

__all__ = ["EvaluatorFn", "FatlispError", "Interpreter", "Value", "parse", "run", "to_source"]
