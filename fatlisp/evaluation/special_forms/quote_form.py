from typing import Sequence

from fatlisp import EvaluatorFn
from fatlisp.types.environment import Environment
from fatlisp.types.signature import Signature
from fatlisp.types.value import Value

QUOTE_SIGNATURE = Signature.exactly("quote", 1)


def quote_form(args: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(quote x) => x, unevaluated."""
    return args[0]
