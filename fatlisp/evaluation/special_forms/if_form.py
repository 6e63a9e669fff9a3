from typing import Sequence

from fatlisp import EvaluatorFn
from fatlisp.types.environment import Environment
from fatlisp.types.signature import Signature
from fatlisp.types.value import NIL, Value, is_truthy

IF_SIGNATURE = Signature("if", 2, 3)


def if_form(args: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (if cond then)
    (if cond then else)
    Only nil and false are false. Without an else branch a false condition yields nil.
    """
    cond = evaluate_fn(args[0], env)
    if is_truthy(cond):
        return evaluate_fn(args[1], env)
    elif len(args) > 2:
        return evaluate_fn(args[2], env)
    else:
        return NIL
