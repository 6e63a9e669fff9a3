from typing import Sequence

from fatlisp import EvaluatorFn
from fatlisp.types.callables import Function
from fatlisp.types.environment import Environment
from fatlisp.types.signature import Signature
from fatlisp.types.value import Type, Value

DEF_SIGNATURE = Signature.exactly("def", 2, {0: (Type.IDENTIFIER,)})


def define_form(args: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (def name value)
    Binds in the current scope only and returns the name. A function bound
    this way takes the name for its error messages, unless it already has one.
    """
    name, val_expr = args
    value = evaluate_fn(val_expr, env)
    if isinstance(value, Function) and value.is_anonymous:
        value.rename(name.name)
    env.set(name.name, value)
    return name
