from typing import Sequence

from fatlisp import EvaluatorFn
from fatlisp.errors import FatlispTypeError
from fatlisp.types.callables import ANONYMOUS, Function
from fatlisp.types.environment import Environment
from fatlisp.types.signature import Signature
from fatlisp.types.value import Identifier, Type, Value

FN_SIGNATURE = Signature.exactly("fn", 2, {0: (Type.LIST,)})


def lambda_form(args: Sequence[Value], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """
    (fn (params...) body)
    Returns a closure over `env`. Calling it binds the parameters in a fresh
    scope whose parent is `env` and evaluates the body there.
    """
    params, body = args
    for param in params.items:
        if not isinstance(param, Identifier):
            raise FatlispTypeError(
                f"parameters of fn should be of type {Type.IDENTIFIER}. Got {param.typ}.",
                param.origin or params.origin,
            )
    formals: list[Identifier] = list(params.items)

    def call(call_args: Sequence[Value]) -> Value:
        return evaluate_fn(body, Environment.for_call(env, formals, call_args))

    return Function(Signature.exactly(ANONYMOUS, len(formals)), call, env)
