"""Core evaluator for the fatlisp interpreter.

A plain recursive walk over the value tree. Identifiers are resolved through
the environment chain, lists are applications, everything else evaluates to
itself. What an application does depends on what its head evaluates to:

- Function: arguments are evaluated left to right in the caller's
  environment, checked against the function's signature, then passed in.
- SpecialForm: the raw argument forms are checked against the form's
  signature and handed over together with the caller's environment; the form
  decides what to evaluate and where.
"""

from __future__ import annotations

import logging
from typing import Sequence

from fatlisp.errors import FatlispApplicationError, FatlispError, FatlispRecursionError
from fatlisp.types.callables import Function, SpecialForm
from fatlisp.types.environment import Environment
from fatlisp.types.value import Identifier, List, Value

logger = logging.getLogger(__name__)


def evaluate(value: Value, env: Environment) -> Value:
    match value:
        case Identifier(name=name):
            return env.get(name, value.origin)
        case List():
            return evaluate_list(value, env)
        case _:
            # Int, Float, String, Bool, Nil and callables are self-evaluating
            return value


def evaluate_list(lst: List, env: Environment) -> Value:
    if not lst.items:
        raise FatlispApplicationError("cannot call an empty list", lst.origin)

    head_form, *arg_forms = lst.items
    site = head_form.origin or lst.origin
    head = evaluate(head_form, env)

    try:
        match head:
            case Function():
                args = [evaluate(arg, env) for arg in arg_forms]
                head.signature.check(args, site)
                return head(args)
            case SpecialForm():
                head.signature.check(arg_forms, site)
                return head(arg_forms, env, evaluate)
            case _:
                raise FatlispApplicationError(f"not a function: {head}", site)
    except FatlispError as e:
        # Errors from built-ins on computed values carry no origin of their
        # own; report them at the call site.
        raise e.located(site)


def evaluate_all(forms: Sequence[Value], env: Environment) -> list[Value]:
    """Evaluate top-level forms in order, halting at the first error.

    The exception raised for the failing form carries the results of the
    forms evaluated before it in its `results` attribute. Running out of host
    stack is reported as a FatlispRecursionError at the top-level form.
    """
    results: list[Value] = []
    for index, form in enumerate(forms):
        logger.debug("evaluating top-level form %d: %s", index, form)
        try:
            results.append(_evaluate_top_level(form, env))
        except FatlispError as e:
            logger.debug("top-level form %d failed: %s", index, e)
            e.results = results
            raise
    return results


def _evaluate_top_level(form: Value, env: Environment) -> Value:
    try:
        return evaluate(form, env)
    except RecursionError:
        raise FatlispRecursionError("maximum recursion depth exceeded", form.origin) from None
