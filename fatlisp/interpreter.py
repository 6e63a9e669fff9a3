from __future__ import annotations

from typing import TextIO

from fatlisp.builtin.env_builtin import new_global_environment
from fatlisp.config import configure_logging, get_default_source_name
from fatlisp.evaluation.evaluator import evaluate_all
from fatlisp.reader.parser import parse
from fatlisp.types.environment import Environment
from fatlisp.types.value import List, Value


class Interpreter:
    """
    Orchestrates reading and evaluating fatlisp code.

    Each instance owns one global Environment, seeded with fresh built-ins,
    that persists across `eval` calls. Evaluation of a source stops at the
    first failing top-level form; the raised FatlispError carries the results
    of the forms before it in `results`.
    """

    def __init__(self, out: TextIO | None = None):
        configure_logging()
        self.env: Environment = new_global_environment(out)

    def parse(self, code: str, name: str | None = None) -> List:
        return parse(code, name or get_default_source_name())

    def eval(self, code: str, name: str | None = None) -> list[Value]:
        root = self.parse(code, name)
        return evaluate_all(root.items, self.env)


def run(code: str, name: str | None = None, out: TextIO | None = None) -> list[Value]:
    """Parse and evaluate `code` with a fresh interpreter."""
    return Interpreter(out).eval(code, name)
