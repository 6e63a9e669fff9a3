import io

import pytest

from fatlisp.builtin.env_builtin import new_global_environment
from fatlisp.evaluation.evaluator import evaluate_all
from fatlisp.interpreter import Interpreter
from fatlisp.reader.parser import parse


@pytest.fixture
def env():
    """Fresh global environment with built-ins and special forms."""
    return new_global_environment()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def interp(out):
    """Interpreter whose `puts` writes into the `out` buffer."""
    return Interpreter(out)


@pytest.fixture
def run_last(env):
    """Evaluate a source string in `env` and return the last result."""

    def _run(source):
        return evaluate_all(parse(source).items, env)[-1]

    return _run
