import pytest

from lis.builtins import register
from lis.evaluation.evaluator import evaluate
from lis.interpreter import Interpreter
from lis.reader.parser import parse_all
from lis.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with the primitive library registered."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate every expression in a source string against `env`; return the last result."""
    def _run(source):
        result = None
        for expr in parse_all(source):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def interp():
    return Interpreter()
