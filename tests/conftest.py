import pytest

from slisp.builtin.env_builtin import register
from slisp.interpreter import Interpreter
from slisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh global environment with the primitives loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter with the standard prelude."""
    return Interpreter()


@pytest.fixture
def bare_interp():
    """Interpreter with primitives only."""
    return Interpreter(prelude=None)
