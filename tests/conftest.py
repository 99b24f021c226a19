import pytest

from stepl.builtin.env_builtin import register
from stepl.interpreter import Interpreter
from stepl.runtime_context import RuntimeContext


@pytest.fixture
def context():
    """A fresh session with the default primitives and no macros."""
    ctx = RuntimeContext(lambda_prefix="lambda-")
    register(ctx)
    return ctx


@pytest.fixture
def interp():
    """A fresh interpreter with default primitives and builtin macros."""
    return Interpreter(context=RuntimeContext(lambda_prefix="lambda-"))
