import pytest

from minilisp.config import EvalOptions
from minilisp.interpreter import evaluate
from minilisp.types.environment import Environment

# Tests that request `options` (or `run`) run twice:
# 1) with lexical closures, where a call frame extends the lambda's defining env ["lexical"]
# 2) with dynamic scoping, where a call frame extends the caller's env ["dynamic"]
# Programs whose result does not depend on the scoping rule should pass under both.


@pytest.fixture(params=["lexical", "dynamic"])
def options(request):
    return EvalOptions(scoping=request.param)


@pytest.fixture
def env():
    """Fresh root environment."""
    return Environment()


@pytest.fixture
def run(env, options):
    """Evaluate source text against the shared `env` fixture."""
    def _run(source):
        return evaluate(source, env, options)
    return _run
