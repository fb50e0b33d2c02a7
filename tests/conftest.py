import pytest

from minischeme.builtins import make_root_environment
from minischeme.evaluation.evaluator import evaluate
from minischeme.reader.parser import read


@pytest.fixture
def env():
    """Fresh root environment with the primitives installed."""
    return make_root_environment()


@pytest.fixture
def run(env):
    """Read and evaluate one expression in the fixture environment."""
    def _run(source: str):
        return evaluate(read(source), env)
    return _run
