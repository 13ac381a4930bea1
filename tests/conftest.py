import pytest

from ueval.types.environment import create_environment
from ueval.evaluation.evaluator import evaluate
from ueval.reader.parser import read
from ueval.types.refcount import release
from ueval.debug_utils.pprint import print_atom


class RecordingRunner:
    """Command runner that records commands instead of executing them."""

    def __init__(self, succeed: bool = True):
        self.commands: list[str] = []
        self.succeed = succeed

    def __call__(self, command: str) -> bool:
        self.commands.append(command)
        return self.succeed


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def observed():
    """Printed form of every intermediate Begin result, in order."""
    return []


@pytest.fixture
def env(runner, observed):
    """Fresh environment with builtins loaded and a recording runner."""
    e = create_environment(runner=runner, observer=lambda atom: observed.append(print_atom(atom)))
    yield e
    e.destroy()


@pytest.fixture
def eval_text(env):
    """Read one expression, evaluate it, and return the printed result.

    Both the tree and the result are released before returning.
    """
    def _eval(source: str) -> str:
        tree = read(source)
        try:
            result = evaluate(tree, env)
            try:
                return print_atom(result)
            finally:
                release(result)
        finally:
            release(tree)
    return _eval
