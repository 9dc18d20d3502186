import pytest

from sublisp.interpreter import Interpreter
from sublisp.types.definitions import Definitions


@pytest.fixture
def interp():
    """Fresh interpreter per test, so definitions never leak between tests."""
    return Interpreter()


@pytest.fixture
def defs():
    return Definitions()


@pytest.fixture
def run(interp):
    """Evaluate each source in turn on one interpreter; return the last rendering."""
    def _run(*sources):
        result = None
        for source in sources:
            result = interp.render(source)
        return result
    return _run


@pytest.fixture(autouse=True)
def _plain_config(monkeypatch):
    for var in (
        "SUBLISP_PROMPT",
        "SUBLISP_CONTINUATION_PROMPT",
        "SUBLISP_RECURSION_LIMIT",
        "SUBLISP_LOG_LEVEL",
        "SUBLISP_COLOR",
    ):
        monkeypatch.delenv(var, raising=False)
