import pytest

from kappa.interpreter import Interpreter
from kappa.reader.parser import Reader


@pytest.fixture
def output():
    """Lines emitted by (print ...), in order."""
    return []


@pytest.fixture
def interp(output):
    """Fresh interpreter whose print output is collected in `output`."""
    return Interpreter(output=output.append, dump_ast=False)


def parse_one(source):
    """Parse the first top-level list of `source`."""
    return Reader(source).parse_list()
