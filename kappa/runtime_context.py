from __future__ import annotations

from dataclasses import dataclass, field

from kappa import OutputFn
from kappa.evaluation.function_table import FunctionTable


def _default_output(text: str) -> None:
    print(text)


@dataclass
class RuntimeContext:
    """State shared by every evaluation of one interpreter.

    Passed explicitly to each node instead of living in module globals, so
    independent interpreters never see each other's functions.
    """

    functions: FunctionTable = field(default_factory=FunctionTable)
    output: OutputFn = _default_output
