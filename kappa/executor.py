from __future__ import annotations
from typing import Protocol

from kappa import LispValue
from kappa.errors import KappaEvalError
from kappa.evaluation.frame import Frame
from kappa.evaluation.nodes import Node
from kappa.runtime_context import RuntimeContext


class Executor(Protocol):
    """Runs a finished node tree synchronously and returns its value."""

    name: str

    def execute(self, node: Node, frame_size: int, ctx: RuntimeContext) -> LispValue: ...


class TreeWalkingExecutor:
    """Default executor: recursive evaluation with a fresh frame per unit."""

    name = "tree-walking"

    def execute(self, node: Node, frame_size: int, ctx: RuntimeContext) -> LispValue:
        try:
            return node.evaluate(Frame(frame_size), ctx)
        except RecursionError as exc:
            raise KappaEvalError("maximum call depth exceeded") from exc
