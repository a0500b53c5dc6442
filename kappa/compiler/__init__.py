from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from kappa import SExpression
from .scope import Scope
from .function import CompiledFunction

if TYPE_CHECKING:
    from kappa.evaluation.nodes import Node

# Recursive build callback handed to special form handlers
BuildFn = Callable[[SExpression, Scope], "Node"]

# AstBuilder is imported from kappa.compiler.builder; importing it here would
# cycle through the node definitions.
__all__ = [
    "BuildFn",
    "Scope",
    "CompiledFunction",
]
