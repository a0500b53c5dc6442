"""Process-wide mapping from function names to compiled functions.

A table is owned by one interpreter and handed to every node evaluation
through the RuntimeContext; there is no module-level instance.
"""

from __future__ import annotations

from typing import Iterator

from kappa.compiler.function import CompiledFunction
from kappa.errors import KappaUnboundFunction
from kappa.types.symbol import Symbol


class FunctionTable:
    __slots__ = ("functions",)

    def __init__(self):
        self.functions: dict[Symbol, CompiledFunction] = {}

    def define(self, name: Symbol, function: CompiledFunction) -> None:
        """Bind ``name``; a later definition replaces an earlier one."""
        self.functions[name] = function

    def lookup(self, name: Symbol) -> CompiledFunction:
        function = self.functions.get(name)
        if function is None:
            raise KappaUnboundFunction(f"unknown function {name}")
        return function

    def names(self) -> list[Symbol]:
        return list(self.functions)

    def __contains__(self, name: object) -> bool:
        return name in self.functions

    def __len__(self) -> int:
        return len(self.functions)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.functions)
