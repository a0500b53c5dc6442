from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kappa.types.symbol import Symbol

if TYPE_CHECKING:
    from kappa.evaluation.nodes import Node


@dataclass(frozen=True)
class CompiledFunction:
    name: Symbol
    param_slots: tuple[int, ...]
    frame_size: int
    body: "Node"

    @property
    def arity(self) -> int:
        return len(self.param_slots)
