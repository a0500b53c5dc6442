from __future__ import annotations

from typing import Iterable

from kappa.types.symbol import Symbol


class Scope:
    """
    Symbol to slot table for one function body or one top-level form.

    Slots are dense indices handed out in declaration order. Declaring a
    name again allocates a fresh slot and later lookups see the newest one
    (shadowing); the older slot stays in the frame.
    """

    __slots__ = ("bindings", "next_slot")

    def __init__(self, parameters: Iterable[Symbol] = ()):
        self.bindings: dict[Symbol, int] = {}
        self.next_slot: int = 0
        for parameter in parameters:
            self.declare(parameter)

    def declare(self, symbol: Symbol) -> int:
        slot = self.next_slot
        self.bindings[symbol] = slot
        self.next_slot += 1
        return slot

    def lookup(self, symbol: Symbol) -> int | None:
        return self.bindings.get(symbol)

    @property
    def size(self) -> int:
        """Total slots allocated, i.e. the frame size."""
        return self.next_slot

    def slots(self) -> dict[Symbol, int]:
        return dict(self.bindings)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.bindings

    def __repr__(self) -> str:
        inner = ", ".join(f"{s}@{i}" for s, i in self.bindings.items())
        return f"Scope({inner})"
