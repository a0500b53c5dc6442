from __future__ import annotations

from kappa import LispValue
from kappa.errors import KappaTypeError


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


UNSET = _Unset()


class Frame:
    """Slot storage for one function invocation or one top-level form."""

    __slots__ = ("slots",)

    def __init__(self, size: int):
        self.slots: list[LispValue] = [UNSET] * size

    def __len__(self) -> int:
        return len(self.slots)

    def get(self, slot: int, name: object = None) -> LispValue:
        value = self.slots[slot]
        if value is UNSET:
            raise KappaTypeError(f"uninitialized local {name if name is not None else slot}")
        return value

    def set(self, slot: int, value: LispValue) -> None:
        self.slots[slot] = value

    def __repr__(self) -> str:
        return f"Frame({self.slots!r})"
