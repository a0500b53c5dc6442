"""Immutable list value and its builder."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable, Iterator

from kappa import LispValue


class LispList(Sequence):
    """An immutable ordered sequence of values.

    The backing storage is a tuple owned by the list; nothing outside this
    module ever holds a reference to it.
    """

    __slots__ = ("_items",)

    _EMPTY: LispList

    def __init__(self, items: Iterable[LispValue] = ()):
        self._items: tuple[LispValue, ...] = tuple(items)

    @classmethod
    def empty(cls) -> LispList:
        return cls._EMPTY

    @classmethod
    def of(cls, *values: LispValue) -> LispList:
        if not values:
            return cls._EMPTY
        return cls(values)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return LispList.of(*self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self._items)

    def sublist(self, start: int, end: int | None = None) -> LispList:
        """Copy of the elements in ``[start, end)``; the receiver is untouched."""
        return LispList.of(*self._items[start:end])

    def is_empty(self) -> bool:
        return not self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LispList):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(("LispList", self._items))

    def __repr__(self) -> str:
        return f"LispList({list(self._items)!r})"

    def __str__(self) -> str:
        # Lazy import: printer depends on this module
        from kappa.printer import to_display
        return to_display(self)


LispList._EMPTY = LispList()


class ListBuilder:
    """Mutable accumulator that produces immutable LispList values."""

    __slots__ = ("_buffer",)

    # Builders are transient; comparing or hashing one is a bug
    __hash__ = None  # type: ignore[assignment]

    def __init__(self):
        self._buffer: list[LispValue] = []

    def append(self, value: LispValue) -> ListBuilder:
        self._buffer.append(value)
        return self

    def __len__(self) -> int:
        return len(self._buffer)

    def __eq__(self, other: object) -> bool:
        raise TypeError("ListBuilder does not support comparison")

    def to_list(self) -> LispList:
        # LispList copies into its own tuple, so later appends stay invisible
        return LispList.of(*self._buffer)

    def __repr__(self) -> str:
        return f"ListBuilder({self._buffer!r})"
