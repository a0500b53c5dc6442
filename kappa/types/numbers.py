"""Fixed-width and arbitrary-precision integers.

Python's ``int`` is already unbounded, so the fixed-width ``Int`` of the
language is an ``int`` known to lie inside ``[INT_MIN, INT_MAX]``, and the
arbitrary-precision ``BigInt`` is a distinct subclass so that values which
took the widened path keep their tag.
"""

from __future__ import annotations

from kappa import config


INT_BITS: int = config.get_int_bits()
INT_MIN: int = -(1 << (INT_BITS - 1))
INT_MAX: int = (1 << (INT_BITS - 1)) - 1


class BigInt(int):
    """An integer that went through the arbitrary-precision path."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"BigInt({int(self)})"

    def __str__(self) -> str:
        return int.__repr__(self)


def fits_fixed_width(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def make_integer(n: int) -> int:
    """Return ``n`` as a fixed-width Int when it fits, else as a BigInt."""
    if fits_fixed_width(n):
        return int(n)
    return BigInt(n)


def is_fixed(value: object) -> bool:
    # bool is an int subclass but never a number in the language
    return type(value) is int


def is_integer(value: object) -> bool:
    return type(value) is int or type(value) is BigInt
