"""Binary operators over Int/BigInt.

Both operands fixed-width: compute exactly, keep the result as Int when it
fits the word size, otherwise widen. Either operand already BigInt: the
result is BigInt, even when it would fit again.
"""

from __future__ import annotations

import operator
from enum import Enum

from kappa import LispValue
from kappa.errors import KappaDivisionByZero, KappaTypeError
from kappa.types.numbers import BigInt, fits_fixed_width, is_fixed, is_integer


class BinOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    @property
    def is_comparison(self) -> bool:
        return self in _COMPARISONS

    def __str__(self) -> str:
        return self.value


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    if right == 0:
        raise KappaDivisionByZero(f"division by zero: {left} / 0")
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


_ARITHMETIC = {
    BinOp.ADD: operator.add,
    BinOp.SUB: operator.sub,
    BinOp.MUL: operator.mul,
    BinOp.DIV: truncating_div,
}

_COMPARISONS = {
    BinOp.LT: operator.lt,
    BinOp.LE: operator.le,
    BinOp.GT: operator.gt,
    BinOp.GE: operator.ge,
}


def _check_operand(op: BinOp, value: LispValue) -> None:
    if not is_integer(value):
        raise KappaTypeError(f"{op}: invalid type {value!r}, should be an integer")


def compute(op: BinOp, left: LispValue, right: LispValue) -> int:
    """Apply an arithmetic operator with overflow widening."""
    fn = _ARITHMETIC[op]
    _check_operand(op, left)
    _check_operand(op, right)
    if is_fixed(left) and is_fixed(right):
        result = fn(left, right)
        if fits_fixed_width(result):
            return result
        return BigInt(result)
    return BigInt(fn(int(left), int(right)))


def compare(op: BinOp, left: LispValue, right: LispValue) -> bool:
    fn = _COMPARISONS[op]
    _check_operand(op, left)
    _check_operand(op, right)
    if is_fixed(left) and is_fixed(right):
        return fn(left, right)
    return fn(int(left), int(right))
