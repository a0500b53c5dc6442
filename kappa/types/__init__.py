from kappa.types.symbol import Symbol
from kappa.types.lisp_list import LispList, ListBuilder
from kappa.types.numbers import BigInt, INT_MAX, INT_MIN, make_integer

__all__ = [
    "Symbol",
    "LispList",
    "ListBuilder",
    "BigInt",
    "INT_MAX",
    "INT_MIN",
    "make_integer",
]
