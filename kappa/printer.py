"""Textual representation of runtime values, as emitted by (print ...)."""

from __future__ import annotations

from kappa import LispValue
from kappa.types.lisp_list import LispList
from kappa.types.symbol import Symbol


def to_display(x: LispValue) -> str:
    """Convert a value to its printable form (Symbol -> name, list -> (a b c))."""
    match x:
        case bool():
            return "true" if x else "false"
        case int():
            return int.__repr__(x)
        case str():
            return x
        case Symbol():
            return x.name
        case LispList():
            return "(" + " ".join(to_display(item) for item in x) + ")"
    raise TypeError(f"not a Kappa value: {x!r}")
