"""Static argument checks for special forms."""

from __future__ import annotations

from kappa import SExpression
from kappa.errors import KappaArityError, KappaSyntaxError
from kappa.printer import to_display
from kappa.types.lisp_list import LispList
from kappa.types.symbol import Symbol

# Argument shapes
VALUE = "value"
SYMBOL = "symbol"
PARAMETERS = "parameters"


def check_arguments(form: LispList, *shapes: str) -> None:
    """Require exactly ``len(shapes)`` arguments after the head, each matching its shape."""
    head = form[0]
    if len(form) != 1 + len(shapes):
        raise KappaArityError(f"invalid number of arguments for {head} {to_display(form)}")
    for index, shape in enumerate(shapes):
        check_argument(head, index, shape, form[index + 1])


def check_argument(head: Symbol, index: int, shape: str, value: SExpression) -> None:
    if shape == VALUE:
        return
    if shape == SYMBOL:
        if not isinstance(value, Symbol):
            raise KappaSyntaxError(
                f"{head}: invalid argument {index}, should be a symbol, instead of {to_display(value)}"
            )
        return
    if shape == PARAMETERS:
        if not isinstance(value, LispList):
            raise KappaSyntaxError(
                f"{head}: invalid argument {index}, should be a list, instead of {to_display(value)}"
            )
        for parameter in value:
            if not isinstance(parameter, Symbol):
                raise KappaSyntaxError(f"{head}: invalid parameter name {to_display(parameter)}")
        return
    raise ValueError(f"unknown argument shape {shape!r}")
