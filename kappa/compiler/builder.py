"""Builds executable node trees from parsed forms.

Local variables are resolved to frame slots here, once, so evaluation never
looks a local up by name.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from kappa import SExpression
from kappa.compiler import BuildFn
from kappa.compiler.scope import Scope
from kappa.compiler.special_forms import SPECIAL_FORMS
from kappa.errors import KappaEvalError, KappaTypeError, KappaUnknownSymbol
from kappa.evaluation.nodes import ConstNode, FunCallNode, LiteralListNode, Node, VarLoadNode
from kappa.types.lisp_list import LispList
from kappa.types.symbol import Symbol


logger = logging.getLogger(__name__)

SpecialFormHandler = Callable[[LispList, Scope, BuildFn], Node]


class AstBuilder:
    """Turns parsed values into nodes, registering locals in the given scope."""

    def __init__(self, special_forms: Mapping[Symbol, SpecialFormHandler] | None = None):
        self.special_forms = SPECIAL_FORMS if special_forms is None else special_forms

    def build(self, value: SExpression, scope: Scope) -> Node:
        try:
            return self._build(value, scope)
        except RecursionError:
            raise KappaEvalError("nesting too deep") from None

    def _build(self, value: SExpression, scope: Scope) -> Node:
        match value:
            case LispList():
                return self._build_list(value, scope)
            case Symbol():
                slot = scope.lookup(value)
                if slot is None:
                    raise KappaUnknownSymbol(f"unknown local symbol {value}")
                return VarLoadNode(slot, value)
            case bool() | int() | str():
                return ConstNode(value)
        raise KappaTypeError(f"unknown value {value!r}")

    def _build_list(self, form: LispList, scope: Scope) -> Node:
        if form.is_empty() or not isinstance(form[0], Symbol):
            return LiteralListNode(self.build_children(form, 0, scope))

        head: Symbol = form[0]
        handler = self.special_forms.get(head)
        if handler is not None:
            return handler(form, scope, self._build)

        if scope.lookup(head) is not None:
            # a declared local in head position makes the whole list data
            return LiteralListNode(self.build_children(form, 0, scope))

        logger.debug("call to %s with %d argument(s)", head, len(form) - 1)
        return FunCallNode(head, self.build_children(form, 1, scope))

    def build_children(self, form: LispList, offset: int, scope: Scope) -> tuple[Node, ...]:
        return tuple(self._build(item, scope) for item in form.sublist(offset))


def build(value: SExpression, scope: Scope | None = None) -> Node:
    """Build ``value`` with the default special forms (fresh scope if none given)."""
    return AstBuilder().build(value, Scope() if scope is None else scope)
