from kappa.compiler import BuildFn
from kappa.compiler.checks import SYMBOL, VALUE, check_arguments
from kappa.compiler.scope import Scope
from kappa.evaluation.nodes import Node, VarStoreNode
from kappa.types.lisp_list import LispList


def var_form(form: LispList, scope: Scope, build_fn: BuildFn) -> Node:
    """
    (var name value)
    The initializer is built before the new slot exists, so (var x (+ x 1))
    reads the previous x.
    """
    check_arguments(form, SYMBOL, VALUE)
    name = form[1]
    init = build_fn(form[2], scope)
    slot = scope.declare(name)
    return VarStoreNode(slot, name, init)
