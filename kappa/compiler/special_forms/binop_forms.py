from kappa.compiler import BuildFn
from kappa.compiler.checks import VALUE, check_arguments
from kappa.compiler.scope import Scope
from kappa.evaluation.arithmetic import BinOp
from kappa.evaluation.nodes import Node, make_binop
from kappa.types.lisp_list import LispList


def binop_form(form: LispList, scope: Scope, build_fn: BuildFn) -> Node:
    """(op left right) for + - * / < <= > >="""
    check_arguments(form, VALUE, VALUE)
    # registered only under operator names, so the head always names a BinOp
    op = BinOp(form[0].name)
    return make_binop(op, build_fn(form[1], scope), build_fn(form[2], scope))
