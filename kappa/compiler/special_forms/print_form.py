from kappa.compiler import BuildFn
from kappa.compiler.checks import VALUE, check_arguments
from kappa.compiler.scope import Scope
from kappa.evaluation.nodes import Node, PrintNode
from kappa.types.lisp_list import LispList


def print_form(form: LispList, scope: Scope, build_fn: BuildFn) -> Node:
    check_arguments(form, VALUE)
    return PrintNode(build_fn(form[1], scope))
