from kappa.compiler import BuildFn
from kappa.compiler.checks import VALUE, check_arguments
from kappa.compiler.scope import Scope
from kappa.evaluation.nodes import IfNode, Node
from kappa.types.lisp_list import LispList


def if_form(form: LispList, scope: Scope, build_fn: BuildFn) -> Node:
    """(if test then else); the test must evaluate to a boolean."""
    check_arguments(form, VALUE, VALUE, VALUE)
    return IfNode(
        build_fn(form[1], scope),
        build_fn(form[2], scope),
        build_fn(form[3], scope),
    )
