from kappa.compiler import BuildFn
from kappa.compiler.checks import PARAMETERS, SYMBOL, VALUE, check_arguments
from kappa.compiler.scope import Scope
from kappa.evaluation.nodes import DefNode, Node
from kappa.types.lisp_list import LispList


def def_form(form: LispList, scope: Scope, build_fn: BuildFn) -> Node:
    """
    (def name (params...) body)
    The body is built now, against its own scope seeded with the parameters;
    the function is only registered when the node is evaluated.
    """
    check_arguments(form, SYMBOL, PARAMETERS, VALUE)
    _, name, parameters, body = form

    function_scope = Scope()
    param_slots = tuple(function_scope.declare(parameter) for parameter in parameters)
    body_node = build_fn(body, function_scope)
    return DefNode(name, param_slots, function_scope.size, body_node)
