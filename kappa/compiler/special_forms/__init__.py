"""Registry of special forms for the Kappa AST builder.

Maps head Symbols to handler functions that validate the form's shape and
produce its node. The builder consults this table before treating a list as
a function call or a literal.
"""

from kappa.types.symbol import Symbol
from kappa.evaluation.arithmetic import BinOp
from kappa.compiler.special_forms.def_form import def_form
from kappa.compiler.special_forms.if_form import if_form
from kappa.compiler.special_forms.var_form import var_form
from kappa.compiler.special_forms.print_form import print_form
from kappa.compiler.special_forms.binop_forms import binop_form

SPECIAL_FORMS = {
    Symbol("def"): def_form,
    Symbol("if"): if_form,
    Symbol("var"): var_form,
    Symbol("print"): print_form,
    **{Symbol(op.value): binop_form for op in BinOp},
}

# Usage hints shown by editor tooling
SIGNATURES = {
    "def": "(def name (params...) body)",
    "if": "(if test then else)",
    "var": "(var name value)",
    "print": "(print value)",
    **{op.value: f"({op.value} left right)" for op in BinOp},
}
