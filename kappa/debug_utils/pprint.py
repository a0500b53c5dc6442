import json
from typing import Optional

from kappa import config
from kappa.evaluation.nodes import (
    CompareOpNode,
    ConstNode,
    DefNode,
    FunCallNode,
    IfNode,
    LiteralListNode,
    Node,
    NumberOpNode,
    PrintNode,
    VarLoadNode,
    VarStoreNode,
)

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_CONST = "\033[93m"
COLOR_LOCAL = "\033[94m"
COLOR_CALL = "\033[95m"
COLOR_OPERATOR = "\033[96m"
COLOR_SPECIAL_FORM = "\033[92m"
COLOR_LITERAL_LIST = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "indent": 2,
    "max_depth": 64,
    "display_legend": False,
    "color_constants": True,
    "color_locals": True,
    "color_calls": True,
    "color_operators": True,
    "color_special_forms": True,
    "color_literal_lists": True,
}

_NODE_COLORS = (
    (ConstNode, "color_constants", COLOR_CONST),
    ((VarLoadNode, VarStoreNode), "color_locals", COLOR_LOCAL),
    (FunCallNode, "color_calls", COLOR_CALL),
    ((NumberOpNode, CompareOpNode), "color_operators", COLOR_OPERATOR),
    ((DefNode, IfNode, PrintNode), "color_special_forms", COLOR_SPECIAL_FORM),
    (LiteralListNode, "color_literal_lists", COLOR_LITERAL_LIST),
)


# ----------------- Colorize utility -----------------
def colorize(node: Node, options: dict = DEFAULT_OPTIONS) -> str:
    text = node.label()
    for kinds, flag, color in _NODE_COLORS:
        if isinstance(node, kinds):
            if options.get(flag, True):
                return f"{color}{text}{RESET}"
            return text
    return text


def legend() -> str:
    items = [
        f"{COLOR_CONST}Constant{RESET}",
        f"{COLOR_LOCAL}Local slot{RESET}",
        f"{COLOR_CALL}Function call{RESET}",
        f"{COLOR_OPERATOR}Operator{RESET}",
        f"{COLOR_SPECIAL_FORM}Special Form{RESET}",
        f"{COLOR_LITERAL_LIST}Literal list{RESET}",
    ]
    return "Color Key: " + " | ".join(items) + "\n"


# ----------------- Tree printer -----------------
def pprint_node(
    node: Node,
    options: Optional[dict] = None,
    _current_depth: int = 0,
) -> str:
    """Render a node tree, one node per line, children indented under parents."""
    if options is None:
        options = DEFAULT_OPTIONS
    pad = " " * (options.get("indent", 2) * _current_depth)
    prefix = legend() if options.get("display_legend", False) and _current_depth == 0 else ""

    if _current_depth >= options.get("max_depth", 64):
        return prefix + pad + "…"

    lines = [pad + colorize(node, options)]
    for child in node.children():
        lines.append(pprint_node(child, options, _current_depth + 1))
    return prefix + "\n".join(lines)


# ----------------- Load JSON config -----------------
def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError:
        return dict(DEFAULT_OPTIONS)
    if not isinstance(user_opts, dict):
        return dict(DEFAULT_OPTIONS)
    return {**DEFAULT_OPTIONS, **user_opts}


def options_from_env() -> dict:
    """Defaults merged with KAPPA_PPRINT_OPTIONS."""
    return {**DEFAULT_OPTIONS, **config.get_pprint_overrides()}


def without_colors(options: Optional[dict] = None) -> dict:
    merged = dict(DEFAULT_OPTIONS if options is None else options)
    for _, flag, _ in _NODE_COLORS:
        merged[flag] = False
    return merged
