from __future__ import annotations
import json
import os
from typing import Any


DEFAULT_INT_BITS = 64
_MIN_INT_BITS = 8
_TRUTHY = {"1", "true", "yes", "on"}


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_int_bits() -> int:
    """Word size of the fixed-width integer representation."""
    raw = os.environ.get('KAPPA_INT_BITS')
    if not raw:
        return DEFAULT_INT_BITS
    try:
        bits = int(raw)
    except ValueError:
        return DEFAULT_INT_BITS
    return bits if bits >= _MIN_INT_BITS else DEFAULT_INT_BITS


def dump_ast_enabled() -> bool:
    return flag_from_env('KAPPA_DUMP_AST')


def get_pprint_overrides() -> dict[str, Any]:
    raw = os.environ.get('KAPPA_PPRINT_OPTIONS')
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return value if isinstance(value, dict) else {}
