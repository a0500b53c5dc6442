"""Evaluation of node trees: frames, arithmetic and the function table."""

from kappa.evaluation.frame import Frame
from kappa.evaluation.function_table import FunctionTable

__all__ = ["Frame", "FunctionTable"]
