"""Executable node tree.

Every node is built bottom-up by the AstBuilder, is immutable afterwards,
and evaluates against a Frame plus the interpreter's RuntimeContext.
Sub-expressions are evaluated strictly left to right.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from kappa import LispValue
from kappa.compiler.function import CompiledFunction
from kappa.errors import KappaArityError, KappaTypeError
from kappa.evaluation.arithmetic import BinOp, compare, compute
from kappa.evaluation.frame import Frame
from kappa.printer import to_display
from kappa.types.lisp_list import LispList
from kappa.types.symbol import Symbol

if TYPE_CHECKING:
    from kappa.runtime_context import RuntimeContext


logger = logging.getLogger(__name__)


class Node(ABC):
    __slots__ = ()

    @abstractmethod
    def evaluate(self, frame: Frame, ctx: RuntimeContext) -> LispValue:
        ...

    def children(self) -> tuple[Node, ...]:
        return ()

    def label(self) -> str:
        return type(self).__name__.removesuffix("Node")


@dataclass(frozen=True)
class ConstNode(Node):
    value: LispValue

    def evaluate(self, frame, ctx):
        return self.value

    def label(self) -> str:
        if isinstance(self.value, str):
            return f"Const {self.value!r}"
        return f"Const {to_display(self.value)}"


@dataclass(frozen=True)
class LiteralListNode(Node):
    elements: tuple[Node, ...]

    def evaluate(self, frame, ctx):
        return LispList.of(*[element.evaluate(frame, ctx) for element in self.elements])

    def children(self):
        return self.elements


@dataclass(frozen=True)
class VarLoadNode(Node):
    slot: int
    name: Symbol

    def evaluate(self, frame, ctx):
        return frame.get(self.slot, self.name)

    def label(self) -> str:
        return f"VarLoad {self.name}@{self.slot}"


@dataclass(frozen=True)
class VarStoreNode(Node):
    slot: int
    name: Symbol
    init: Node

    def evaluate(self, frame, ctx):
        frame.set(self.slot, self.init.evaluate(frame, ctx))
        return LispList.empty()

    def children(self):
        return (self.init,)

    def label(self) -> str:
        return f"VarStore {self.name}@{self.slot}"


@dataclass(frozen=True)
class IfNode(Node):
    condition: Node
    then_branch: Node
    else_branch: Node

    def evaluate(self, frame, ctx):
        test = self.condition.evaluate(frame, ctx)
        if not isinstance(test, bool):
            raise KappaTypeError(f"condition value is not a boolean {to_display(test)}")
        if test:
            return self.then_branch.evaluate(frame, ctx)
        return self.else_branch.evaluate(frame, ctx)

    def children(self):
        return (self.condition, self.then_branch, self.else_branch)


@dataclass(frozen=True)
class PrintNode(Node):
    operand: Node

    def evaluate(self, frame, ctx):
        ctx.output(to_display(self.operand.evaluate(frame, ctx)))
        return LispList.empty()

    def children(self):
        return (self.operand,)


@dataclass(frozen=True)
class DefNode(Node):
    name: Symbol
    param_slots: tuple[int, ...]
    frame_size: int
    body: Node

    def evaluate(self, frame, ctx):
        function = CompiledFunction(self.name, self.param_slots, self.frame_size, self.body)
        if self.name in ctx.functions:
            logger.debug("redefining function %s", self.name)
        ctx.functions.define(self.name, function)
        logger.debug("defined function %s/%d", self.name, function.arity)
        return LispList.empty()

    def children(self):
        return (self.body,)

    def label(self) -> str:
        return f"Def {self.name} params={list(self.param_slots)} frame={self.frame_size}"


@dataclass(frozen=True)
class FunCallNode(Node):
    name: Symbol
    arguments: tuple[Node, ...]

    def evaluate(self, frame, ctx):
        values = [argument.evaluate(frame, ctx) for argument in self.arguments]
        function = ctx.functions.lookup(self.name)
        if len(values) != function.arity:
            raise KappaArityError(
                f"invalid number of arguments for function call {self.name}: "
                f"expected {function.arity}, got {len(values)}"
            )
        callee_frame = Frame(function.frame_size)
        for slot, value in zip(function.param_slots, values):
            callee_frame.set(slot, value)
        return function.body.evaluate(callee_frame, ctx)

    def children(self):
        return self.arguments

    def label(self) -> str:
        return f"FunCall {self.name}"


@dataclass(frozen=True)
class NumberOpNode(Node):
    op: BinOp
    left: Node
    right: Node

    def evaluate(self, frame, ctx):
        left = self.left.evaluate(frame, ctx)
        right = self.right.evaluate(frame, ctx)
        return compute(self.op, left, right)

    def children(self):
        return (self.left, self.right)

    def label(self) -> str:
        return f"NumberOp {self.op}"


@dataclass(frozen=True)
class CompareOpNode(Node):
    op: BinOp
    left: Node
    right: Node

    def evaluate(self, frame, ctx):
        left = self.left.evaluate(frame, ctx)
        right = self.right.evaluate(frame, ctx)
        return compare(self.op, left, right)

    def children(self):
        return (self.left, self.right)

    def label(self) -> str:
        return f"CompareOp {self.op}"


def make_binop(op: BinOp, left: Node, right: Node) -> Node:
    if op.is_comparison:
        return CompareOpNode(op, left, right)
    return NumberOpNode(op, left, right)
