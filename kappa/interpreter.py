from __future__ import annotations

import logging
import os
import sys

from kappa import LispValue, OutputFn, config
from kappa.compiler.builder import AstBuilder
from kappa.compiler.scope import Scope
from kappa.debug_utils.pprint import options_from_env, pprint_node
from kappa.errors import KappaEvalError
from kappa.evaluation.function_table import FunctionTable
from kappa.evaluation.nodes import Node
from kappa.executor import Executor, TreeWalkingExecutor
from kappa.reader.parser import Reader
from kappa.runtime_context import RuntimeContext
from kappa.types.lisp_list import LispList


logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads Kappa forms one at a time, builds each against a fresh scope and
    hands the node tree to an executor. Functions defined by (def ...) live
    in the interpreter's FunctionTable and persist across forms and calls.
    """

    def __init__(
        self,
        output: OutputFn | None = None,
        executor: Executor | None = None,
        *,
        dump_ast: bool | None = None,
        builder: AstBuilder | None = None,
    ):
        self.context: RuntimeContext = (
            RuntimeContext() if output is None else RuntimeContext(output=output)
        )
        self.executor: Executor = executor or TreeWalkingExecutor()
        self.builder: AstBuilder = builder or AstBuilder()
        self.dump_ast: bool = config.dump_ast_enabled() if dump_ast is None else dump_ast
        # Errors skipped by run(..., keep_going=True)
        self.errors: list[KappaEvalError] = []
        logger.debug("using %s executor", self.executor.name)

    @property
    def functions(self) -> FunctionTable:
        return self.context.functions

    def build(self, form: LispList) -> tuple[Node, Scope]:
        scope = Scope()
        node = self.builder.build(form, scope)
        if self.dump_ast:
            print("=== AST ===", file=sys.stderr)
            print(pprint_node(node, options_from_env()), file=sys.stderr)
            print("=== END AST ===", file=sys.stderr)
        return node, scope

    def eval_form(self, form: LispList) -> LispValue:
        """Build and execute one top-level form as an independent unit."""
        node, scope = self.build(form)
        logger.debug("evaluating %s (frame size %d)", form, scope.size)
        return self.executor.execute(node, scope.size, self.context)

    def run(self, data: bytes | str, keep_going: bool = False) -> LispValue:
        """
        Evaluate every top-level form of ``data`` and return the last value.

        Parse errors always stop the run. Build and evaluation errors stop it
        too unless ``keep_going`` is set, in which case the failing form is
        skipped and the error recorded in ``self.errors``.
        """
        reader = Reader(data)
        result: LispValue = LispList.empty()
        while not reader.at_end():
            form = reader.parse_list()
            try:
                result = self.eval_form(form)
            except KappaEvalError as exc:
                if not keep_going:
                    raise
                logger.warning("skipping form %s: %s", form, exc)
                self.errors.append(exc)
        return result

    def eval(self, code: str) -> LispValue:
        return self.run(code)

    def run_file(self, path: str | os.PathLike, keep_going: bool = False) -> LispValue:
        with open(path, "rb") as f:
            data = f.read()
        logger.debug("read %d bytes from %s", len(data), path)
        return self.run(data, keep_going=keep_going)
