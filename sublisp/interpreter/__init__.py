from __future__ import annotations

import logging
from typing import Mapping

from sublisp import Value
from sublisp.builtin.primitives import PRIMITIVES, Primitive
from sublisp.errors import ExitRequested
from sublisp.evaluation.evaluator import evaluate
from sublisp.printer import render
from sublisp.reader.parser import parse, bad_expr
from sublisp.types.bad_expr import is_error
from sublisp.types.definitions import Definitions

logger = logging.getLogger(__name__)

RECURSION_DEPTH_EXCEEDED = "recursion-depth-exceeded"


class Interpreter:
    """
    Reads and evaluates sublisp source.
    Keeps one Definitions table across calls, so `def` persists.
    """

    def __init__(
        self,
        prelude: str | None = None,
        *,
        primitives: Mapping[str, Primitive] = PRIMITIVES,
    ):
        self.defs: Definitions = Definitions()
        self.primitives = primitives
        if prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        """Evaluate every form in `code`, line by line, discarding results.
        A form may span several lines."""
        # Lazy import: repl depends on this module
        from sublisp.repl import ReadLoop

        loop = ReadLoop(self)
        for line in code.splitlines():
            try:
                result = loop.feed(line)
            except ExitRequested:
                break
            if result is not None and is_error(result):
                logger.warning("prelude: %s", render(result))
        if loop.pending:
            logger.warning("prelude: unterminated form")

    def evaluate(self, expr) -> Value:
        """Evaluate an already-parsed expression."""
        try:
            return evaluate(expr, self.defs, self.primitives)
        except RecursionError:
            logger.debug("recursion limit hit")
            return bad_expr(RECURSION_DEPTH_EXCEEDED)

    def eval(self, code: str) -> Value:
        expr = parse(code)
        if is_error(expr):
            return expr
        return self.evaluate(expr)

    def render(self, code: str) -> str:
        return render(self.eval(code))
