"""Core evaluator for sublisp.

Plain recursion, one Python frame per level of expression nesting plus one
per lambda application in progress. There is no tail-call elimination, so
deep programs are bounded by the interpreter's recursion limit; the
Interpreter turns RecursionError into (badexpr recursion-depth-exceeded).
"""

from __future__ import annotations

from typing import Mapping

from sublisp import Expression, Value
from sublisp.builtin.primitives import PRIMITIVES, Primitive
from sublisp.evaluation.apply import apply
from sublisp.evaluation.special_forms import SPECIAL_FORMS
from sublisp.evaluation.special_forms.lambda_form import is_lambda
from sublisp.types.atom import Atom
from sublisp.types.bad_expr import BadExpr, is_error
from sublisp.types.definitions import Definitions


def evaluate(
    expr: Expression,
    defs: Definitions,
    primitives: Mapping[str, Primitive] = PRIMITIVES,
) -> Value:
    """
    Evaluate `expr`, consulting `defs` for names and `primitives` for
    built-in operators. Failures come back as error values.
    """
    match expr:
        case Atom():
            # Atoms are self-evaluating unless bound
            return defs.lookup(expr, expr)

        case BadExpr() | []:
            return expr

        case [Atom() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, defs, primitives, evaluate)

        case _ if is_lambda(expr):
            return expr

        case [head, *tail]:
            op = evaluate(head, defs, primitives)
            if is_error(op):
                return op
            return apply(op, tail, defs, primitives, evaluate)

    raise TypeError(f"Not an expression: {expr!r}")
