"""Application engine for sublisp.

Centralizes what happens once the operator position has been evaluated:
- lambda literals are applied by substitution (see substitute.py);
- atoms naming a primitive get their operands evaluated, then the primitive;
- anything else is an error value.

Operands are always evaluated left to right and the first error value stops
evaluation and is returned unchanged.
"""

from __future__ import annotations

import logging
from typing import Mapping

from sublisp import Expression, Value, EvaluatorFn
from sublisp.builtin.primitives import Primitive
from sublisp.evaluation.special_forms.lambda_form import is_lambda, lambda_params, lambda_body
from sublisp.evaluation.substitute import substitute
from sublisp.reader.parser import bad_expr
from sublisp.types.atom import Atom
from sublisp.types.bad_expr import BadExpr, is_error
from sublisp.types.definitions import Definitions

logger = logging.getLogger(__name__)


def evaluate_args(
    arg_exprs: list[Expression],
    defs: Definitions,
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> list[Value] | BadExpr:
    """Evaluate operands in order; return the first error value if any."""
    args = []
    for expr in arg_exprs:
        val = evaluate_fn(expr, defs, primitives)
        if is_error(val):
            return val
        args.append(val)
    return args


def apply_lambda(
    fn: Expression,
    arg_exprs: list[Expression],
    defs: Definitions,
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply a lambda literal to unevaluated operands.

    Arity is checked before any operand is evaluated. Each operand is
    evaluated in the caller's context, the body is rewritten with the
    values in place of the parameters, and the rewritten body is evaluated.
    """
    params = lambda_params(fn)
    if len(params) != len(arg_exprs):
        return bad_expr("params-size-args-size-mismatch")

    args = evaluate_args(arg_exprs, defs, primitives, evaluate_fn)
    if is_error(args):
        return args

    mapping = {p.text: a for p, a in zip(params, args)}
    body = substitute(lambda_body(fn), mapping, defs)
    logger.debug("apply lambda %s", [p.text for p in params])
    return evaluate_fn(body, defs, primitives)


def apply(
    head: Value,
    arg_exprs: list[Expression],
    defs: Definitions,
    primitives: Mapping[str, Primitive],
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Apply an evaluated operator to unevaluated operands."""
    if is_lambda(head):
        return apply_lambda(head, arg_exprs, defs, primitives, evaluate_fn)
    if isinstance(head, Atom):
        fn = primitives.get(head.text)
        if fn is None:
            return bad_expr(f"unknown-operator-{head.text}")
        args = evaluate_args(arg_exprs, defs, primitives, evaluate_fn)
        if is_error(args):
            return args
        logger.debug("apply primitive %s", head.text)
        return fn(args)
    return bad_expr("operator-not-atom-or-lambda")
