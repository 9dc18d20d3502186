import logging

from sublisp import EvaluatorFn
from sublisp import Expression, Value
from sublisp.reader.parser import bad_expr
from sublisp.types.atom import Atom
from sublisp.types.bad_expr import is_error
from sublisp.types.definitions import Definitions

logger = logging.getLogger(__name__)


def define_form(
    tail: list[Expression],
    defs: Definitions,
    primitives,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """
    (def name value)
    Binds the evaluated value globally. The form itself evaluates to ().
    An error value is returned as-is and nothing is bound.
    """
    if len(tail) != 2:
        return bad_expr("bad-argnum-for-def")

    name, val_expr = tail
    if not isinstance(name, Atom):
        return bad_expr("def-arg-should-be-atom")

    value = evaluate_fn(val_expr, defs, primitives)
    if is_error(value):
        return value
    defs.define(name, value)
    logger.debug("def %s", name)
    return []
