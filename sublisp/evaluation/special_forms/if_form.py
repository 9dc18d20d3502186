from sublisp import EvaluatorFn
from sublisp import Expression, Value
from sublisp.reader.parser import bad_expr
from sublisp.types.atom import TRUE
from sublisp.types.bad_expr import is_error
from sublisp.types.definitions import Definitions
from sublisp.types.equality import equal


def if_form(
    tail: list[Expression],
    defs: Definitions,
    primitives,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """(if cond then else). Only #t selects `then`; any other value selects `else`."""
    if len(tail) != 3:
        return bad_expr("bad-argnum-for-if")

    cond = evaluate_fn(tail[0], defs, primitives)
    if is_error(cond):
        return cond

    if equal(cond, TRUE):
        return evaluate_fn(tail[1], defs, primitives)
    return evaluate_fn(tail[2], defs, primitives)
