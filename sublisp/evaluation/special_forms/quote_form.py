from sublisp import Expression, Value, EvaluatorFn
from sublisp.reader.parser import bad_expr
from sublisp.types.definitions import Definitions


def quote_form(
    tail: list[Expression], defs: Definitions, primitives, evaluate_fn: EvaluatorFn
) -> Value:
    if len(tail) != 1:
        return bad_expr("bad-argnum-for-quote")
    return tail[0]
