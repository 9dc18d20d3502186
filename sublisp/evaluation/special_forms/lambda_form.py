from sublisp import Expression
from sublisp.types.atom import Atom

LAMBDA = Atom("lambda")


def is_lambda(expr: Expression) -> bool:
    """A lambda literal: (lambda (param ...) body), every param an atom.

    Lambda literals are values. They evaluate to themselves and are only
    taken apart when they end up in operator position.
    """
    return (
        isinstance(expr, list)
        and len(expr) == 3
        and expr[0] == LAMBDA
        and isinstance(expr[1], list)
        and all(isinstance(p, Atom) for p in expr[1])
    )


def lambda_params(expr: Expression) -> list[Atom]:
    return expr[1]


def lambda_body(expr: Expression) -> Expression:
    return expr[2]
