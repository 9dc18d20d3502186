from sublisp import Expression
from sublisp.types.atom import Atom


def equal(a: Expression, b: Expression) -> bool:
    """Structural equality: atoms by text, lists element-wise and in order.

    Uses an explicit stack of pending pairs, so nesting depth is unbounded.
    """
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if x is y:
            continue
        if isinstance(x, Atom) or isinstance(y, Atom):
            if not (isinstance(x, Atom) and isinstance(y, Atom) and x.text == y.text):
                return False
            continue
        if not (isinstance(x, list) and isinstance(y, list)) or len(x) != len(y):
            return False
        pending.extend(zip(x, y))
    return True
