from sublisp.types.atom import Atom, TRUE, FALSE
from sublisp.types.bad_expr import BadExpr, is_error
from sublisp.types.definitions import Definitions
from sublisp.types.equality import equal

__all__ = ["Atom", "TRUE", "FALSE", "BadExpr", "is_error", "Definitions", "equal"]
