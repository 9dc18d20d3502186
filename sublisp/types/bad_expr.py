"""Tagged error values.

An error value renders as a list headed by the atom `badexpr`, followed by
atoms describing the cause. Values produced by the system carry the BadExpr
type, so a user-built list that merely starts with `badexpr` stays data.
"""

from __future__ import annotations

from sublisp import Expression
from sublisp.types.atom import Atom

BADEXPR = Atom("badexpr")


class BadExpr(list):
    """A list-shaped error value. Never mutated after construction."""

    __slots__ = ()

    @property
    def reasons(self) -> list[str]:
        return [str(e) for e in self[1:] if isinstance(e, Atom)]

    @property
    def reason(self) -> str:
        return " ".join(self.reasons)

    def __repr__(self) -> str:
        return f"BadExpr({list.__repr__(self)})"


def is_error(expr: Expression) -> bool:
    return isinstance(expr, BadExpr)
