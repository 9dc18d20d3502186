"""Built-in primitives for the sublisp runtime.

Every primitive receives the list of already-evaluated arguments and returns
an expression. Failures are returned as error values, never raised.
Booleans are exactly the atoms #t and #f; `not`, `and` and `or` reject
anything else with (badexpr not-boolean).
"""
from __future__ import annotations

import re
from types import MappingProxyType
from typing import Callable, Mapping

from sublisp import Value
from sublisp.reader.parser import bad_expr
from sublisp.types.atom import Atom, TRUE, FALSE, boolean
from sublisp.types.equality import equal

Primitive = Callable[[list[Value]], Value]

NOT_BOOLEAN = "not-boolean"

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)


def bad_argnum(name: str) -> Value:
    return bad_expr(f"bad-argnum-for-{name}")


def to_int(value: Value) -> int:
    """Read an integer the way C's atoi does: optional sign and leading digits,
    anything else counts as 0. Lists count as 0."""
    if not isinstance(value, Atom):
        return 0
    m = _INT_PREFIX.match(value.text)
    return int(m.group(1)) if m else 0


# -------------------------------
# Predicates
# -------------------------------
def is_atom(args: list[Value]) -> Value:
    """(atom? x): #t if x is an atom, else #f."""
    if len(args) != 1:
        return bad_argnum("atom?")
    return boolean(isinstance(args[0], Atom))


def eq(args: list[Value]) -> Value:
    """(eq? a b): structural equality."""
    if len(args) != 2:
        return bad_argnum("eq?")
    return boolean(equal(args[0], args[1]))


# -------------------------------
# Lists
# -------------------------------
def head(args: list[Value]) -> Value:
    if len(args) != 1:
        return bad_argnum("head")
    xs = args[0]
    if isinstance(xs, Atom):
        return bad_expr("head-of-atom")
    if not xs:
        return bad_expr("head-of-empty-list")
    return xs[0]


def tail(args: list[Value]) -> Value:
    """(tail xs): everything after the first element; () stays ()."""
    if len(args) != 1:
        return bad_argnum("tail")
    xs = args[0]
    if isinstance(xs, Atom):
        return bad_expr("tail-of-atom")
    return list(xs[1:])


def cons(args: list[Value]) -> Value:
    """(cons x xs): new list with x prepended. An atom xs is treated as (xs)."""
    if len(args) != 2:
        return bad_argnum("cons")
    first, rest = args
    if isinstance(rest, Atom):
        return [first, rest]
    return [first, *rest]


# -------------------------------
# Logic
# -------------------------------
def _booleans(args: list[Value]) -> list[bool] | None:
    flags = []
    for arg in args:
        if arg == TRUE:
            flags.append(True)
        elif arg == FALSE:
            flags.append(False)
        else:
            return None
    return flags


def logical_not(args: list[Value]) -> Value:
    if len(args) != 1:
        return bad_argnum("not")
    flags = _booleans(args)
    if flags is None:
        return bad_expr(NOT_BOOLEAN)
    return boolean(not flags[0])


def logical_and(args: list[Value]) -> Value:
    """(and ...): #t if every operand is #t. (and) is #t."""
    flags = _booleans(args)
    if flags is None:
        return bad_expr(NOT_BOOLEAN)
    return boolean(all(flags))


def logical_or(args: list[Value]) -> Value:
    """(or ...): #t if any operand is #t. (or) is #f."""
    flags = _booleans(args)
    if flags is None:
        return bad_expr(NOT_BOOLEAN)
    return boolean(any(flags))


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[Value]) -> Value:
    return Atom(str(sum(to_int(a) for a in args)))


def mul(args: list[Value]) -> Value:
    result = 1
    for a in args:
        result *= to_int(a)
    return Atom(str(result))


def _registry() -> dict[str, Primitive]:
    return {
        "atom?": is_atom,
        "head": head,
        "tail": tail,
        "cons": cons,
        "eq?": eq,
        "and": logical_and,
        "or": logical_or,
        "not": logical_not,
        "+": add,
        "*": mul,
    }


# Read-only after import
PRIMITIVES: Mapping[str, Primitive] = MappingProxyType(_registry())
