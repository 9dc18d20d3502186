"""
  sublisp reader

- Single-pass stack machine over characters, no separate lexer
- Emits plain Python values:

    - atoms -> Atom
    - lists -> Python list
    - failures -> BadExpr, e.g. (badexpr failed-at-pos:4)

The input is wrapped as "(" + text + ")" so a bare atom is read as a
one-element list by the same machine, then unwrapped at the end.
There are no string literals and no quote shorthand: every character
that is not whitespace or a bracket is token text.
"""

from __future__ import annotations

from sublisp import Expression
from sublisp.types.atom import Atom
from sublisp.types.bad_expr import BadExpr

FAILED_AT_POS = "failed-at-pos"
EXTRA_BRACKETS = "extra-brackets?"
MULTIPLE_ATOMS = "multiple-atoms"


def bad_expr(reason: str) -> BadExpr:
    """Build an error value by reading a synthesized `(badexpr <reason>)`."""
    return BadExpr(parse(f"(badexpr {reason})"))


def failed_at_pos(i: int) -> BadExpr:
    return bad_expr(f"{FAILED_AT_POS}:{i}")


def parse(text: str) -> Expression:
    """Read one expression from `text`. Never raises; failures are BadExpr."""
    code = "(" + text + ")"
    stack: list[list[Expression]] = []
    token: list[str] = []
    result: list[Expression] | None = None
    n = len(code)
    i = 0

    while i < n:
        ch = code[i]
        i += 1

        if ch.isspace() or ch in "()":
            if token:
                if not stack:
                    return failed_at_pos(i - 1)
                stack[-1].append(Atom("".join(token)))
                token.clear()

        if ch == "(":
            stack.append([])
        elif ch == ")":
            done = stack.pop()
            if not stack:
                result = done
                break
            stack[-1].append(done)
        elif not ch.isspace():
            token.append(ch)

    if i < n:
        return failed_at_pos(i)
    if stack or result is None:
        return bad_expr(EXTRA_BRACKETS)
    if len(result) > 1:
        return bad_expr(MULTIPLE_ATOMS)
    return result[0] if result else []


def needs_more_input(expr: Expression) -> bool:
    """True if `expr` is the unbalanced-bracket failure a read loop can resolve
    by asking for another line."""
    return isinstance(expr, BadExpr) and expr.reasons == [EXTRA_BRACKETS]
