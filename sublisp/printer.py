"""Tree-to-text rendering.

`render` is the canonical form used for results and error values: atoms as
their text, lists as space-separated elements in parentheses. `colorize`
produces the same text with ANSI colors for the interactive shell.

Both walk the tree with an explicit stack, like the reader, so any
expression the reader can build can also be printed.
"""

from io import StringIO
from typing import Callable, Optional

from sublisp import Expression
from sublisp.types.atom import Atom, TRUE, FALSE
from sublisp.types.bad_expr import BadExpr

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_ERROR = "\033[91m"
COLOR_BOOLEAN = "\033[96m"
COLOR_LAMBDA = "\033[92m"

LAMBDA = Atom("lambda")

_END = object()


def _write(buffer: StringIO, expr: Expression, leaf: Callable[[Expression], Optional[str]]) -> None:
    """Write `expr` to `buffer`. `leaf(item)` returns the text for a whole
    subtree, or None to walk into a list."""
    stack = [iter((expr,))]
    first = [True]
    while stack:
        item = next(stack[-1], _END)
        if item is _END:
            stack.pop()
            first.pop()
            if stack:
                buffer.write(")")
            continue
        if not first[-1]:
            buffer.write(" ")
        first[-1] = False
        text = leaf(item)
        if text is not None:
            buffer.write(text)
        else:
            buffer.write("(")
            stack.append(iter(item))
            first.append(True)


def _plain(item: Expression) -> Optional[str]:
    return item.text if isinstance(item, Atom) else None


def render(expr: Expression) -> str:
    if isinstance(expr, Atom):
        return expr.text
    with StringIO() as buffer:
        _write(buffer, expr, _plain)
        return buffer.getvalue()


# ----------------- Colorize utility -----------------
def _colored(item: Expression) -> Optional[str]:
    if isinstance(item, BadExpr):
        return f"{COLOR_ERROR}{render(item)}{RESET}"
    if item == TRUE or item == FALSE:
        return f"{COLOR_BOOLEAN}{item.text}{RESET}"
    if isinstance(item, Atom):
        return item.text
    if item and item[0] == LAMBDA:
        return f"{COLOR_LAMBDA}{render(item)}{RESET}"
    return None


def colorize(expr: Expression) -> str:
    with StringIO() as buffer:
        _write(buffer, expr, _colored)
        return buffer.getvalue()
