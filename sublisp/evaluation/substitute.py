"""Parameter substitution for lambda application.

There are no environments: applying (lambda (x) body) to a value rewrites
`body` with the value in place of every free `x`, and the rewritten body is
then evaluated like any other expression.

Rules:
- substitution descends into nested lists;
- quote forms are left alone, quoted data is literal;
- a nested lambda literal that rebinds a parameter name shadows it, so that
  name is not replaced inside the nested body;
- a value that would mean something else when evaluated again (a non-empty
  list that is not a lambda literal, or an atom bound in the definitions
  table) is inserted as (quote value).
"""

from __future__ import annotations

from sublisp import Expression, Value
from sublisp.evaluation.special_forms import QUOTE
from sublisp.evaluation.special_forms.lambda_form import is_lambda, lambda_params, lambda_body
from sublisp.types.atom import Atom
from sublisp.types.definitions import Definitions


def as_literal(value: Value, defs: Definitions) -> Expression:
    """Return an expression that evaluates to `value` unchanged."""
    if isinstance(value, Atom):
        return [QUOTE, value] if value in defs else value
    if not value or is_lambda(value):
        return value
    return [QUOTE, value]


def substitute(expr: Expression, mapping: dict[str, Value], defs: Definitions) -> Expression:
    if not mapping:
        return expr
    if isinstance(expr, Atom):
        if expr.text in mapping:
            return as_literal(mapping[expr.text], defs)
        return expr
    if not expr or expr[0] == QUOTE:
        return expr
    if is_lambda(expr):
        params = lambda_params(expr)
        shadowed = {p.text for p in params}
        inner = {k: v for k, v in mapping.items() if k not in shadowed}
        return [expr[0], params, substitute(lambda_body(expr), inner, defs)]
    return [substitute(item, mapping, defs) for item in expr]
