# Core type aliases for sublisp's data model.
# An expression is either an Atom (sublisp.types.atom) or a plain Python list
# of expressions. Error values are BadExpr lists (sublisp.types.bad_expr).
#
# Naming guidance:
# - Expression: use in reader/printer code for syntactic forms.
# - Value:      use in evaluator/runtime code for evaluated results.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

Expression = Any
Value = Expression

# Evaluator function type, passed into special forms
EvaluatorFn = Callable[..., Value]

__version__ = "0.1.0"
