from sublisp.reader.parser import parse, bad_expr, needs_more_input

__all__ = ["parse", "bad_expr", "needs_more_input"]
