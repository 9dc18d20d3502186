"""Python-level exceptions.

Language errors never raise: they are BadExpr values (see
sublisp.types.bad_expr). These exceptions cover programming errors and the
control flow of the read loop.
"""


class SublispError(Exception):
    """ Base class for all sublisp exceptions"""
    pass


class InvalidAtom(SublispError):
    """ Raised when an Atom is constructed from empty or non-string text"""
    pass


class ExitRequested(SublispError):
    """ Raised by the read loop when the user asks to leave"""
