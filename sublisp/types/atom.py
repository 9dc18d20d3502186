from __future__ import annotations
import sys

from sublisp.errors import InvalidAtom


class Atom:
    __slots__ = ("text",)

    def __init__(self, text: str):
        if not isinstance(text, str) or not text:
            raise InvalidAtom(f"Atom text must be a non-empty string, got {text!r}")
        # Intern to ensure fast equality/hash and reduce memory
        self.text = sys.intern(text)

    def __eq__(self, other: Atom) -> bool:
        return isinstance(other, Atom) and self.text == other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __repr__(self):
        return f"Atom({self.text!r})"

    def __str__(self):
        return self.text


TRUE = Atom("#t")
FALSE = Atom("#f")


def boolean(flag: bool) -> Atom:
    return TRUE if flag else FALSE
