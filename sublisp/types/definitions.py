"""Global definitions table.

Maps atom names to already-evaluated expressions. Entries are created by the
`def` special form and overwritten by redefinition; nothing is ever removed.
There is no outer scope: lambda application works by substitution, so this
flat table is the only place names resolve after a call has been rewritten.
"""

from __future__ import annotations

import logging
from typing import Iterator

from sublisp import Value
from sublisp.errors import InvalidAtom
from sublisp.types.atom import Atom

logger = logging.getLogger(__name__)


class Definitions:
    """Flat mapping from atom names to evaluated values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def define(self, name: Atom, value: Value) -> None:
        """Bind `name` to `value`, replacing any previous binding.

        Raises InvalidAtom if `name` is not an Atom.
        """
        if not isinstance(name, Atom):
            raise InvalidAtom(f"Cannot define {name!r}: name must be an atom")
        if name.text in self.vars:
            logger.debug("redefining %s", name.text)
        self.vars[name.text] = value

    def lookup(self, name: Atom, default: Value = None) -> Value:
        return self.vars.get(name.text, default)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Atom):
            return name.text in self.vars
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __repr__(self) -> str:
        return f"Definitions({sorted(self.vars)})"
