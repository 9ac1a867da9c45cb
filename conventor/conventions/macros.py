"""
Scoped textual macros for description resolution.

A macro is a (pattern, replacement) rule. The pattern is a regular
expression and the replacement is inserted literally. A node's table is
applied before its ancestors' tables, so the rule closest to a description
wins.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator


@lru_cache(maxsize=None)
def _compile(pattern: str) -> re.Pattern:
    return re.compile(pattern)


@dataclass(frozen=True)
class Macro:
    """Single find/replace rule; identity is (pattern, replacement)."""
    pattern: str
    replacement: str

    @property
    def regex(self) -> re.Pattern:
        return _compile(self.pattern)

    def apply(self, text: str) -> str:
        """Replace every match of the pattern in text."""
        return self.regex.sub(lambda _match: self.replacement, text)


class MacroTable:
    """Ordered, duplicate-free sequence of macros owned by one node."""

    def __init__(self, macros: Iterable[Macro] = ()):
        self._macros: list[Macro] = []
        self.extend(macros)

    def add(self, macro: Macro) -> bool:
        """Append macro unless an equal rule is present; True if it was added."""
        if macro in self._macros:
            return False
        self._macros.append(macro)
        return True

    def extend(self, macros: Iterable[Macro]) -> None:
        for macro in macros:
            self.add(macro)

    def apply(self, text: str) -> str:
        """Single ordered pass of every rule over text."""
        for macro in self._macros:
            text = macro.apply(text)
        return text

    def copy(self) -> "MacroTable":
        return MacroTable(self._macros)

    def __contains__(self, macro: object) -> bool:
        return macro in self._macros

    def __iter__(self) -> Iterator[Macro]:
        return iter(self._macros)

    def __len__(self) -> int:
        return len(self._macros)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MacroTable):
            return NotImplemented
        return self._macros == other._macros

    def __repr__(self) -> str:
        return f"MacroTable({self._macros!r})"
