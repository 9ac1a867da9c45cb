"""
Convention tree node.

A node is the state of the auction after one call. Children are keyed by
the next call (or, before expansion, by raw wildcard/alternation text). The
parent reference is used for lookups only: walking up for macros, "$d"
placeholders and the node's own auction. Ownership runs strictly downwards
through ``children``.
"""

import re
from typing import Iterable, Iterator, Optional, Union

from conventor.bidding.models import Call
from conventor.notation.parser import NotationKey, NotationToken, parse_notation, split_sequence

from .macros import Macro, MacroTable

SequenceItem = Union[str, Call]


class ConventionNode:
    """One position in the auction tree."""

    def __init__(
        self,
        parent: Optional["ConventionNode"] = None,
        token: Optional[NotationToken] = None,
        description: Optional[str] = None,
        priority: int = 0,
    ):
        self.parent = parent
        self.token = token
        self.alert_tag = token.alert_tag if token else None
        self.is_alertable = token.is_alertable if token else False
        self.is_announceable = token.is_announceable if token else False
        self.description = description
        self.priority = priority
        self.macros = MacroTable()
        self.children: dict[NotationKey, ConventionNode] = {}
        self.steps: list[ConventionNode] = []
        self._resolved_description: Optional[str] = None

    @classmethod
    def root(cls, macros: Iterable[Macro] = ()) -> "ConventionNode":
        """Create an empty-auction root carrying global macros."""
        node = cls()
        node.macros.extend(macros)
        return node

    # --- Identity ---

    @property
    def raw_notation(self) -> str:
        return self.token.raw if self.token else ""

    @property
    def call(self) -> Optional[Call]:
        return self.token.call if self.token else None

    @property
    def key(self) -> Optional[NotationKey]:
        return self.token.key if self.token else None

    @property
    def is_root(self) -> bool:
        return self.token is None

    @property
    def is_empty(self) -> bool:
        """No description and no children: the node carries no information."""
        return not self.description and not self.children

    def ancestors(self) -> Iterator["ConventionNode"]:
        """Yield this node, its parent, and so on up to the root."""
        current: Optional[ConventionNode] = self
        while current is not None:
            yield current
            current = current.parent

    @property
    def sequence(self) -> list[NotationKey]:
        """Keys from the root down to this node."""
        keys = [node.key for node in self.ancestors() if node.key is not None]
        keys.reverse()
        return keys

    @property
    def auction(self) -> Optional[list[Call]]:
        """Calls from the root to this node, None while any step is unresolved."""
        calls = []
        for key in self.sequence:
            if not isinstance(key, Call):
                return None
            calls.append(key)
        return calls

    def sequence_string(self, separator: str = "-") -> str:
        return separator.join(str(key) for key in self.sequence)

    # --- Navigation ---

    def get(
        self, sequence: Iterable[SequenceItem], create: bool = False
    ) -> Optional["ConventionNode"]:
        """
        Follow sequence down from this node.

        Args:
            sequence: Raw notation strings and/or Calls
            create: Create missing nodes instead of returning None

        Returns:
            The node at the end of the path, or None if absent and not created
        """
        node = self
        for item in sequence:
            if isinstance(item, Call):
                token = NotationToken.for_call(item)
            else:
                token = parse_notation(item)
                if token is None:
                    continue

            child = node.children.get(token.key)
            if child is None:
                if not create:
                    return None
                child = ConventionNode(node, token)
                node.children[token.key] = child
            node = child
        return node

    def get_or_create(self, sequence: Iterable[SequenceItem]) -> "ConventionNode":
        return self.get(sequence, create=True)

    def iter_nodes(self) -> Iterator["ConventionNode"]:
        """Depth-first, pre-order walk of this subtree."""
        yield self
        for child in self.children.values():
            yield from child.iter_nodes()

    # --- Descriptions ---

    @property
    def resolved_description(self) -> Optional[str]:
        """
        Description with macros and "$d" placeholders substituted.

        Walks inside-out: at depth d (0 is this node) the node's own macros are
        applied first, then "$d" becomes that node's strain abbreviation. The
        result is cached on first access.
        """
        if self._resolved_description is not None:
            return self._resolved_description

        if self.description is None:
            return None

        text = self.description
        for depth, node in enumerate(self.ancestors()):
            text = node.macros.apply(text)
            strain = node.call.strain.short if node.call is not None else ""
            text = re.sub(rf"\${depth}(?!\d)", lambda _match: strain, text)

        self._resolved_description = text.strip()
        return self._resolved_description

    def forget_resolved_descriptions(self, recursive: bool = True) -> None:
        """Drop cached resolved descriptions for this node and, by default, its subtree."""
        nodes = self.iter_nodes() if recursive else (self,)
        for node in nodes:
            node._resolved_description = None

    def defines_macro(self, macro: Macro) -> bool:
        """True if this node or any ancestor already holds macro."""
        return any(macro in node.macros for node in self.ancestors())

    # --- Copying ---

    def copy(
        self,
        parent: Optional["ConventionNode"] = None,
        token: Optional[NotationToken] = None,
    ) -> "ConventionNode":
        """Deep copy of this subtree, optionally re-attached under a new token."""
        clone = ConventionNode(parent, token if token is not None else self.token)
        if token is None:
            clone.alert_tag = self.alert_tag
            clone.is_alertable = self.is_alertable
            clone.is_announceable = self.is_announceable
        clone.description = self.description
        clone.priority = self.priority
        clone.macros = self.macros.copy()
        clone.steps = [step.copy() for step in self.steps]
        for key, child in self.children.items():
            clone.children[key] = child.copy(parent=clone)
        return clone

    def __repr__(self) -> str:
        return (
            f"ConventionNode({self.sequence_string()!r}, "
            f"priority={self.priority}, children={len(self.children)})"
        )


def get_node(
    tree: ConventionNode, sequence: Union[str, Iterable[SequenceItem]]
) -> Optional[ConventionNode]:
    """
    Exact-path lookup; no partial matches.

    Args:
        tree: Root of a convention tree
        sequence: "1C-P-1H" style text, or an iterable of raw calls / Calls

    Returns:
        The node at that path, or None if it does not exist
    """
    if isinstance(sequence, str):
        sequence = split_sequence(sequence)
    return tree.get(sequence)
