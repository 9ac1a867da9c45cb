"""
Expansion engine for wildcard, alternation and relay-step notation.

Expansion turns a tree built from raw notation into a fully concrete tree in
three passes:

1. Alternation flattening: a child written "2m|2NT" is replaced by one child
   per branch. Stateless; branches expand independently.
2. Wildcard binding: every combination of suit choices for the wildcard
   dimensions present (major, minor, any-suit) yields one complete copy of
   the tree with the binding threaded down the recursion, so all "M"
   wildcards in one copy resolve to the same major. The copies are merged
   back in enumeration order.
3. Step splicing: relay templates are attached at successive ascending
   calls after the node's last contract call.
"""

import itertools
from dataclasses import dataclass
from typing import Mapping, Optional

from conventor.bidding.models import Call, Strain
from conventor.config.defaults import ExpansionParams
from conventor.logging.config import get_expansion_logger, log_expansion_stage
from conventor.notation.parser import (
    NotationToken,
    WildcardKind,
    bind_wildcards,
    parse_notation,
    wildcard_kinds,
)

from .macros import Macro
from .merge import child_for_token, merge_into
from .tree import ConventionNode

expansion_logger = get_expansion_logger(__name__)

FIRST_STEP = Call(1, Strain.CLUBS)


@dataclass(frozen=True)
class WildcardBinding:
    """Suit chosen for each wildcard dimension in one expansion alternative."""

    suits: Mapping[WildcardKind, str]

    def macros_for(self, kind: WildcardKind) -> tuple[Macro, ...]:
        """Macros injected where a wildcard of kind is resolved."""
        suit = self.suits[kind]
        if kind is WildcardKind.MAJOR:
            return (Macro(r"\$M", suit), Macro(r"\$OM", "S" if suit == "H" else "H"))
        if kind is WildcardKind.MINOR:
            return (Macro(r"\$m", suit), Macro(r"\$Om", "D" if suit == "C" else "C"))
        return (Macro(r"\$X", suit),)


def collect_wildcard_kinds(node: ConventionNode) -> set[WildcardKind]:
    """Wildcard dimensions referenced anywhere in the subtree, step templates included."""
    kinds = set()
    if node.token is not None:
        kinds.update(wildcard_kinds(node.token.raw))
    for step in node.steps:
        kinds.update(collect_wildcard_kinds(step))
    for child in node.children.values():
        kinds.update(collect_wildcard_kinds(child))
    return kinds


def enumerate_bindings(
    kinds: set[WildcardKind], params: Optional[ExpansionParams] = None
) -> list[WildcardBinding]:
    """
    One binding per combination of choices for the dimensions present.

    Dimensions that do not occur are not enumerated, so one major and one
    minor wildcard give exactly four bindings. Order is major outermost,
    then minor, then any-suit.
    """
    params = params or ExpansionParams()
    dimensions = [
        (kind, choices)
        for kind, choices in (
            (WildcardKind.MAJOR, params.major_suits),
            (WildcardKind.MINOR, params.minor_suits),
            (WildcardKind.ANY, params.any_suits),
        )
        if kind in kinds
    ]
    present = [kind for kind, _ in dimensions]
    return [
        WildcardBinding(dict(zip(present, combination)))
        for combination in itertools.product(*(choices for _, choices in dimensions))
    ]


def _bind(
    node: ConventionNode,
    binding: WildcardBinding,
    parent: Optional[ConventionNode] = None,
) -> ConventionNode:
    """Concrete copy of node's subtree under binding."""
    token = node.token
    injected: list[Macro] = []
    if token is not None and token.is_wildcard:
        for kind in wildcard_kinds(token.raw):
            injected.extend(binding.macros_for(kind))
        token = parse_notation(bind_wildcards(token.raw, binding.suits))

    copy = ConventionNode(parent, token, node.description, node.priority)
    copy.alert_tag = node.alert_tag
    copy.is_alertable = node.is_alertable
    copy.is_announceable = node.is_announceable
    copy.macros = node.macros.copy()
    for macro in injected:
        # First definition along the path wins
        if not copy.defines_macro(macro):
            copy.macros.add(macro)

    copy.steps = [_bind(step, binding) for step in node.steps]

    for child in node.children.values():
        bound = _bind(child, binding, copy)
        existing = copy.children.get(bound.key)
        if existing is None:
            copy.children[bound.key] = bound
        else:
            merge_into(bound, existing)

    return copy


def wildcard_alternatives(
    node: ConventionNode, params: Optional[ExpansionParams] = None
) -> list[ConventionNode]:
    """All concrete alternatives of node's subtree, one per binding."""
    kinds = collect_wildcard_kinds(node)
    if not kinds:
        return []
    return [
        _bind(node, binding, node.parent)
        for binding in enumerate_bindings(kinds, params)
    ]


def flatten_alternations(node: ConventionNode) -> int:
    """
    Replace every alternation child with one child per branch.

    The children mapping is rebuilt and swapped in. A branch colliding with
    an existing sibling is merged into it.

    Returns:
        Number of alternation nodes flattened in the subtree
    """
    flattened = 0
    children: dict = {}

    for child in node.children.values():
        if child.token.is_alternation:
            flattened += 1
            candidates = [
                child.copy(parent=node, token=branch) for branch in child.token.alternatives
            ]
        else:
            candidates = [child]

        for candidate in candidates:
            existing = children.get(candidate.key)
            if existing is None:
                children[candidate.key] = candidate
            else:
                merge_into(candidate, existing)

    node.children = children

    for child in children.values():
        flattened += flatten_alternations(child)
    for step in node.steps:
        flattened += flatten_alternations(step)

    return flattened


def expand_wildcards(node: ConventionNode, params: Optional[ExpansionParams] = None) -> int:
    """
    Bind every wildcard in node's subtree and merge the alternatives back.

    Returns:
        Number of alternatives merged (0 when no wildcard is present)
    """
    alternatives = wildcard_alternatives(node, params)
    if not alternatives:
        return 0

    node.children = {}
    node.steps = []
    for alternative in alternatives:
        merge_into(alternative, node)

    return len(alternatives)


def _last_contract(node: ConventionNode) -> Optional[Call]:
    contracts = [key for key in node.sequence if isinstance(key, Call) and key.is_contract]
    return contracts[-1] if contracts else None


def splice_steps(node: ConventionNode, params: Optional[ExpansionParams] = None) -> int:
    """
    Attach each node's relay steps at successive ascending calls.

    Returns:
        Number of steps spliced in the subtree
    """
    params = params or ExpansionParams()
    spliced = 0

    if node.steps:
        current = _last_contract(node)
        for index, step in enumerate(node.steps):
            current = current.next_step() if current is not None else FIRST_STEP
            if current is None:
                expansion_logger.warning(
                    "Relay steps run past 7NT",
                    sequence=node.sequence_string(),
                    dropped=len(node.steps) - index,
                )
                break

            child = child_for_token(node, NotationToken.for_call(current))
            merge_into(step, child)
            if params.relay_alertable:
                child.is_alertable = True
            spliced += 1

        node.steps = []

    for child in list(node.children.values()):
        spliced += splice_steps(child, params)

    return spliced


def expand(root: ConventionNode, params: Optional[ExpansionParams] = None) -> ConventionNode:
    """
    Expand a tree built from raw notation into a single concrete tree.

    Args:
        root: Tree to expand in place
        params: Suit choices and relay options

    Returns:
        root, fully expanded
    """
    params = params or ExpansionParams()
    sequence = root.sequence_string()

    flattened = flatten_alternations(root)
    log_expansion_stage(
        expansion_logger, "alternation", sequence, {"flattened": flattened}
    )

    alternatives = expand_wildcards(root, params)
    log_expansion_stage(
        expansion_logger, "wildcards", sequence, {"alternatives": alternatives}
    )

    spliced = splice_steps(root, params)
    log_expansion_stage(
        expansion_logger, "steps", sequence, {"spliced": spliced}
    )

    return root
