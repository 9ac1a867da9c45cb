"""
Tree pruner.

Removes subtrees whose auction is illegal, whose notation never resolved to
a call, or that carry no information (no description and no children).
"""

from typing import Optional

from conventor.bidding.auction import is_legal_auction
from conventor.config.defaults import PruneParams
from conventor.logging.config import get_auction_logger, log_prune_decision
from conventor.notation.parser import is_concrete_notation

from .tree import ConventionNode

auction_logger = get_auction_logger(__name__)


def _removal_reason(child: ConventionNode, params: PruneParams) -> Optional[str]:
    auction = child.auction
    if auction is None:
        if child.token is not None and not is_concrete_notation(child.token.raw):
            return "unexpanded"
        return "unresolved"
    if params.prune_illegal and not is_legal_auction(auction):
        return "illegal"
    if params.prune_empty and child.is_empty:
        return "empty"
    return None


def prune(node: ConventionNode, params: Optional[PruneParams] = None) -> int:
    """
    Post-order prune of node's subtree.

    Each child is pruned first and then removed itself if it fails the
    checks. Running prune on an already-pruned tree removes nothing.

    Args:
        node: Subtree root, modified in place
        params: Which removal rules apply

    Returns:
        Number of nodes removed, counting removed descendants
    """
    params = params or PruneParams()
    removed = 0

    for key, child in list(node.children.items()):
        removed += prune(child, params)

        reason = _removal_reason(child, params)
        if reason is None:
            continue

        del node.children[key]
        removed += sum(1 for _ in child.iter_nodes())
        log_prune_decision(
            auction_logger,
            sequence=child.sequence_string(),
            reason=reason,
        )

    return removed
