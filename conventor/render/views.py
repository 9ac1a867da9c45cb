"""Node view rendering."""

from dataclasses import asdict, dataclass
from typing import Any, Iterator, Optional

from conventor.bidding.models import Call
from conventor.config.defaults import RenderParams
from conventor.conventions.tree import ConventionNode


@dataclass(frozen=True)
class NodeView:
    """Read-only snapshot of one node for display."""
    sequence: str                  # e.g. "1C-P-1H"
    call: str                      # e.g. "1H" or "1♥", "" for the root
    strain: str                    # Strain abbreviation, "" for sentinels
    alert_tag: Optional[str]
    is_alertable: bool
    is_announceable: bool
    description: Optional[str]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _call_text(call: Optional[Call], params: RenderParams) -> str:
    if call is None:
        return ""
    if params.suit_symbols and call.is_contract:
        return f"{call.level}{call.strain.symbol}"
    return str(call)


def node_view(node: ConventionNode, params: Optional[RenderParams] = None) -> NodeView:
    """
    Build the view of a single node.

    Args:
        node: Node of a compiled tree
        params: Call text and separator options

    Returns:
        NodeView with the macro-resolved description
    """
    params = params or RenderParams()
    call = node.call
    return NodeView(
        sequence=params.sequence_separator.join(
            _call_text(key, params) if isinstance(key, Call) else key
            for key in node.sequence
        ),
        call=_call_text(call, params) if call is not None else node.raw_notation,
        strain=call.strain.short if call is not None else "",
        alert_tag=node.alert_tag,
        is_alertable=node.is_alertable,
        is_announceable=node.is_announceable,
        description=node.resolved_description,
    )


def iter_views(
    tree: ConventionNode,
    params: Optional[RenderParams] = None,
    include_root: bool = False,
) -> Iterator[NodeView]:
    """Depth-first views of every node below tree, in child order."""
    for node in tree.iter_nodes():
        if node is tree and not include_root:
            continue
        yield node_view(node, params)
