"""
Merge resolver for convention trees.

Merging folds a source subtree into a target positioned at the same path.
Content declared later (higher priority) wins; content already present with
equal or higher priority is kept. Merge is not commutative: the order of
calls encodes precedence.
"""

from conventor.notation.parser import NotationToken

from .tree import ConventionNode


def child_for_token(node: ConventionNode, token: NotationToken) -> ConventionNode:
    """Find or create the child of node reached by token."""
    child = node.children.get(token.key)
    if child is None:
        child = ConventionNode(node, token)
        node.children[token.key] = child
    return child


def merge_into(source: ConventionNode, target: ConventionNode) -> ConventionNode:
    """
    Merge source into target in place.

    A non-empty source description replaces the target's (with its flags,
    alert tag and priority) when the source has strictly higher priority or
    the target has no description yet. Steps follow the same rule. Macros
    are appended unless an equal rule is present (clearing cached resolved
    descriptions below target), and children are merged
    recursively by notation key.

    Args:
        source: Subtree providing content
        target: Subtree receiving content

    Returns:
        target, for chaining
    """
    outranks = source.priority > target.priority

    if source.description:
        if outranks or not target.description:
            target.description = source.description
            target.priority = source.priority
            target.is_alertable = source.is_alertable
            target.is_announceable = source.is_announceable
            target.alert_tag = source.alert_tag
            target.forget_resolved_descriptions(recursive=False)

    if source.steps:
        if outranks or not target.steps:
            target.steps = [step.copy() for step in source.steps]

    added = [macro for macro in source.macros if target.macros.add(macro)]
    if added:
        # descendants resolve through this node's macros
        target.forget_resolved_descriptions()

    for child in source.children.values():
        merge_into(child, child_for_token(target, child.token))

    return target


def merged(source: ConventionNode, target: ConventionNode) -> ConventionNode:
    """Pure merge: the result of merging source into a copy of target."""
    return merge_into(source, target.copy(parent=target.parent))
