"""
Plain-data views of a compiled convention tree.

Views carry call text, strain, flags and the resolved description so that
external formatters never touch ConventionNode directly.
"""
from .views import NodeView, iter_views, node_view

__all__ = ["NodeView", "iter_views", "node_view"]
