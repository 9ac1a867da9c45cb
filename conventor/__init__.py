"""
Conventor - Bridge Bidding System Compiler

Compiles a declarative, sequence-keyed description of a contract-bridge
bidding system into a fully concrete tree of legal auctions. Wildcard and
alternation notation is expanded, variant trees are merged by declaration
priority, and illegal or empty branches are pruned.
"""

__version__ = "0.1.0"
__author__ = "Conventor Team"
