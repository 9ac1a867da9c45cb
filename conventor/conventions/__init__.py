"""
Convention tree module.

Holds the recursive convention node structure together with the macro
table, the merge resolver, the expansion engine and the tree pruner.
"""
