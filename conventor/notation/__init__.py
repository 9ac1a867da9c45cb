"""
Bidding notation module.

Parses raw call notation ("2NT!![tag]", "1M", "2m|2NT") into structured
tokens carrying flags, tags and either a concrete call or a pending
wildcard/alternation.
"""
from .parser import NotationToken, WildcardKind, parse_notation, split_sequence

__all__ = ["NotationToken", "WildcardKind", "parse_notation", "split_sequence"]
