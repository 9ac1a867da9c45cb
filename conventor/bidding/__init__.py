"""
Call model and auction legality module.

Defines the immutable Call value type and the state machine that decides
whether a sequence of calls is a legal bridge auction.
"""
