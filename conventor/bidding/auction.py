"""
Auction legality state machine.

This module walks a sequence of calls through bidding-box rules. The same
transition function backs both the validator and the enumeration of legal
next calls, so the two can never disagree.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .models import ALL_CALLS, Call

# Passes since the last non-pass call that put it in partner's hand
PARTNER_PASS_COUNTS = (1, 3)


@dataclass(frozen=True)
class AuctionState:
    """Immutable legality state after a prefix of an auction."""

    passes_in_a_row: int = 0
    last_non_pass: Optional[Call] = None
    highest_contract: Optional[Call] = None

    @property
    def targets_partner(self) -> bool:
        """True when the last non-pass call was made by the next bidder's partner."""
        return self.passes_in_a_row in PARTNER_PASS_COUNTS

    def accepts(self, call: Call) -> bool:
        """Check whether call may legally follow this state."""
        if call.is_pass:
            return self.passes_in_a_row < 3

        if call.is_double:
            if self.highest_contract is None or self.targets_partner:
                return False
            # Cannot double a contract that is already doubled or redoubled
            return not (self.last_non_pass.is_double or self.last_non_pass.is_redouble)

        if call.is_redouble:
            if self.last_non_pass is None or not self.last_non_pass.is_double:
                return False
            return not self.targets_partner

        return self.highest_contract is None or call > self.highest_contract

    def after(self, call: Call) -> Optional["AuctionState"]:
        """
        Create the state following call.

        Args:
            call: The next call in the auction

        Returns:
            New AuctionState, or None if the call is illegal here
        """
        if not self.accepts(call):
            return None

        if call.is_pass:
            return AuctionState(
                passes_in_a_row=self.passes_in_a_row + 1,
                last_non_pass=self.last_non_pass,
                highest_contract=self.highest_contract,
            )

        return AuctionState(
            passes_in_a_row=0,
            last_non_pass=call,
            highest_contract=call if call.is_contract else self.highest_contract,
        )


def auction_state(calls: Iterable[Call]) -> Optional[AuctionState]:
    """Run calls through the state machine, returning None on the first violation."""
    state: Optional[AuctionState] = AuctionState()
    for call in calls:
        state = state.after(call)
        if state is None:
            return None
    return state


def is_legal_auction(calls: Iterable[Call]) -> bool:
    """
    Check whether a completed or partial auction is legal.

    There is no required terminal state: a sequence is legal when every call
    transitions without a violation.
    """
    return auction_state(calls) is not None


def is_next_call_legal(history: Iterable[Call], call: Call) -> bool:
    """Check whether call may be appended to a legal history."""
    state = auction_state(history)
    return state is not None and state.accepts(call)


def legal_next_calls(history: Iterable[Call]) -> list[Call]:
    """
    Enumerate the calls that may legally follow history.

    Pass, Double and Redouble come first when allowed, followed by every
    contract call above the current contract in ascending order. An illegal
    history has no legal continuation.
    """
    state = auction_state(history)
    if state is None:
        return []
    return [call for call in ALL_CALLS if state.accepts(call)]


def to_sequence_string(calls: Sequence[Call], separator: str = "-") -> str:
    """Render an auction as text, e.g. "1C-P-1H"."""
    return separator.join(str(call) for call in calls)
