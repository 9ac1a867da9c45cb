"""Parser for raw bidding notation.

A raw token is the text used to reach a node from its parent, e.g. "1C",
"2NT!![puppet]", "1M", "2m|2NT" or "P". Parsing never fails: text that
matches none of the recognized forms becomes an opaque token that re-emits
its raw text unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Union

from conventor.bidding.models import DOUBLE, PASS, REDOUBLE, Call, Strain
from conventor.errors import InvalidCallError


# ---------- Regex patterns ----------

RE_WILDCARD = re.compile(r"([1-7])([MmX])")
RE_LEVEL = re.compile(r"^(\d+)")

ALTERNATION_SEPARATOR = "|"
SEQUENCE_SEPARATOR = "-"
IMPLIED_PASS = "/"

# Literal substring checks, in priority order
STRAIN_MARKERS = (
    ("C", Strain.CLUBS),
    ("D", Strain.DIAMONDS),
    ("H", Strain.HEARTS),
    ("S", Strain.SPADES),
    ("NT", Strain.NOTRUMP),
)


class WildcardKind(str, Enum):
    """Expansion dimension of a wildcard placeholder."""
    MAJOR = "M"   # 1M -> 1H / 1S
    MINOR = "m"   # 1m -> 1C / 1D
    ANY = "X"     # 1X -> 1C / 1D / 1H / 1S


NotationKey = Union[Call, str]


@dataclass(frozen=True)
class NotationToken:
    """The parse of one raw call."""
    raw: str
    call: Optional[Call] = None
    alert_tag: Optional[str] = None
    is_alertable: bool = False
    is_announceable: bool = False
    wildcard: Optional[WildcardKind] = None
    level: Optional[int] = None          # wildcard level, e.g. 2 for "2M"
    alternatives: tuple[NotationToken, ...] = ()

    @property
    def is_alternation(self) -> bool:
        return bool(self.alternatives)

    @property
    def is_wildcard(self) -> bool:
        return self.wildcard is not None

    @property
    def is_resolved(self) -> bool:
        return self.call is not None

    @property
    def is_opaque(self) -> bool:
        return self.call is None and self.wildcard is None and not self.alternatives

    @property
    def key(self) -> NotationKey:
        """Child-mapping key: the call once resolved, the raw text otherwise."""
        return self.call if self.call is not None else self.raw

    @classmethod
    def for_call(cls, call: Call) -> NotationToken:
        """Token for a call that was never written as text."""
        return cls(raw=str(call), call=call)

    def __str__(self) -> str:
        return self.raw


def _split_tag(text: str) -> tuple[str, Optional[str]]:
    """Split "2NT!![tag]" into ("2NT!!", "tag")."""
    index = text.find("[")
    if index == -1:
        return text, None
    tag = text[index + 1:]
    if tag.endswith("]"):
        tag = tag[:-1]
    return text[:index], tag


def _detect_strain(text: str) -> Strain:
    for marker, strain in STRAIN_MARKERS:
        if marker in text:
            return strain
    return Strain.NONE


def _parse_call(text: str) -> Optional[Call]:
    """Parse flag-free, tag-free call text; None if it is not a call."""
    match = RE_LEVEL.match(text)
    if match:
        if int(match.group(1)) == 0:
            return None
        try:
            return Call(int(match.group(1)), _detect_strain(text))
        except InvalidCallError:
            return None

    if text.startswith("XX"):
        return REDOUBLE
    if text.startswith("X"):
        return DOUBLE
    if text.startswith("P"):
        return PASS
    return None


def parse_notation(raw: Optional[str]) -> Optional[NotationToken]:
    """
    Parse raw call notation into a token.

    Args:
        raw: Raw text of one call

    Returns:
        NotationToken, or None for empty text (the root placeholder)
    """
    if raw is None or not raw.strip():
        return None

    raw = raw.strip()

    if ALTERNATION_SEPARATOR in raw:
        branches = tuple(
            token for token in (
                parse_notation(branch) for branch in raw.split(ALTERNATION_SEPARATOR)
            )
            if token is not None
        )
        return NotationToken(raw=raw, alternatives=branches)

    call_text, alert_tag = _split_tag(raw)
    is_announceable = "!!" in call_text
    is_alertable = not is_announceable and "!" in call_text
    call_text = call_text.replace("!", "").strip()

    wildcard = RE_WILDCARD.search(call_text)
    if wildcard:
        return NotationToken(
            raw=raw,
            alert_tag=alert_tag,
            is_alertable=is_alertable,
            is_announceable=is_announceable,
            wildcard=WildcardKind(wildcard.group(2)),
            level=int(wildcard.group(1)),
        )

    call = _parse_call(call_text)
    if call is None:
        return NotationToken(raw=raw)

    return NotationToken(
        raw=raw,
        call=call,
        alert_tag=alert_tag,
        is_alertable=is_alertable,
        is_announceable=is_announceable,
    )


def is_concrete_notation(raw: str) -> bool:
    """True when raw contains neither an alternation nor a wildcard."""
    if ALTERNATION_SEPARATOR in raw:
        return False
    call_text, _ = _split_tag(raw)
    return RE_WILDCARD.search(call_text) is None


def wildcard_kinds(raw: str) -> set[WildcardKind]:
    """Wildcard dimensions referenced by raw notation (alternations included)."""
    kinds = set()
    for branch in raw.split(ALTERNATION_SEPARATOR):
        call_text, _ = _split_tag(branch)
        kinds.update(WildcardKind(kind) for _, kind in RE_WILDCARD.findall(call_text))
    return kinds


def bind_wildcards(raw: str, suits: Mapping[WildcardKind, str]) -> str:
    """
    Substitute bound suits for wildcards, leaving flags and tag untouched.

    "2M![transfer]" with {MAJOR: "H"} becomes "2H![transfer]". Wildcards of
    an unbound dimension stay as they are.
    """
    call_text, alert_tag = _split_tag(raw)

    def substitute(match: re.Match) -> str:
        suit = suits.get(WildcardKind(match.group(2)))
        return match.group(0) if suit is None else f"{match.group(1)}{suit}"

    bound = RE_WILDCARD.sub(substitute, call_text)
    if alert_tag is None:
        return bound
    return f"{bound}{raw[len(call_text):]}"


def split_sequence(text: str) -> list[str]:
    """
    Split a sequence key into raw calls.

    "-" separates calls and "/" is shorthand for an intervening pass, so
    "1C/1H-2C" becomes ["1C", "P", "1H", "2C"].
    """
    text = text.replace(IMPLIED_PASS, f"{SEQUENCE_SEPARATOR}P{SEQUENCE_SEPARATOR}")
    text = text.replace(" ", "").lstrip(SEQUENCE_SEPARATOR)
    return [part for part in text.split(SEQUENCE_SEPARATOR) if part]
