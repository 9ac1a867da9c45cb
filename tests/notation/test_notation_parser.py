"""Tests for raw notation parsing."""

import pytest

from conventor.bidding.models import DOUBLE, PASS, REDOUBLE, Call, Strain
from conventor.notation import NotationToken, WildcardKind, parse_notation, split_sequence
from conventor.notation.parser import bind_wildcards, is_concrete_notation, wildcard_kinds


class TestConcreteCalls:
    """Test parsing of plain call text."""

    @pytest.mark.parametrize("raw,expected", [
        ("1C", Call(1, Strain.CLUBS)),
        ("2D", Call(2, Strain.DIAMONDS)),
        ("4H", Call(4, Strain.HEARTS)),
        ("6S", Call(6, Strain.SPADES)),
        ("3NT", Call(3, Strain.NOTRUMP)),
        ("P", PASS),
        ("X", DOUBLE),
        ("XX", REDOUBLE),
    ])
    def test_call_text(self, raw, expected):
        token = parse_notation(raw)
        assert token.call == expected
        assert token.is_resolved
        assert token.key == expected

    def test_surrounding_whitespace(self):
        assert parse_notation("  1H ").call == Call(1, Strain.HEARTS)

    def test_empty_text_is_root(self):
        assert parse_notation("") is None
        assert parse_notation("   ") is None
        assert parse_notation(None) is None


class TestFlagsAndTags:
    """Test alert and announce markers."""

    def test_alertable(self):
        token = parse_notation("2D!")
        assert token.is_alertable
        assert not token.is_announceable
        assert token.call == Call(2, Strain.DIAMONDS)

    def test_announceable_with_tag(self):
        token = parse_notation("2NT!![puppet]")
        assert token.is_announceable
        assert not token.is_alertable
        assert token.alert_tag == "puppet"
        assert token.call == Call(2, Strain.NOTRUMP)

    def test_tag_does_not_affect_strain(self):
        """Letters in the tag never change the strain."""
        token = parse_notation("2C![Stayman]")
        assert token.call == Call(2, Strain.CLUBS)
        assert token.alert_tag == "Stayman"

    def test_raw_text_kept(self):
        token = parse_notation("1C![strong]")
        assert token.raw == "1C![strong]"
        assert str(token) == "1C![strong]"


class TestWildcards:
    """Test wildcard placeholders."""

    @pytest.mark.parametrize("raw,kind,level", [
        ("1M", WildcardKind.MAJOR, 1),
        ("2m", WildcardKind.MINOR, 2),
        ("3X", WildcardKind.ANY, 3),
    ])
    def test_wildcard_token(self, raw, kind, level):
        token = parse_notation(raw)
        assert token.is_wildcard
        assert token.wildcard is kind
        assert token.level == level
        assert token.call is None
        assert token.key == raw

    def test_wildcard_keeps_flags(self):
        token = parse_notation("2M![transfer]")
        assert token.is_alertable
        assert token.alert_tag == "transfer"

    def test_wildcard_kinds(self):
        assert wildcard_kinds("1M") == {WildcardKind.MAJOR}
        assert wildcard_kinds("2m|2M") == {WildcardKind.MINOR, WildcardKind.MAJOR}
        assert wildcard_kinds("1C[MX]") == set()

    def test_bind_wildcards_keeps_suffix(self):
        assert bind_wildcards("2M![transfer]", {WildcardKind.MAJOR: "H"}) == "2H![transfer]"
        assert bind_wildcards("1m", {WildcardKind.MAJOR: "S"}) == "1m"

    def test_concrete_notation(self):
        assert is_concrete_notation("1C!")
        assert not is_concrete_notation("1M")
        assert not is_concrete_notation("1C|1D")


class TestAlternation:
    """Test "|" alternatives."""

    def test_branches_parsed_independently(self):
        token = parse_notation("2m!|2NT")
        assert token.is_alternation
        assert [branch.raw for branch in token.alternatives] == ["2m!", "2NT"]
        assert token.alternatives[0].is_wildcard
        assert token.alternatives[0].is_alertable
        assert token.alternatives[1].call == Call(2, Strain.NOTRUMP)
        assert not token.alternatives[1].is_alertable

    def test_empty_branches_dropped(self):
        token = parse_notation("1C||1D")
        assert len(token.alternatives) == 2


class TestOpaqueTokens:
    """Test text that is not a call."""

    @pytest.mark.parametrize("raw", ["foo", "0C", "8NT", "3OM", "1"])
    def test_opaque(self, raw):
        token = parse_notation(raw)
        assert token.is_opaque
        assert token.key == raw
        assert str(token) == raw

    def test_for_call(self):
        token = NotationToken.for_call(Call(2, Strain.HEARTS))
        assert token.raw == "2H"
        assert token.is_resolved


class TestSplitSequence:
    """Test sequence-key splitting."""

    def test_dash_separated(self):
        assert split_sequence("1C-1D-2C") == ["1C", "1D", "2C"]

    def test_slash_inserts_pass(self):
        assert split_sequence("1C/1H-2C") == ["1C", "P", "1H", "2C"]

    def test_spaces_and_leading_dash(self):
        assert split_sequence(" -1C - 1D") == ["1C", "1D"]

    def test_single_call(self):
        assert split_sequence("2NT!![puppet]") == ["2NT!![puppet]"]
