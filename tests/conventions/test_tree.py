"""Tests for convention tree nodes."""

from conventor.bidding.models import PASS, Call, Strain
from conventor.conventions.macros import Macro
from conventor.conventions.tree import ConventionNode, get_node
from conventor.notation import parse_notation


class TestNavigation:
    """Test path lookup and creation."""

    def test_get_or_create_builds_path(self):
        root = ConventionNode.root()
        node = root.get_or_create(["1C", "P", "1H"])

        assert node.sequence == [Call(1, Strain.CLUBS), PASS, Call(1, Strain.HEARTS)]
        assert node.sequence_string() == "1C-P-1H"
        assert node.parent.parent.parent is root

    def test_flags_do_not_change_key(self):
        root = ConventionNode.root()
        node = root.get_or_create(["2C![Stayman]"])
        assert root.get(["2C"]) is node
        assert root.get([Call(2, Strain.CLUBS)]) is node

    def test_missing_path(self):
        root = ConventionNode.root()
        root.get_or_create(["1C"])
        assert root.get(["1D"]) is None
        assert get_node(root, "1C-P") is None

    def test_get_node_with_string(self):
        root = ConventionNode.root()
        node = root.get_or_create(["1NT", "P", "2C"])
        assert get_node(root, "1NT/2C") is node
        assert get_node(root, "1NT-P-2C") is node
        assert get_node(root, []) is root

    def test_auction_of_unresolved_path(self):
        root = ConventionNode.root()
        assert root.get_or_create(["1M", "P"]).auction is None
        assert root.get_or_create(["1C", "P"]).auction == [Call(1, Strain.CLUBS), PASS]

    def test_iter_nodes_preorder(self):
        root = ConventionNode.root()
        root.get_or_create(["1C", "P", "1D"])
        root.get_or_create(["1H"])
        assert [node.sequence_string() for node in root.iter_nodes()] == [
            "", "1C", "1C-P", "1C-P-1D", "1H",
        ]

    def test_is_empty(self):
        root = ConventionNode.root()
        node = root.get_or_create(["1C"])
        assert node.is_empty
        node.description = "strong"
        assert not node.is_empty


class TestResolvedDescription:
    """Test macro and "$d" substitution."""

    def test_closest_macro_wins(self):
        root = ConventionNode.root([Macro("PTS", "outer")])
        node = root.get_or_create(["1C"])
        node.macros.add(Macro("PTS", "inner"))
        node.description = "16+ PTS"
        assert node.resolved_description == "16+ inner"

    def test_ancestor_macros_apply(self):
        root = ConventionNode.root([Macro("HCP", "high card points")])
        node = root.get_or_create(["1C", "P", "1D"])
        node.description = "0-7 HCP"
        assert node.resolved_description == "0-7 high card points"

    def test_depth_placeholders(self):
        """$0 is the node's strain, $1 its parent's, and so on."""
        root = ConventionNode.root()
        node = root.get_or_create(["1H", "P", "2S"])
        node.description = "raise $2 to $0 $1"
        assert node.resolved_description == "raise H to S"

    def test_two_digit_placeholders(self):
        """$1 does not consume the leading digit of $10."""
        root = ConventionNode.root()
        node = root.get_or_create(
            ["1C", "1D", "1H", "1S", "1NT", "2C", "2D", "2H", "2S", "2NT", "3C"]
        )
        node.description = "$10 then $1 then $0"
        assert node.resolved_description == "C then NT then C"

    def test_forget_resolved_descriptions(self):
        root = ConventionNode.root()
        opening = root.get_or_create(["1C"])
        response = opening.get_or_create(["P", "1D"])
        response.description = "0-7 HCP"
        assert response.resolved_description == "0-7 HCP"

        opening.macros.add(Macro("HCP", "points"))
        assert response.resolved_description == "0-7 HCP"

        opening.forget_resolved_descriptions()
        assert response.resolved_description == "0-7 points"

    def test_no_description(self):
        root = ConventionNode.root()
        assert root.get_or_create(["1C"]).resolved_description is None


class TestCopy:
    """Test deep copies."""

    def test_copy_is_independent(self):
        root = ConventionNode.root()
        node = root.get_or_create(["1C"])
        node.description = "strong"
        node.get_or_create(["P", "1D"]).description = "negative"
        node.steps.append(ConventionNode(description="step"))

        clone = node.copy(parent=root)
        clone.get(["P", "1D"]).description = "changed"
        clone.steps[0].description = "changed"

        assert node.get(["P", "1D"]).description == "negative"
        assert node.steps[0].description == "step"
        assert clone.get(["P", "1D"]).parent.parent is clone

    def test_copy_under_new_token(self):
        root = ConventionNode.root()
        node = root.get_or_create(["1C!"])
        clone = node.copy(parent=root, token=parse_notation("1D"))
        assert clone.call == Call(1, Strain.DIAMONDS)
        assert not clone.is_alertable
