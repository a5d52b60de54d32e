"""Tests for the variant-group detection policies."""

from mistcss.schema import (
    ChainedGrouping,
    DashPrefixGrouping,
    Grouping,
    NoGrouping,
    VariantGroup,
    VocabularyGrouping,
    default_policy,
)


class TestNoGrouping:
    def test_everything_is_boolean(self):
        result = NoGrouping().group(["primary", "secondary"])
        assert result == Grouping(groups=(), booleans=("primary", "secondary"))


class TestDashPrefixGrouping:
    def test_groups_shared_prefix(self):
        result = DashPrefixGrouping().group(["size-sm", "size-md", "size-lg"])
        assert result.groups == (
            VariantGroup(
                name="size",
                members=(("sm", "size-sm"), ("md", "size-md"), ("lg", "size-lg")),
            ),
        )
        assert result.booleans == ()

    def test_single_member_stays_boolean(self):
        result = DashPrefixGrouping().group(["size-sm", "disabled"])
        assert result.groups == ()
        assert result.booleans == ("size-sm", "disabled")

    def test_uses_prefix_before_last_dash(self):
        result = DashPrefixGrouping().group(["text-align-left", "text-align-right"])
        assert result.groups[0].name == "textAlign"
        assert result.groups[0].members == (
            ("left", "text-align-left"),
            ("right", "text-align-right"),
        )

    def test_flag_prefixes_never_group(self):
        result = DashPrefixGrouping().group(["is-open", "is-loading", "has-icon", "has-badge"])
        assert result.groups == ()
        assert result.booleans == ("is-open", "is-loading", "has-icon", "has-badge")

    def test_keeps_declaration_order_of_leftovers(self):
        result = DashPrefixGrouping().group(["round", "tone-a", "flat", "tone-b"])
        assert result.booleans == ("round", "flat")
        assert result.groups[0].tokens == ("tone-a", "tone-b")

    def test_min_members(self):
        result = DashPrefixGrouping(min_members=3).group(["size-sm", "size-lg"])
        assert result.groups == ()


class TestVocabularyGrouping:
    def test_color_family(self):
        result = VocabularyGrouping().group(["primary", "disabled", "secondary"])
        assert result.groups == (
            VariantGroup(
                name="color",
                members=(("primary", "primary"), ("secondary", "secondary")),
            ),
        )
        assert result.booleans == ("disabled",)

    def test_lone_family_member_stays_boolean(self):
        result = VocabularyGrouping().group(["primary", "outline"])
        assert result.groups == ()

    def test_several_families(self):
        result = VocabularyGrouping().group(["sm", "ghost", "lg", "solid"])
        assert [g.name for g in result.groups] == ["size", "variant"]

    def test_custom_families(self):
        policy = VocabularyGrouping(families={"tone": frozenset({"warm", "cool"})})
        result = policy.group(["warm", "cool", "primary", "secondary"])
        assert [g.name for g in result.groups] == ["tone"]
        assert result.booleans == ("primary", "secondary")


class TestChainedGrouping:
    def test_later_policies_see_leftovers(self):
        policy = ChainedGrouping(DashPrefixGrouping(), VocabularyGrouping())
        result = policy.group(["size-sm", "primary", "size-lg", "secondary", "block"])
        assert [g.name for g in result.groups] == ["size", "color"]
        assert result.booleans == ("block",)

    def test_empty_chain_is_no_grouping(self):
        assert ChainedGrouping().group(["a", "b"]).booleans == ("a", "b")

    def test_default_policy(self):
        result = default_policy().group(["primary", "secondary", "disabled"])
        assert [g.name for g in result.groups] == ["color"]
        assert result.booleans == ("disabled",)
