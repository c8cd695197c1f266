"""End-to-end key encoding across strategies, prefixes and separators.

Uses the ``flag_tree`` fixture from ``tests/conftest.py``.
"""

from __future__ import annotations

import pytest

from flag_keys import (
    Configuration,
    CustomKeyPath,
    Group,
    KeyOverride,
    Leaf,
    NamingStrategy,
    resolve_keys,
)

TOP = "topLevelFlag"
SECOND = "oneFlagGroup.secondLevelFlag"
THIRD = "oneFlagGroup.twoFlagGroup.thirdLevelFlag"
THIRD_2 = "oneFlagGroup.twoFlagGroup.thirdLevelFlag2"
CUSTOM = "oneFlagGroup.twoFlagGroup.flagGroupThree.custom"
FULL = "oneFlagGroup.twoFlagGroup.flagGroupThree.full"
STANDARD = "oneFlagGroup.twoFlagGroup.flagGroupThree.standard"


class TestKebabCase:
    def test_keys(self, flag_tree: Group) -> None:
        config = Configuration(strategy=NamingStrategy.KEBAB, prefix=None, separator=".")
        keys = resolve_keys(flag_tree, config)

        assert keys.key_for(TOP) == "top-level-flag"
        assert keys.key_for(SECOND) == "one-flag-group.second-level-flag"
        assert keys.key_for(THIRD) == "one-flag-group.two.third-level-flag"
        assert keys.key_for(THIRD_2) == "one-flag-group.two.third-level-flag2"
        assert keys.key_for(CUSTOM) == "one-flag-group.two.customKey"
        assert keys.key_for(FULL) == "customKeyPath"
        assert keys.key_for(STANDARD) == "one-flag-group.two.standard"

    def test_default_strategy_matches_kebab(self, flag_tree: Group) -> None:
        kebab = resolve_keys(flag_tree, Configuration(strategy=NamingStrategy.KEBAB))
        default = resolve_keys(flag_tree, Configuration(strategy=NamingStrategy.DEFAULT))
        assert default.as_dict() == kebab.as_dict()


class TestSnakeCase:
    def test_keys(self, flag_tree: Group) -> None:
        config = Configuration(strategy=NamingStrategy.SNAKE, prefix=None, separator=".")
        keys = resolve_keys(flag_tree, config)

        assert keys.key_for(TOP) == "top_level_flag"
        assert keys.key_for(SECOND) == "one_flag_group.second_level_flag"
        assert keys.key_for(THIRD) == "one_flag_group.two.third_level_flag"
        assert keys.key_for(THIRD_2) == "one_flag_group.two.third_level_flag2"
        assert keys.key_for(CUSTOM) == "one_flag_group.two.customKey"
        assert keys.key_for(FULL) == "customKeyPath"
        assert keys.key_for(STANDARD) == "one_flag_group.two.standard"


class TestPrefix:
    def test_keys(self, flag_tree: Group) -> None:
        config = Configuration(strategy=NamingStrategy.KEBAB, prefix="prefix", separator=".")
        keys = resolve_keys(flag_tree, config)

        assert keys.key_for(TOP) == "prefix.top-level-flag"
        assert keys.key_for(SECOND) == "prefix.one-flag-group.second-level-flag"
        assert keys.key_for(THIRD) == "prefix.one-flag-group.two.third-level-flag"
        assert keys.key_for(THIRD_2) == "prefix.one-flag-group.two.third-level-flag2"
        assert keys.key_for(CUSTOM) == "prefix.one-flag-group.two.customKey"
        assert keys.key_for(FULL) == "customKeyPath"
        assert keys.key_for(STANDARD) == "prefix.one-flag-group.two.standard"

    def test_prefix_is_outermost_and_applied_once(self, flag_tree: Group) -> None:
        keys = resolve_keys(flag_tree, Configuration(prefix="prefix"))
        for entry in keys:
            if entry.path == tuple(FULL.split(".")):
                continue
            assert entry.key.startswith("prefix.")
            assert entry.key.count("prefix") == 1


class TestCustomSeparator:
    def test_keys(self, flag_tree: Group) -> None:
        config = Configuration(strategy=NamingStrategy.KEBAB, prefix="prefix", separator="/")
        keys = resolve_keys(flag_tree, config)

        assert keys.key_for(TOP) == "prefix/top-level-flag"
        assert keys.key_for(SECOND) == "prefix/one-flag-group/second-level-flag"
        assert keys.key_for(THIRD) == "prefix/one-flag-group/two/third-level-flag"
        assert keys.key_for(THIRD_2) == "prefix/one-flag-group/two/third-level-flag2"
        assert keys.key_for(CUSTOM) == "prefix/one-flag-group/two/customKey"
        assert keys.key_for(FULL) == "customKeyPath"
        assert keys.key_for(STANDARD) == "prefix/one-flag-group/two/standard"

    @pytest.mark.parametrize("separator", ["/", ":", "__", "|"])
    def test_only_join_character_changes(self, flag_tree: Group, separator: str) -> None:
        dotted = resolve_keys(flag_tree, Configuration(prefix="prefix", separator="."))
        other = resolve_keys(flag_tree, Configuration(prefix="prefix", separator=separator))
        for left, right in zip(dotted, other, strict=True):
            if left.path == tuple(FULL.split(".")):
                assert left.key == right.key
                continue
            assert left.key.split(".") == right.key.split(separator)


class TestCollisions:
    def test_fixture_tree_has_no_collisions(self, flag_tree: Group) -> None:
        assert resolve_keys(flag_tree).collisions() == {}

    def test_skip_can_cause_collision(self) -> None:
        tree = Group(
            "",
            children=(
                Leaf("myFlag"),
                Group("hidden", children=(Leaf("myFlag"),), override=KeyOverride.SKIP),
            ),
        )
        keys = resolve_keys(tree)
        assert keys.collisions() == {"my-flag": [("myFlag",), ("hidden", "myFlag")]}

    def test_custom_key_path_can_cause_collision(self) -> None:
        tree = Group(
            "",
            children=(
                Leaf("topLevelFlag"),
                Leaf("other", override=CustomKeyPath("top-level-flag")),
            ),
        )
        assert list(resolve_keys(tree).collisions()) == ["top-level-flag"]
