"""Shared flag-tree fixtures.

The ``flag_tree`` fixture declares:

    root
    ├── oneFlagGroup
    │   ├── twoFlagGroup            (CustomKey "two")
    │   │   ├── flagGroupThree      (SKIP)
    │   │   │   ├── custom          (CustomKey "customKey")
    │   │   │   ├── full            (CustomKeyPath "customKeyPath")
    │   │   │   └── standard
    │   │   ├── thirdLevelFlag
    │   │   └── thirdLevelFlag2
    │   └── secondLevelFlag
    └── topLevelFlag
"""

from __future__ import annotations

import pytest

from flag_keys.tree.nodes import CustomKey, CustomKeyPath, Group, KeyOverride, Leaf


def build_flag_tree() -> Group:
    three = Group(
        "flagGroupThree",
        children=(
            Leaf("custom", False, "Test flag with custom key", CustomKey("customKey")),
            Leaf(
                "full",
                False,
                "Test flag with custom key path",
                CustomKeyPath("customKeyPath"),
            ),
            Leaf("standard", True, "Standard Flag"),
        ),
        description="Skipping test 3",
        override=KeyOverride.SKIP,
    )
    two = Group(
        "twoFlagGroup",
        children=(
            three,
            Leaf("thirdLevelFlag", False, "Third level test flag"),
            Leaf("thirdLevelFlag2", False, "Second Third level test flag"),
        ),
        description="Test Two",
        override=CustomKey("two"),
    )
    one = Group(
        "oneFlagGroup",
        children=(two, Leaf("secondLevelFlag", False, "Second level test flag")),
        description="Test 1",
    )
    return Group("", children=(one, Leaf("topLevelFlag", False, "Top level test flag")))


@pytest.fixture
def flag_tree() -> Group:
    """The nested fixture tree described in the module docstring."""
    return build_flag_tree()
