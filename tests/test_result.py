"""Tests for ResolvedKeys and ResolvedLeaf.

Covers:
- Lookup by tuple or dotted label path, KeyError on unknown paths
- keys() / as_dict() ordering
- collisions(): first occurrence first, empty when unique
- Immutability of the result and its mappings
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from flag_keys.result import ResolvedKeys, ResolvedLeaf
from flag_keys.tree.nodes import Leaf

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_keys(*entries: tuple[str, str]) -> ResolvedKeys:
    """Return ResolvedKeys from ``(dotted label path, key)`` pairs."""
    leaves = tuple(
        ResolvedLeaf(path=tuple(path.split(".")), leaf=Leaf(path.split(".")[-1]), key=key)
        for path, key in entries
    )
    return ResolvedKeys(leaves=leaves, group_paths={(): "", ("g",): "g"})


class TestLookup:
    def test_key_for_dotted_path(self) -> None:
        keys = make_keys(("g.myFlag", "g.my-flag"))
        assert keys.key_for("g.myFlag") == "g.my-flag"

    def test_key_for_tuple_path(self) -> None:
        keys = make_keys(("g.myFlag", "g.my-flag"))
        assert keys.key_for(("g", "myFlag")) == "g.my-flag"

    def test_key_for_unknown_raises(self) -> None:
        with pytest.raises(KeyError, match="g.missing"):
            make_keys().key_for("g.missing")

    def test_group_path(self) -> None:
        keys = make_keys()
        assert keys.group_path("g") == "g"
        assert keys.group_path(()) == ""

    def test_group_path_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            make_keys().group_path("nope")


class TestOrdering:
    def test_len_and_iter(self) -> None:
        keys = make_keys(("a", "a"), ("b", "b"))
        assert len(keys) == 2
        assert [entry.key for entry in keys] == ["a", "b"]

    def test_keys_keep_duplicates(self) -> None:
        keys = make_keys(("a", "x"), ("b", "x"))
        assert keys.keys() == ["x", "x"]

    def test_as_dict(self) -> None:
        keys = make_keys(("g.a", "g.a"), ("b", "b"))
        assert keys.as_dict() == {"g.a": "g.a", "b": "b"}
        assert list(keys.as_dict()) == ["g.a", "b"]


class TestCollisions:
    def test_no_collisions(self) -> None:
        assert make_keys(("a", "a"), ("b", "b")).collisions() == {}

    def test_collision_reports_all_paths_in_order(self) -> None:
        keys = make_keys(("a", "x"), ("b", "y"), ("g.c", "x"))
        assert keys.collisions() == {"x": [("a",), ("g", "c")]}


class TestImmutability:
    def test_hashable(self) -> None:
        assert hash(make_keys(("a", "a"))) == hash(make_keys(("a", "a")))

    def test_equal_results_deduplicate_in_set(self) -> None:
        assert len({make_keys(("a", "a")), make_keys(("a", "a"))}) == 1

    def test_frozen(self) -> None:
        keys = make_keys()
        with pytest.raises(FrozenInstanceError):
            keys.leaves = ()  # type: ignore[misc]

    def test_group_paths_read_only(self) -> None:
        keys = make_keys()
        with pytest.raises(TypeError):
            keys.group_paths[("new",)] = "x"  # type: ignore[index]

    def test_leaves_list_becomes_tuple(self) -> None:
        entry = ResolvedLeaf(path=("a",), leaf=Leaf("a"), key="a")
        keys = ResolvedKeys(leaves=[entry])  # type: ignore[arg-type]
        assert keys.leaves == (entry,)

    def test_equality(self) -> None:
        assert make_keys(("a", "a")) == make_keys(("a", "a"))
        assert make_keys(("a", "a")) != make_keys(("a", "b"))
