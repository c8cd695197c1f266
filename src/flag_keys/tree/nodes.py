"""Group and Leaf node types plus the per-node override variants.

A flag tree is an explicit composite: every ``Group`` owns an ordered tuple of
children (groups and/or leaves) and every node carries a declared label and
an optional override that takes precedence over the configured
``NamingStrategy``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any, TypeAlias

__all__ = [
    "CustomKey",
    "CustomKeyPath",
    "Group",
    "GroupOverride",
    "KeyOverride",
    "Leaf",
    "LeafOverride",
    "Node",
]


class KeyOverride(StrEnum):
    """Payload-free per-node overrides.

    - DEFAULT: Follow the configured naming strategy.
    - KEBAB:   Convert the label to kebab-case.
    - SNAKE:   Convert the label to snake_case.
    - SKIP:    Leave this group out of the key (groups only).
    """

    DEFAULT = auto()
    KEBAB = auto()
    SNAKE = auto()
    SKIP = auto()


@dataclass(frozen=True, slots=True)
class CustomKey:
    """Use ``key`` verbatim as this node's segment; ancestors still apply."""

    key: str

    def __post_init__(self) -> None:
        if not self.key:
            msg = "CustomKey requires a non-empty key"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class CustomKeyPath:
    """Use ``key_path`` as the complete key, ignoring ancestors and prefix.

    Only valid on leaves.
    """

    key_path: str

    def __post_init__(self) -> None:
        if not self.key_path:
            msg = "CustomKeyPath requires a non-empty key path"
            raise ValueError(msg)


GroupOverride: TypeAlias = KeyOverride | CustomKey
LeafOverride: TypeAlias = KeyOverride | CustomKey | CustomKeyPath


@dataclass(frozen=True, slots=True)
class Leaf:
    """A single setting in the flag tree.

    Attributes:
        label:       Declared identifier, e.g. ``"topLevelFlag"``.
        default:     Default value.  Opaque; never used for key computation.
        description: Human-readable description.  Opaque.
        override:    Per-leaf key override.  Defaults to ``KeyOverride.DEFAULT``.
    """

    label: str
    default: Any = None
    description: str = ""
    override: LeafOverride = KeyOverride.DEFAULT


@dataclass(frozen=True, slots=True)
class Group:
    """A named collection of child groups and leaves.

    Attributes:
        label:       Declared identifier, e.g. ``"oneFlagGroup"``.
        children:    Child nodes in declaration order.  Lists are converted
                     to tuples so the tree stays immutable.  Child labels
                     must be unique, non-empty and free of ``"."``; only
                     the root may be unlabelled.
        description: Human-readable description.  Opaque.
        override:    Per-group key override.  Defaults to ``KeyOverride.DEFAULT``.
    """

    label: str
    children: tuple[Node, ...] = ()
    description: str = ""
    override: GroupOverride = KeyOverride.DEFAULT

    def __post_init__(self) -> None:
        children = tuple(self.children)
        seen: set[str] = set()
        for child in children:
            if not isinstance(child, (Group, Leaf)):
                msg = f"Group children must be Group or Leaf, got {type(child)!r}"
                raise TypeError(msg)
            # Label paths are addressed as dotted strings.
            if not child.label or "." in child.label:
                msg = (
                    f"Child labels must be non-empty and contain no '.', "
                    f"got {child.label!r} in group {self.label!r}"
                )
                raise ValueError(msg)
            if child.label in seen:
                msg = f"Duplicate child label {child.label!r} in group {self.label!r}"
                raise ValueError(msg)
            seen.add(child.label)
        object.__setattr__(self, "children", children)

    def child(self, label: str) -> Node:
        """Return the direct child named ``label``.

        Raises:
            KeyError: If no child has that label.
        """
        for node in self.children:
            if node.label == label:
                return node
        raise KeyError(label)


Node: TypeAlias = Group | Leaf
