"""ResolvedKeys: the total, ordered output of a tree walk.

Every leaf of the walked tree appears exactly once, in pre-order declaration
order, together with its label path and resolved key.  Duplicate keys are
not an error here; ``collisions()`` makes them visible to whichever layer
registers keys with a backing store.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from flag_keys.tree.nodes import Leaf

__all__ = ["LabelPath", "ResolvedKeys", "ResolvedLeaf"]

LabelPath = tuple[str, ...]


def _as_label_path(path: str | LabelPath) -> LabelPath:
    if isinstance(path, str):
        return tuple(path.split(".")) if path else ()
    return tuple(path)


@dataclass(frozen=True, slots=True)
class ResolvedLeaf:
    """A leaf together with where it sits and the key it resolved to.

    Attributes:
        path: Declared labels from the root's children down to the leaf,
              e.g. ``("oneFlagGroup", "secondLevelFlag")``.
        leaf: The ``Leaf`` node itself.
        key:  The resolved key.
    """

    path: LabelPath
    leaf: Leaf
    key: str


@dataclass(frozen=True, slots=True)
class ResolvedKeys:
    """Immutable result of resolving a flag tree.

    Attributes:
        leaves:      One ``ResolvedLeaf`` per leaf, pre-order declaration order.
        group_paths: Accumulated key path of every group, by label path.  The
                     root group is stored under ``()``.
    """

    leaves: tuple[ResolvedLeaf, ...]
    group_paths: Mapping[LabelPath, str] = field(default_factory=dict, hash=False)
    _index: Mapping[LabelPath, ResolvedLeaf] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "leaves", tuple(self.leaves))
        object.__setattr__(self, "group_paths", MappingProxyType(dict(self.group_paths)))
        index = {entry.path: entry for entry in self.leaves}
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __len__(self) -> int:
        return len(self.leaves)

    def __iter__(self) -> Iterator[ResolvedLeaf]:
        return iter(self.leaves)

    def key_for(self, path: str | LabelPath) -> str:
        """Return the key of the leaf at ``path``.

        Args:
            path: Tuple of declared labels, or the same labels joined with
                  ``"."`` (e.g. ``"oneFlagGroup.secondLevelFlag"``).

        Raises:
            KeyError: If no leaf sits at ``path``.
        """
        label_path = _as_label_path(path)
        try:
            return self._index[label_path].key
        except KeyError:
            raise KeyError(".".join(label_path)) from None

    def group_path(self, path: str | LabelPath) -> str:
        """Return the accumulated key path of the group at ``path``."""
        label_path = _as_label_path(path)
        try:
            return self.group_paths[label_path]
        except KeyError:
            raise KeyError(".".join(label_path)) from None

    def keys(self) -> list[str]:
        """Return every resolved key, in leaf order (duplicates included)."""
        return [entry.key for entry in self.leaves]

    def as_dict(self) -> dict[str, str]:
        """Return ``{"dotted.label.path": key}`` for every leaf, in order."""
        return {".".join(entry.path): entry.key for entry in self.leaves}

    def collisions(self) -> dict[str, list[LabelPath]]:
        """Return keys shared by more than one leaf.

        Returns:
            Mapping from colliding key to the label paths that resolved to it,
            first declared occurrence first.  Empty when all keys are unique.
        """
        by_key: dict[str, list[LabelPath]] = {}
        for entry in self.leaves:
            by_key.setdefault(entry.key, []).append(entry.path)
        return {key: paths for key, paths in by_key.items() if len(paths) > 1}
