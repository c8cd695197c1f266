"""KeyRegistry: registers resolved keys and applies a collision policy.

Resolution never fails on duplicate keys.  This is the layer that decides
what a duplicate means: a fatal configuration error, a logged warning, or
nothing at all.  Under every policy the first registered leaf keeps the key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import StrEnum, auto

from flag_keys.result import LabelPath, ResolvedKeys, ResolvedLeaf

__all__ = ["CollisionPolicy", "KeyCollisionError", "KeyRegistry"]

logger = logging.getLogger(__name__)


class CollisionPolicy(StrEnum):
    """What ``KeyRegistry.register`` does when a key is already taken.

    - ERROR:  Raise ``KeyCollisionError`` and register nothing from the batch.
    - WARN:   Log a warning and keep the first registration.
    - IGNORE: Silently keep the first registration.
    """

    ERROR = auto()
    WARN = auto()
    IGNORE = auto()


class KeyCollisionError(ValueError):
    """Two or more leaves resolved to the same key.

    Attributes:
        key:   The shared key.
        paths: Label paths of the colliding leaves, first registered first.
    """

    def __init__(self, key: str, paths: list[LabelPath]) -> None:
        self.key = key
        self.paths = paths
        joined = ", ".join(".".join(path) for path in paths)
        super().__init__(f"Key {key!r} is resolved by more than one flag: {joined}")


class KeyRegistry:
    """Holds every registered key and the leaf that owns it.

    Example::

        registry = KeyRegistry(on_collision="warn")
        registry.register(resolve(tree, config))
        registry["one-flag-group.second-level-flag"].leaf.default

    Args:
        on_collision: A ``CollisionPolicy`` or its string value.  Defaults to
            ``CollisionPolicy.ERROR``.
    """

    def __init__(self, on_collision: CollisionPolicy | str = CollisionPolicy.ERROR) -> None:
        try:
            self._policy = CollisionPolicy(on_collision)
        except ValueError:
            msg = f"Unknown collision policy: {on_collision!r}"
            raise ValueError(msg) from None
        self._entries: dict[str, ResolvedLeaf] = {}

    @property
    def policy(self) -> CollisionPolicy:
        return self._policy

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __getitem__(self, key: str) -> ResolvedLeaf:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def register(self, resolved: ResolvedKeys) -> list[ResolvedLeaf]:
        """Register every leaf of ``resolved``.

        Args:
            resolved: Output of a tree walk.

        Returns:
            The entries that were rejected because their key was already
            taken (empty when there were no collisions).

        Raises:
            KeyCollisionError: Under ``CollisionPolicy.ERROR``, for the first
                colliding key.  Nothing from ``resolved`` is registered.
        """
        pending: dict[str, ResolvedLeaf] = {}
        rejected: list[ResolvedLeaf] = []

        for entry in resolved:
            owner = self._entries.get(entry.key) or pending.get(entry.key)
            if owner is None:
                pending[entry.key] = entry
                continue

            if self._policy is CollisionPolicy.ERROR:
                paths = [other.path for other in resolved if other.key == entry.key]
                if entry.key in self._entries:
                    paths.insert(0, self._entries[entry.key].path)
                raise KeyCollisionError(entry.key, paths)
            if self._policy is CollisionPolicy.WARN:
                logger.warning(
                    "Key %r from %s is already registered by %s; keeping the first",
                    entry.key,
                    ".".join(entry.path),
                    ".".join(owner.path),
                )
            rejected.append(entry)

        self._entries.update(pending)
        logger.debug(
            "Registered %d keys (%d rejected)", len(pending), len(rejected)
        )
        return rejected
