"""Public API functions for flag-keys.

This module provides the user-facing functions: resolve_keys, key_for and
find_collisions.  Each call creates a fresh TreeWalker to guarantee zero
global state mutation between calls.  Trees may be given either as a
``Group`` or as a nested mapping, which is built with ``TreeBuilder``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flag_keys.algorithm.walker import TreeWalker
from flag_keys.config import Configuration
from flag_keys.result import LabelPath, ResolvedKeys
from flag_keys.tree.builder import TreeBuilder
from flag_keys.tree.nodes import Group

__all__ = ["find_collisions", "key_for", "resolve_keys"]


def _as_tree(tree: Group | Mapping[str, Any]) -> Group:
    if isinstance(tree, Group):
        return tree
    return TreeBuilder().build(tree)


def resolve_keys(
    tree: Group | Mapping[str, Any],
    configuration: Configuration | None = None,
) -> ResolvedKeys:
    """Resolve the key of every leaf in ``tree``.

    Args:
        tree:          Root ``Group`` or a nested mapping declaration.
        configuration: Naming strategy, prefix and separator.  Defaults to
                       ``Configuration.default()`` when None.

    Returns:
        A ``ResolvedKeys`` with one entry per leaf, in declaration order.
    """
    return TreeWalker(configuration).resolve(_as_tree(tree))


def key_for(
    tree: Group | Mapping[str, Any],
    path: str | LabelPath,
    configuration: Configuration | None = None,
) -> str:
    """Return the resolved key of the single leaf at ``path``.

    Args:
        tree:          Root ``Group`` or a nested mapping declaration.
        path:          Declared labels from the root, as a tuple or joined
                       with ``"."``.
        configuration: Defaults to ``Configuration.default()`` when None.

    Raises:
        KeyError: If no leaf sits at ``path``.
    """
    return resolve_keys(tree, configuration).key_for(path)


def find_collisions(
    tree: Group | Mapping[str, Any],
    configuration: Configuration | None = None,
) -> dict[str, list[LabelPath]]:
    """Return keys resolved by more than one leaf, mapped to their label paths.

    An empty dict means every leaf has a unique key.
    """
    return resolve_keys(tree, configuration).collisions()
