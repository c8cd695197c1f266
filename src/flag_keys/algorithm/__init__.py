"""algorithm subpackage - public API for key-path resolution.

Provides the key action resolver, the path accumulator and the tree walker.
Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from flag_keys.algorithm import TreeWalker
    from flag_keys.config import Configuration, NamingStrategy

    walker = TreeWalker(Configuration(strategy=NamingStrategy.SNAKE))
    keys = walker.resolve(tree)
"""

from __future__ import annotations

from flag_keys.algorithm.accumulator import PathState, accumulate
from flag_keys.algorithm.actions import (
    Absolute,
    Append,
    CodingKeyAction,
    Skip,
    UseDefault,
    resolve_group,
    resolve_leaf,
    resolve_strategy,
)
from flag_keys.algorithm.walker import TreeWalker, resolve

__all__ = [
    "Absolute",
    "Append",
    "CodingKeyAction",
    "PathState",
    "Skip",
    "TreeWalker",
    "UseDefault",
    "accumulate",
    "resolve",
    "resolve_group",
    "resolve_leaf",
    "resolve_strategy",
]
