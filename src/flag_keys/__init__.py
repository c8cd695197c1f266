"""flag-keys - deterministic key-path resolution for feature-flag trees."""

from __future__ import annotations

from flag_keys.algorithm.walker import TreeWalker
from flag_keys.api import find_collisions, key_for, resolve_keys
from flag_keys.casing import CaseConverter, convert_case
from flag_keys.config import Configuration, NamingStrategy
from flag_keys.registry import CollisionPolicy, KeyCollisionError, KeyRegistry
from flag_keys.result import ResolvedKeys, ResolvedLeaf
from flag_keys.tree import (
    CustomKey,
    CustomKeyPath,
    Group,
    KeyOverride,
    Leaf,
    TreeBuilder,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "CaseConverter",
    "CollisionPolicy",
    "Configuration",
    "CustomKey",
    "CustomKeyPath",
    "Group",
    "KeyCollisionError",
    "KeyOverride",
    "KeyRegistry",
    "Leaf",
    "NamingStrategy",
    "ResolvedKeys",
    "ResolvedLeaf",
    "TreeBuilder",
    "TreeWalker",
    "convert_case",
    "find_collisions",
    "key_for",
    "resolve_keys",
]
