"""Tree subpackage for declaring flag hierarchies.

Re-exports the public API for the tree module:
- Group / Leaf: frozen dataclasses forming the flag tree
- KeyOverride, CustomKey, CustomKeyPath: per-node key overrides
- TreeBuilder: converts a nested mapping into a Group/Leaf tree
"""

from flag_keys.tree.builder import TreeBuilder
from flag_keys.tree.nodes import (
    CustomKey,
    CustomKeyPath,
    Group,
    GroupOverride,
    KeyOverride,
    Leaf,
    LeafOverride,
    Node,
)

__all__ = [
    "CustomKey",
    "CustomKeyPath",
    "Group",
    "GroupOverride",
    "KeyOverride",
    "Leaf",
    "LeafOverride",
    "Node",
    "TreeBuilder",
]
