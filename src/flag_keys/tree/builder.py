"""TreeBuilder: converts a declarative nested mapping into a Group/Leaf tree.

Uses recursive dispatch over the mapping values:

- ``Mapping``       -> ``Group`` with the default override, children recursed
- ``Group``/``Leaf`` -> adopted as-is, relabelled with the mapping key
- anything else     -> ``Leaf`` whose default is the value

Mapping keys are the declared labels and their insertion order is the
declaration order.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from flag_keys.tree.nodes import Group, Leaf, Node

__all__ = ["TreeBuilder"]


@dataclass
class TreeBuilder:
    """Builds flag trees from nested mappings.

    Example::

        builder = TreeBuilder()
        tree = builder.build({
            "topLevelFlag": False,
            "oneFlagGroup": {
                "two": Group("", override=CustomKey("two")),
                "secondLevelFlag": False,
            },
        })
        # tree: Group("") -> [Leaf("topLevelFlag"), Group("oneFlagGroup") -> ...]

    A ``Group`` given as a mapping value keeps its own children.  To give a
    nested mapping an override, pass ``Group`` with explicit children or use
    :meth:`group`.
    """

    def build(self, declaration: Mapping[str, Any], label: str = "") -> Group:
        """Convert a nested mapping to a tree rooted at a ``Group``.

        Args:
            declaration: Mapping of declared label to child declaration.
            label:       Label of the returned root group.  The root's label
                         never contributes a key segment.

        Returns:
            The root ``Group``.

        Raises:
            TypeError: If ``declaration`` is not a mapping or a key is not a str.
        """
        if not isinstance(declaration, Mapping):
            msg = f"Tree declaration must be a mapping, got {type(declaration)!r}"
            raise TypeError(msg)
        return Group(label=label, children=self._build_children(declaration))

    def group(
        self,
        declaration: Mapping[str, Any],
        **fields: Any,
    ) -> Group:
        """Build an unlabelled ``Group`` from a mapping, with extra fields.

        Intended as a mapping value, where the surrounding key supplies the
        label::

            builder.build({"flagGroupThree": builder.group({...}, override=KeyOverride.SKIP)})
        """
        return Group(label="", children=self._build_children(declaration), **fields)

    def _build_children(self, declaration: Mapping[str, Any]) -> tuple[Node, ...]:
        children: list[Node] = []
        for key, value in declaration.items():
            if not isinstance(key, str):
                msg = f"Tree labels must be str, got {type(key)!r}"
                raise TypeError(msg)
            children.append(self._build_node(key, value))
        return tuple(children)

    def _build_node(self, label: str, value: Any) -> Node:
        if isinstance(value, (Group, Leaf)):
            return dataclasses.replace(value, label=label)

        if isinstance(value, Mapping):
            return Group(label=label, children=self._build_children(value))

        return Leaf(label=label, default=value)
