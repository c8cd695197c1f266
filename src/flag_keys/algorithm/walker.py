"""TreeWalker: resolves the key of every leaf in a flag tree.

Depth-first, pre-order traversal from the root.  At every node the override
is resolved into an action (``resolve_group``/``resolve_leaf``) and folded
into the running ``PathState`` (``accumulate``); groups pass their state down
to their children, leaves record theirs as the resolved key.

The root group stands for the container being resolved, not a declared
property, so its own label and override never contribute a segment.

The ``Configuration`` is passed explicitly through every recursive call;
the walker holds no state between ``resolve()`` calls apart from its
case-conversion cache.  That cache is lock-guarded and never changes
results, so one walker may resolve trees from several threads.
"""

from __future__ import annotations

import logging

from flag_keys.algorithm.accumulator import PathState, accumulate
from flag_keys.algorithm.actions import resolve_group, resolve_leaf
from flag_keys.casing import CaseConverter
from flag_keys.config import Configuration
from flag_keys.result import LabelPath, ResolvedKeys, ResolvedLeaf
from flag_keys.tree.nodes import Group, Leaf

__all__ = ["TreeWalker", "resolve"]

logger = logging.getLogger(__name__)


class TreeWalker:
    """Resolves keys for a whole tree under one ``Configuration``.

    Example::

        walker = TreeWalker(Configuration(strategy=NamingStrategy.SNAKE))
        keys = walker.resolve(tree)
        keys.key_for("oneFlagGroup.secondLevelFlag")  # "one_flag_group.second_level_flag"

    Args:
        configuration: Shared, read-only configuration.  Defaults to
            ``Configuration.default()`` when None.
        converter: Case converter to use.  Defaults to a fresh
            ``CaseConverter`` owned by this walker.
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        converter: CaseConverter | None = None,
    ) -> None:
        self._configuration = (
            configuration if configuration is not None else Configuration.default()
        )
        self._converter = converter if converter is not None else CaseConverter()

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    def resolve(self, tree: Group) -> ResolvedKeys:
        """Walk ``tree`` and return the key of every leaf.

        Args:
            tree: The root group.

        Returns:
            A ``ResolvedKeys`` holding every leaf in pre-order declaration
            order plus the accumulated path of every group.

        Raises:
            TypeError: If ``tree`` is not a ``Group`` or a node carries an
                override that is invalid for its kind.
        """
        if not isinstance(tree, Group):
            msg = f"Tree root must be a Group, got {type(tree)!r}"
            raise TypeError(msg)

        leaves: list[ResolvedLeaf] = []
        group_paths: dict[LabelPath, str] = {(): ""}
        for child in tree.children:
            self._visit(child, (), PathState(), self._configuration, leaves, group_paths)

        logger.debug(
            "Resolved %d keys across %d groups (strategy=%s, prefix=%r, separator=%r)",
            len(leaves),
            len(group_paths),
            self._configuration.strategy,
            self._configuration.prefix,
            self._configuration.separator,
        )
        return ResolvedKeys(leaves=tuple(leaves), group_paths=group_paths)

    def _visit(
        self,
        node: Group | Leaf,
        parent_path: LabelPath,
        state: PathState,
        configuration: Configuration,
        leaves: list[ResolvedLeaf],
        group_paths: dict[LabelPath, str],
    ) -> None:
        label_path = (*parent_path, node.label)

        if isinstance(node, Leaf):
            action = resolve_leaf(
                node.override, node.label, configuration.strategy, self._converter.convert
            )
            final = accumulate(state, action, configuration.separator, configuration.prefix)
            logger.debug("Leaf %s -> %r", ".".join(label_path), final.path)
            leaves.append(ResolvedLeaf(path=label_path, leaf=node, key=final.path))
            return

        action = resolve_group(
            node.override, node.label, configuration.strategy, self._converter.convert
        )
        state = accumulate(state, action, configuration.separator, configuration.prefix)
        group_paths[label_path] = state.path
        for child in node.children:
            self._visit(child, label_path, state, configuration, leaves, group_paths)


def resolve(tree: Group, configuration: Configuration | None = None) -> ResolvedKeys:
    """Resolve every leaf key of ``tree`` with a fresh ``TreeWalker``."""
    return TreeWalker(configuration).resolve(tree)
