"""Path accumulation: folds resolved actions into a joined key string.

The running state is a ``PathState`` carried down the tree walk.  Actions are
applied in root-to-leaf order; the optional prefix behaves as an implicit
first segment that is emitted together with the first appended segment, so
it is applied exactly once and never in front of an absolute key.
"""

from __future__ import annotations

from dataclasses import dataclass

from flag_keys.algorithm.actions import Absolute, Append, CodingKeyAction, Skip

__all__ = ["PathState", "accumulate"]


@dataclass(frozen=True, slots=True)
class PathState:
    """Accumulated key path at one position in the tree.

    Attributes:
        path:           Segments joined so far.  Empty until the first append.
        prefix_applied: True once the prefix has been emitted, or once an
                        absolute key has made it irrelevant.
    """

    path: str = ""
    prefix_applied: bool = False


def accumulate(
    state: PathState,
    action: CodingKeyAction,
    separator: str,
    prefix: str | None = None,
) -> PathState:
    """Apply one resolved action to the running path.

    Args:
        state:     The path accumulated by the ancestors.
        action:    ``Append``, ``Skip`` or ``Absolute`` for the current node.
        separator: Joins consecutive segments.
        prefix:    Optional implicit top-level segment.

    Returns:
        The new ``PathState``.  ``state`` is never modified.

    Raises:
        TypeError: If ``action`` is ``UseDefault`` or not an action at all;
            the resolver must turn ``UseDefault`` into a concrete action first.
    """
    if isinstance(action, Absolute):
        return PathState(path=action.key_path, prefix_applied=True)

    if isinstance(action, Skip):
        return state

    if not isinstance(action, Append):
        msg = f"Cannot accumulate unresolved action {action!r}"
        raise TypeError(msg)

    if state.path:
        return PathState(
            path=f"{state.path}{separator}{action.segment}",
            prefix_applied=state.prefix_applied,
        )

    if prefix and not state.prefix_applied:
        return PathState(path=f"{prefix}{separator}{action.segment}", prefix_applied=True)

    return PathState(path=action.segment, prefix_applied=state.prefix_applied)
