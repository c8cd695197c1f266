"""CodingKeyAction variants and the per-node key action resolver.

Every node's override is mapped to one of four actions before the path is
accumulated:

- ``UseDefault``  : follow the configured naming strategy
- ``Skip``        : contribute no segment (groups only)
- ``Append(s)``   : add ``s`` as the next segment
- ``Absolute(s)`` : replace the whole key with ``s`` (leaves only)

``resolve_group`` and ``resolve_leaf`` never return ``UseDefault``; they
resolve it against the ambient strategy first, so the accumulator only ever
sees the three concrete actions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

from flag_keys.casing import KEBAB_SEPARATOR, SNAKE_SEPARATOR, convert_case
from flag_keys.config import NamingStrategy
from flag_keys.tree.nodes import (
    CustomKey,
    CustomKeyPath,
    GroupOverride,
    KeyOverride,
    LeafOverride,
)

__all__ = [
    "Absolute",
    "Append",
    "CodingKeyAction",
    "Skip",
    "UseDefault",
    "resolve_group",
    "resolve_leaf",
    "resolve_strategy",
]

# (label, separator) -> converted label
Converter: TypeAlias = Callable[[str, str], str]


@dataclass(frozen=True, slots=True)
class UseDefault:
    """Apply the ambient naming strategy."""


@dataclass(frozen=True, slots=True)
class Skip:
    """Leave this node out of the key path."""


@dataclass(frozen=True, slots=True)
class Append:
    """Append ``segment`` to the key path."""

    segment: str


@dataclass(frozen=True, slots=True)
class Absolute:
    """Use ``key_path`` as the complete key."""

    key_path: str


CodingKeyAction: TypeAlias = UseDefault | Skip | Append | Absolute


def resolve_strategy(
    strategy: NamingStrategy,
    label: str,
    convert: Converter = convert_case,
) -> Append:
    """Return the ``Append`` action the ambient ``strategy`` produces for ``label``."""
    if strategy is NamingStrategy.SNAKE:
        return Append(convert(label, SNAKE_SEPARATOR))
    return Append(convert(label, KEBAB_SEPARATOR))


def _override_action(
    override: KeyOverride | CustomKey,
    label: str,
    convert: Converter,
) -> CodingKeyAction:
    if isinstance(override, CustomKey):
        return Append(override.key)
    if override is KeyOverride.KEBAB:
        return Append(convert(label, KEBAB_SEPARATOR))
    if override is KeyOverride.SNAKE:
        return Append(convert(label, SNAKE_SEPARATOR))
    if override is KeyOverride.SKIP:
        return Skip()
    return UseDefault()


def resolve_group(
    override: GroupOverride,
    label: str,
    strategy: NamingStrategy,
    convert: Converter = convert_case,
) -> CodingKeyAction:
    """Resolve a group's override into a concrete action.

    Args:
        override: The group's override.  ``CustomKeyPath`` is rejected.
        label:    The group's declared label.
        strategy: The ambient naming strategy from the ``Configuration``.
        convert:  Case conversion function, ``(label, separator) -> str``.

    Returns:
        ``Skip`` or ``Append``.

    Raises:
        TypeError: If ``override`` is not a valid group override.
    """
    if not isinstance(override, (KeyOverride, CustomKey)):
        msg = f"Invalid override for group {label!r}: {override!r}"
        raise TypeError(msg)

    action = _override_action(override, label, convert)
    if isinstance(action, UseDefault):
        return resolve_strategy(strategy, label, convert)
    return action


def resolve_leaf(
    override: LeafOverride,
    label: str,
    strategy: NamingStrategy,
    convert: Converter = convert_case,
) -> CodingKeyAction:
    """Resolve a leaf's override into a concrete action.

    Args:
        override: The leaf's override.  ``KeyOverride.SKIP`` is rejected.
        label:    The leaf's declared label.
        strategy: The ambient naming strategy from the ``Configuration``.
        convert:  Case conversion function, ``(label, separator) -> str``.

    Returns:
        ``Append`` or ``Absolute``.

    Raises:
        TypeError: If ``override`` is not a valid leaf override.
    """
    if isinstance(override, CustomKeyPath):
        return Absolute(override.key_path)
    if not isinstance(override, (KeyOverride, CustomKey)) or override is KeyOverride.SKIP:
        msg = f"Invalid override for leaf {label!r}: {override!r}"
        raise TypeError(msg)

    action = _override_action(override, label, convert)
    if isinstance(action, UseDefault):
        return resolve_strategy(strategy, label, convert)
    return action
