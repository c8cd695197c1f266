"""NamingStrategy and Configuration for key-path resolution.

Configuration is a frozen (immutable) dataclass created once when a flag
tree is constructed and shared read-only by every node's resolution.
NamingStrategy selects how declared labels are turned into key segments
when a node does not override it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["Configuration", "NamingStrategy"]


class NamingStrategy(StrEnum):
    """Process-wide default for converting labels into key segments.

    - DEFAULT: Synonym for KEBAB.
    - KEBAB:   ``myPropertyName`` -> ``my-property-name``.
    - SNAKE:   ``myPropertyName`` -> ``my_property_name``.
    """

    DEFAULT = auto()
    KEBAB = auto()
    SNAKE = auto()


@dataclass(frozen=True, slots=True)
class Configuration:
    """Immutable configuration shared by the whole flag tree.

    Attributes:
        strategy: Naming strategy applied to every node that does not carry
            an explicit override.  Plain strings (``"snake"``) are coerced.
        prefix: Optional extra top-level segment placed in front of every
            key that is not an absolute path.  An empty string means no prefix.
        separator: String used to join the levels of the tree together.
            For example with ``"/"`` the flag ``myGroup.secondGroup.someFlag``
            resolves to ``my-group/second-group/some-flag``.
    """

    strategy: NamingStrategy = NamingStrategy.DEFAULT
    prefix: str | None = None
    separator: str = "."

    def __post_init__(self) -> None:
        try:
            strategy = NamingStrategy(self.strategy)
        except ValueError:
            msg = f"Unknown naming strategy: {self.strategy!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "strategy", strategy)

        if not isinstance(self.separator, str) or not self.separator:
            msg = f"separator must be a non-empty string, got {self.separator!r}"
            raise ValueError(msg)

        if self.prefix is not None and not isinstance(self.prefix, str):
            msg = f"prefix must be a string or None, got {type(self.prefix)!r}"
            raise TypeError(msg)
        if self.prefix == "":
            object.__setattr__(self, "prefix", None)

    @classmethod
    def default(cls) -> Configuration:
        """Return the default configuration: kebab-case, no prefix, ``"."``."""
        return cls()
