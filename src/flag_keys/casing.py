"""Case conversion of declared labels into snake_case or kebab-case segments.

Words are split at lowercase->uppercase transitions.  Acronym runs stay
together and are only split where the run hands over to a new capitalised
word:

- ``myPropertyName`` -> ``my_property_name``
- ``myURLProperty``  -> ``my_url_property``
- ``URLSession``     -> ``url_session``
- ``thirdLevelFlag2`` -> ``third_level_flag2`` (digits never split)

``CaseConverter`` memoises results in a per-instance ``LRUCache``; two
converters never share state.
"""

from __future__ import annotations

import threading

from cachetools import LRUCache

__all__ = ["KEBAB_SEPARATOR", "SNAKE_SEPARATOR", "CaseConverter", "convert_case"]

SNAKE_SEPARATOR = "_"
KEBAB_SEPARATOR = "-"


def convert_case(label: str, separator: str = SNAKE_SEPARATOR) -> str:
    """Return ``label`` split into lowercase words joined by ``separator``.

    Args:
        label: The declared identifier, usually camelCase.
        separator: A single character placed between words.

    Returns:
        The converted string.  Empty input is returned unchanged.
    """
    if not label:
        return label

    out: list[str] = []
    # Whether an uppercase character starts a new word.
    separate_on_upper = True
    last = len(label) - 1

    for i, char in enumerate(label):
        if char.isupper():
            if separate_on_upper and out:
                out.append(separator)
            # "L" in "URLSession": the next char is uppercase and the one after
            # it is lowercase, so the next char starts a new word.
            separate_on_upper = (
                i + 1 <= last
                and label[i + 1].isupper()
                and i + 2 <= last
                and label[i + 2].islower()
            )
        else:
            # No second separator right after one already in the label.
            separate_on_upper = char != separator
        out.append(char.lower())

    return "".join(out)


class CaseConverter:
    """LRU-memoising wrapper around :func:`convert_case`.

    Conversion is pure, so cached and uncached results are identical.  Each
    instance owns its own ``LRUCache``; eviction is silent.  Cache access is
    guarded by a per-instance lock, so one converter (and the ``TreeWalker``
    holding it) may be shared across threads.

    Args:
        max_size: Maximum number of ``(label, separator)`` results held.
            Defaults to 1024.

    Example::

        converter = CaseConverter()
        converter.kebab("myURLProperty")   # "my-url-property"
        converter.snake("myURLProperty")   # "my_url_property"
    """

    def __init__(self, max_size: int = 1024) -> None:
        self._cache: LRUCache[tuple[str, str], str] = LRUCache(maxsize=max_size)
        self._lock = threading.Lock()

    @property
    def max_size(self) -> int:
        """The maximum number of entries this converter can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of cached conversions."""
        with self._lock:
            return int(self._cache.currsize)

    def convert(self, label: str, separator: str) -> str:
        """Return the cached conversion of ``label``, computing it on a miss."""
        cache_key = (label, separator)
        with self._lock:
            cached = self._cache.get(cache_key)
        if cached is not None:
            return cached
        converted = convert_case(label, separator)
        with self._lock:
            self._cache[cache_key] = converted
        return converted

    def snake(self, label: str) -> str:
        return self.convert(label, SNAKE_SEPARATOR)

    def kebab(self, label: str) -> str:
        return self.convert(label, KEBAB_SEPARATOR)
