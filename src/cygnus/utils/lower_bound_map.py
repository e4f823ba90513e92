"""Ordered lookup table that falls back to the nearest lower key.

Used for rules whose magnitude is defined at specific thresholds and holds
until the next one, e.g. cantrip damage that grows at character levels 5,
11 and 17.
"""

from bisect import bisect_left, insort
from collections.abc import Iterable, Iterator
from typing import Any, Generic, Protocol, TypeVar


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


K = TypeVar("K", bound=SupportsLessThan)
V = TypeVar("V")


class LowerBoundMap(Generic[K, V]):
    """
    Mapping from a totally ordered key to a value.

    A lookup for a missing key returns the value stored at the greatest key
    strictly less than it, or None when no such key exists. It never wraps
    around and never interpolates.

    Example:
        >>> damage = LowerBoundMap([(0, "1d10"), (5, "2d10"), (11, "3d10")])
        >>> damage.get(7)
        '2d10'
        >>> damage.get(-1) is None
        True
    """

    def __init__(self, pairs: Iterable[tuple[K, V]] | None = None) -> None:
        self._keys: list[K] = []
        self._values: dict[K, V] = {}

        for key, value in pairs or ():
            self.insert(key, value)

    def insert(self, key: K, value: V) -> None:
        """Store a value, overwriting any entry at exactly the same key."""
        if key not in self._values:
            insort(self._keys, key)
        self._values[key] = value

    def get(self, key: K) -> V | None:
        """
        Look up a value by key.

        Args:
            key: Key to look up

        Returns:
            The exact entry, else the entry at the greatest lower key, else None
        """
        if key in self._values:
            return self._values[key]

        index = bisect_left(self._keys, key)
        if index == 0:
            return None
        return self._values[self._keys[index - 1]]

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate over (key, value) pairs in key order."""
        for key in self._keys:
            yield key, self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LowerBoundMap):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self) -> str:
        return f"LowerBoundMap({list(self.items())!r})"
