"""
BidirectionalLookup - a small two-way table.

Keys map to values and values map back to keys. Used for the fixed tables
(letter offsets, accidental deltas, interval sizes) behind Note and Interval.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class BidirectionalLookup(Generic[K, V]):
    """
    Immutable key <-> value table that remembers insertion order.

    Duplicate keys or values overwrite earlier entries (last write wins),
    just like building two plain dicts.

    Example:
        table = BidirectionalLookup([("C", 0), ("D", 2)])
        table.get("D")      # 2
        table.get_rev(0)    # "C"
    """

    __slots__ = ("_forward", "_reverse")
    _forward: dict[K, V]
    _reverse: dict[V, K]

    def __init__(self, pairs: Iterable[tuple[K, V]]) -> None:
        forward: dict[K, V] = {}
        reverse: dict[V, K] = {}
        for key, value in pairs:
            forward[key] = value
            reverse[value] = key
        object.__setattr__(self, "_forward", forward)
        object.__setattr__(self, "_reverse", reverse)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def get(self, key: K, default: V | None = None) -> V | None:
        """Look up the value for a key."""
        return self._forward.get(key, default)

    def get_rev(self, value: V, default: K | None = None) -> K | None:
        """Look up the key for a value."""
        return self._reverse.get(value, default)

    def __getitem__(self, key: K) -> V:
        """Look up the value for a key. Raises KeyError if missing."""
        return self._forward[key]

    def rev(self, value: V) -> K:
        """Look up the key for a value. Raises KeyError if missing."""
        return self._reverse[value]

    def keys(self) -> Iterator[K]:
        return iter(self._forward.keys())

    def values(self) -> Iterator[V]:
        return iter(self._forward.values())

    def items(self) -> Iterator[tuple[K, V]]:
        return iter(self._forward.items())

    def rev_keys(self) -> Iterator[V]:
        """Keys of the value -> key direction (the values, in insertion order)."""
        return iter(self._reverse.keys())

    def rev_values(self) -> Iterator[K]:
        return iter(self._reverse.values())

    def rev_items(self) -> Iterator[tuple[V, K]]:
        return iter(self._reverse.items())

    def __contains__(self, key: object) -> bool:
        return key in self._forward

    def __iter__(self) -> Iterator[K]:
        return self.keys()

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"BidirectionalLookup({list(self._forward.items())!r})"
