"""A map of short, capped lists of values."""

from __future__ import annotations

from typing import Generic, TextIO, TypeVar

MAX_LIST_SIZE = 10

K = TypeVar("K")
V = TypeVar("V")


class LimitedListMap(Generic[K, V]):
    """Collects up to ``MAX_LIST_SIZE`` values per key, later ones are dropped."""

    def __init__(self) -> None:
        self._lists: dict[K, list[V]] = {}

    def add(self, key: K, value: V) -> None:
        """Append ``value`` under ``key`` unless that list is full."""
        values = self._lists.setdefault(key, [])
        if len(values) < MAX_LIST_SIZE:
            values.append(value)

    def __getitem__(self, key: K) -> list[V]:
        return list(self._lists[key])

    def __len__(self) -> int:
        return len(self._lists)

    def write(self, out: TextIO) -> None:
        """Write ``key||v1,v2,...,`` lines in key order."""
        for key in sorted(self._lists):
            items = "".join(f"{item}," for item in self._lists[key])
            out.write(f"{key}||{items}\n")