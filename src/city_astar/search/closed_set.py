# city_astar/search/closed_set.py
from collections.abc import Iterator


class ClosedSet:
    """Finalized node ids. Membership only grows during a run."""

    def __init__(self):
        self._ids: set[int] = set()

    def add(self, node_id: int) -> None:
        self._ids.add(node_id)

    def contains(self, node_id: int) -> bool:
        return node_id in self._ids

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self._ids)

    def freeze(self) -> frozenset[int]:
        return frozenset(self._ids)

    def clear(self) -> None:
        self._ids.clear()
