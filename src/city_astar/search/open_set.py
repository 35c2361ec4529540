# city_astar/search/open_set.py
from city_astar.domain.errors import DuplicateEntryError, EmptyQueueError


class OpenSet:
    """
    Min-priority queue over node ids with decrease-key.

    Binary heap of (priority, seq, id) entries plus an id -> heap index map,
    so membership is O(1) and insert / extract_min / decrease_priority are
    O(log n). Equal priorities come out in insertion order (seq); that order
    is deterministic within one run but not part of the contract.
    """

    def __init__(self):
        self._heap: list[tuple[float, int, int]] = []
        self._pos: dict[int, int] = {}
        self._seq = 0

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def contains(self, node_id: int) -> bool:
        return node_id in self._pos

    __contains__ = contains

    def priority(self, node_id: int) -> float:
        return self._heap[self._pos[node_id]][0]

    def insert(self, node_id: int, priority: float) -> None:
        if node_id in self._pos:
            raise DuplicateEntryError(f"node {node_id} already in open set; use decrease_priority")
        self._seq += 1
        self._heap.append((priority, self._seq, node_id))
        self._pos[node_id] = len(self._heap) - 1
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> int:
        if not self._heap:
            raise EmptyQueueError("extract_min from empty open set")
        top = self._heap[0]
        last = self._heap.pop()
        del self._pos[top[2]]
        if self._heap:
            self._heap[0] = last
            self._pos[last[2]] = 0
            self._sift_down(0)
        return top[2]

    def decrease_priority(self, node_id: int, new_priority: float) -> None:
        i = self._pos[node_id]  # KeyError if not live
        old, seq, _ = self._heap[i]
        self._heap[i] = (new_priority, seq, node_id)
        # a non-decrease is tolerated: sift whichever way restores the heap
        if new_priority < old:
            self._sift_up(i)
        else:
            self._sift_down(i)

    def clear(self) -> None:
        self._heap.clear()
        self._pos.clear()
        self._seq = 0

    # --------------- heap plumbing ------------------------

    def _swap(self, i: int, j: int) -> None:
        h = self._heap
        h[i], h[j] = h[j], h[i]
        self._pos[h[i][2]] = i
        self._pos[h[j][2]] = j

    def _sift_up(self, i: int) -> None:
        h = self._heap
        while i > 0:
            parent = (i - 1) >> 1
            if h[i][:2] < h[parent][:2]:
                self._swap(i, parent)
                i = parent
            else:
                break

    def _sift_down(self, i: int) -> None:
        h, n = self._heap, len(self._heap)
        while True:
            left = 2 * i + 1
            smallest = i
            if left < n and h[left][:2] < h[smallest][:2]:
                smallest = left
            if left + 1 < n and h[left + 1][:2] < h[smallest][:2]:
                smallest = left + 1
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest
