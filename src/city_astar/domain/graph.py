# city_astar/domain/graph.py
import math
from collections.abc import Iterator

from city_astar.domain.entities.geography import Coord, Node
from city_astar.domain.errors import (
    DuplicateNodeError,
    GraphClosedError,
    InvalidNodeError,
    ResourceExhaustedError,
)


class Graph:
    """
    Fixed-size undirected graph of geographic nodes.

    Slots are allocated up front and populated with add_node(). Edges are
    stored as per-node neighbour lists in insertion order; add_edge() writes
    both directions and never de-duplicates.
    """

    def __init__(self, node_count: int):
        if isinstance(node_count, bool) or not isinstance(node_count, int) or node_count < 0:
            raise InvalidNodeError(f"node_count must be a non-negative int, got {node_count!r}")
        try:
            self._nodes: list[Node | None] = [None] * node_count
        except MemoryError as e:
            raise ResourceExhaustedError(f"cannot allocate {node_count} node slots") from e
        self._closed = False
        self._epoch = 0  # bumped by every reset_search_state()

    @classmethod
    def create(cls, node_count: int) -> "Graph":
        return cls(node_count)

    # --------------- Helpers -----------------------------

    def _check_open(self) -> None:
        if self._closed:
            raise GraphClosedError("graph has been closed")

    def _check_slot(self, node_id: int) -> None:
        self._check_open()
        if isinstance(node_id, bool) or not isinstance(node_id, int):
            raise InvalidNodeError(f"node id must be an int, got {node_id!r}")
        if not 0 <= node_id < len(self._nodes):
            raise InvalidNodeError(f"node id {node_id} out of range [0, {len(self._nodes)})")

    def _get(self, node_id: int) -> Node:
        self._check_slot(node_id)
        n = self._nodes[node_id]
        if n is None:
            raise InvalidNodeError(f"node {node_id} has not been added")
        return n

    # --------------- Construction -------------------------

    def add_node(self, node_id: int, name: str, lat: float, lon: float) -> Node:
        self._check_slot(node_id)
        if self._nodes[node_id] is not None:
            raise DuplicateNodeError(f"node {node_id} already exists")
        lat, lon = float(lat), float(lon)
        if not (math.isfinite(lat) and math.isfinite(lon)):
            raise InvalidNodeError(f"node {node_id} coordinates must be finite, got ({lat}, {lon})")
        try:
            n = Node(node_id, name, Coord(lat, lon))
        except MemoryError as e:
            raise ResourceExhaustedError(f"cannot allocate node {node_id}") from e
        self._nodes[node_id] = n
        return n

    def add_edge(self, a: int, b: int) -> None:
        na, nb = self._get(a), self._get(b)
        if a == b:
            raise InvalidNodeError(f"self-loop on node {a}")
        na.neighbors.append(b)
        nb.neighbors.append(a)

    # --------------- Queries ------------------------------

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    def node(self, node_id: int) -> Node:
        return self._get(node_id)

    def neighbors(self, node_id: int) -> list[int]:
        return list(self._get(node_id).neighbors)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        if self._closed or isinstance(node_id, bool) or not isinstance(node_id, int):
            return False
        return 0 <= node_id < len(self._nodes) and self._nodes[node_id] is not None

    def __iter__(self) -> Iterator[Node]:
        self._check_open()
        return (n for n in self._nodes if n is not None)

    # --------------- Search-run state ---------------------

    def reset_search_state(self) -> None:
        for n in self:
            n.reset()
        self._epoch += 1

    @property
    def search_epoch(self) -> int:
        return self._epoch

    def path_to(self, goal: int) -> list[int]:
        """Walk parent pointers from goal back to the root; start-to-goal order."""
        path = [goal]
        cur = self._get(goal)
        while cur.parent is not None:
            if len(path) > len(self._nodes):
                raise RuntimeError(f"parent cycle detected while walking back from {goal}")
            path.append(cur.parent)
            cur = self._get(cur.parent)
        path.reverse()
        return path

    # --------------- Teardown -----------------------------

    def close(self) -> None:
        self._nodes = []
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self) -> "Graph":
        self._check_open()
        return self

    def __exit__(self, *exc) -> None:
        self.close()
