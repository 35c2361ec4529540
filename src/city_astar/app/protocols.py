from typing import Protocol, runtime_checkable

from city_astar.domain.entities.geography import Coord


@runtime_checkable
class Metric(Protocol):
    """
    Distance between two coordinates.
    Used both as edge weight and as the A* heuristic, so any metric that
    satisfies the triangle inequality keeps the heuristic consistent.
    """

    def __call__(self, a: Coord, b: Coord) -> float: ...
