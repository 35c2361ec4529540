from dataclasses import dataclass, field


@dataclass(frozen=True)
class Coord:
    lat: float  # raw degrees, treated as planar
    lon: float


@dataclass
class Node:
    id: int
    name: str
    coord: Coord
    neighbors: list[int] = field(default_factory=list)

    # search-run state, rewritten by every search
    g_cost: float = 0.0
    h_cost: float = 0.0
    f_cost: float = 0.0
    parent: int | None = None

    @property
    def lat(self) -> float:
        return self.coord.lat

    @property
    def lon(self) -> float:
        return self.coord.lon

    def reset(self) -> None:
        self.g_cost = self.h_cost = self.f_cost = 0.0
        self.parent = None
