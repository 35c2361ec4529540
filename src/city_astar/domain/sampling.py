# city_astar/domain/sampling.py
import numpy as np

from city_astar.domain.graph import Graph


def random_geometric_graph(
    n: int,
    *,
    radius: float,
    rng: np.random.Generator,
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 1.0, 1.0),
) -> Graph:
    """
    n nodes drawn uniformly in bbox=(lat0, lon0, lat1, lon1); every pair
    closer than radius gets an edge. Same generator state => same graph.
    """
    lat0, lon0, lat1, lon1 = bbox
    lat = rng.uniform(lat0, lat1, size=n)
    lon = rng.uniform(lon0, lon1, size=n)

    g = Graph(n)
    for i in range(n):
        g.add_node(i, f"n{i}", float(lat[i]), float(lon[i]))

    d = np.hypot(lat[:, None] - lat[None, :], lon[:, None] - lon[None, :])
    ii, jj = np.nonzero(np.triu(d < radius, k=1))
    for i, j in zip(ii.tolist(), jj.tolist()):
        g.add_edge(i, j)
    return g


def ring_graph(n: int, *, radius: float = 1.0) -> Graph:
    """n nodes evenly spaced on a circle, each joined to its two neighbours."""
    g = Graph(n)
    angles = np.linspace(0.0, 2 * np.pi, num=n, endpoint=False)
    for i, a in enumerate(angles.tolist()):
        g.add_node(i, f"r{i}", radius * float(np.cos(a)), radius * float(np.sin(a)))
    if n > 1:
        for i in range(n if n > 2 else 1):
            g.add_edge(i, (i + 1) % n)
    return g
