# city_astar/search/cost.py
import math

from city_astar.app.protocols import Metric
from city_astar.domain.entities.geography import Coord
from city_astar.domain.graph import Graph


def euclidean(a: Coord, b: Coord) -> float:
    # planar over raw lat/lon; only meaningful on a common local projection
    return math.hypot(a.lat - b.lat, a.lon - b.lon)


def manhattan(a: Coord, b: Coord) -> float:
    return abs(a.lat - b.lat) + abs(a.lon - b.lon)


def distance(graph: Graph, a: int, b: int, *, metric: Metric = euclidean) -> float:
    return metric(graph.node(a).coord, graph.node(b).coord)


def tentative_g(graph: Graph, curr: int, neighbor: int, *, metric: Metric = euclidean) -> float:
    """g_cost of neighbor if reached through curr."""
    return graph.node(curr).g_cost + distance(graph, curr, neighbor, metric=metric)


def set_h(graph: Graph, curr: int, goal: int, *, metric: Metric = euclidean) -> float:
    n = graph.node(curr)
    n.h_cost = distance(graph, curr, goal, metric=metric)
    return n.h_cost


def set_f(graph: Graph, curr: int) -> float:
    n = graph.node(curr)
    n.f_cost = n.g_cost + n.h_cost
    return n.f_cost
