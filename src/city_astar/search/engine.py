# city_astar/search/engine.py
import time
from dataclasses import dataclass, field
from enum import Enum

from city_astar.app.protocols import Metric
from city_astar.domain.errors import GraphError, StaleResultError
from city_astar.domain.graph import Graph
from city_astar.search.closed_set import ClosedSet
from city_astar.search.cost import euclidean, set_f, set_h, tentative_g
from city_astar.search.hooks import NoopHooks, SearchHooks
from city_astar.search.open_set import OpenSet

UNREACHABLE_DISTANCE = -1.0


class SearchState(Enum):
    UNSTARTED = "unstarted"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


class Outcome(Enum):
    FOUND = "found"
    UNREACHABLE = "unreachable"
    TRIVIAL_ZERO = "trivial_zero"  # start == goal


@dataclass(frozen=True)
class SearchResult:
    outcome: Outcome
    start: int
    goal: int
    distance: float  # UNREACHABLE_DISTANCE when outcome is UNREACHABLE
    expanded: int
    closed: frozenset[int]
    epoch: int = field(default=0, compare=False)  # graph.search_epoch of the producing run

    @property
    def reachable(self) -> bool:
        return self.outcome is not Outcome.UNREACHABLE


class AStarSearch:
    """
    A* over a Graph with a coordinate-metric heuristic.

    Every run() starts by clearing the graph's g/h/f/parent fields, so
    repeated searches on one graph never see each other's costs. Closed
    nodes are never reopened; that is only optimal for a consistent
    heuristic, which holds because edge weights and h share one metric.
    """

    def __init__(self, graph: Graph, *, metric: Metric = euclidean, hooks: SearchHooks | None = None):
        self.graph = graph
        self.metric = metric
        self._hooks = hooks or NoopHooks()
        self._state = SearchState.UNSTARTED

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def hooks(self) -> SearchHooks:
        return self._hooks

    def _validate(self, *node_ids: int) -> None:
        for nid in node_ids:
            try:
                self.graph.node(nid)
            except GraphError as e:
                self._hooks.error(reason="invalid_node", node=nid, exc=e)
                raise

    def run(self, start: int, goal: int) -> SearchResult:
        self._state = SearchState.UNSTARTED
        self._validate(start, goal)
        G, metric = self.graph, self.metric
        t0 = time.perf_counter()
        self._hooks.run_start(start=start, goal=goal, nodes=len(G))

        G.reset_search_state()
        open_set, closed = OpenSet(), ClosedSet()

        set_h(G, start, goal, metric=metric)
        open_set.insert(start, set_f(G, start))
        self._state = SearchState.RUNNING

        expanded = 0
        while True:
            if open_set.is_empty():
                self._state = SearchState.EXHAUSTED
                break
            curr = open_set.extract_min()
            expanded += 1
            self._hooks.expand(
                curr, f_cost=G.node(curr).f_cost, open_size=len(open_set), expanded=expanded
            )
            if curr == goal:
                self._state = SearchState.FOUND
                break

            for nb in G.node(curr).neighbors:
                set_h(G, nb, goal, metric=metric)
                potential_g = tentative_g(G, curr, nb, metric=metric)

                if nb in open_set and G.node(nb).g_cost <= potential_g:
                    continue
                if nb in closed:
                    continue

                node = G.node(nb)
                node.g_cost = potential_g
                f = set_f(G, nb)
                node.parent = curr

                if nb in open_set:
                    open_set.decrease_priority(nb, f)
                else:
                    open_set.insert(nb, f)
            closed.add(curr)

        result = self._result(start, goal, expanded, closed)
        self._hooks.run_end(
            outcome=result.outcome.value,
            distance=result.distance,
            expanded=expanded,
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return result

    def _result(self, start: int, goal: int, expanded: int, closed: ClosedSet) -> SearchResult:
        if self._state is SearchState.EXHAUSTED:
            outcome, dist = Outcome.UNREACHABLE, UNREACHABLE_DISTANCE
        elif start == goal:
            outcome, dist = Outcome.TRIVIAL_ZERO, 0.0
        else:
            outcome, dist = Outcome.FOUND, self.graph.node(goal).f_cost
        return SearchResult(
            outcome, start, goal, dist, expanded, closed.freeze(), self.graph.search_epoch
        )

    def path(self, result: SearchResult) -> list[int]:
        """Start-to-goal node ids for a finished run; [] when unreachable."""
        if result.epoch != self.graph.search_epoch:
            raise StaleResultError(
                f"result for {result.start}->{result.goal} predates the last search on this graph"
            )
        if not result.reachable:
            return []
        return self.graph.path_to(result.goal)


def a_star(
    graph: Graph,
    start: int,
    goal: int,
    *,
    metric: Metric = euclidean,
    hooks: SearchHooks | None = None,
) -> float:
    """Shortest path distance, or UNREACHABLE_DISTANCE if goal cannot be reached."""
    return AStarSearch(graph, metric=metric, hooks=hooks).run(start, goal).distance
