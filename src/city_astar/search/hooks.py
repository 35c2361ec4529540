# city_astar/search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def run_start(self, *, start, goal, nodes): ...
    def expand(self, node: int, *, f_cost, open_size, expanded): ...
    def run_end(self, *, outcome, distance, expanded, wall_ms): ...
    def error(self, *, reason: str, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def expand(self, *_, **__):
        pass

    def run_end(self, **_):
        pass

    def error(self, **_):
        pass
