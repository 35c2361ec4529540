# city_astar/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from city_astar.config.models import GraphModel, ScenarioModel
from city_astar.domain.graph import Graph
from city_astar.io.search_logging import SearchLogging  # JSON logs
from city_astar.runtime.registries import make_metric
from city_astar.search.engine import AStarSearch
from city_astar.search.hooks import NoopHooks


@dataclass
class App:
    graph: Graph
    search: AStarSearch
    model: ScenarioModel


def build_graph(cfg: GraphModel | Mapping) -> Graph:
    model = cfg if isinstance(cfg, GraphModel) else GraphModel.model_validate(cfg)
    g = Graph(model.node_count)
    for n in model.nodes:
        g.add_node(n.id, n.name, n.lat, n.lon)
    for a, b in model.edges:
        g.add_edge(a, b)
    return g


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Graph
    graph = build_graph(model.graph)

    # 2) Engine (with hooks)
    log = model.search.log
    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=log.level,
            debug=log.debug,
            sample_every=log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    search = AStarSearch(graph, metric=make_metric(model.search.metric), hooks=hooks)

    return App(graph, search, model)
