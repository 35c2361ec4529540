from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- METRICS ---------------------


class MetricEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


class MetricManhattanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"


MetricUnion = Annotated[MetricEuclideanModel | MetricManhattanModel, Field(discriminator="kind")]


class SearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    metric: MetricUnion = Field(default_factory=MetricEuclideanModel)
    log: LogModel = LogModel()


# ----------------- GRAPH ---------------------


class NodeModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    id: int = Field(ge=0)
    name: str = ""
    lat: float
    lon: float

    @field_validator("lat", "lon")
    @classmethod
    def _finite(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v):
            raise ValueError(f"{info.field_name} must be finite")
        return v


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    node_count: int | None = Field(default=None, ge=0)  # None => len(nodes)
    nodes: list[NodeModel] = Field(default_factory=list)
    edges: list[tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_ids(self):
        if self.node_count is None:
            self.node_count = len(self.nodes)
        seen: set[int] = set()
        for n in self.nodes:
            if n.id >= self.node_count:
                raise ValueError(f"node id {n.id} out of range [0, {self.node_count})")
            if n.id in seen:
                raise ValueError(f"duplicate node id {n.id}")
            seen.add(n.id)
        for a, b in self.edges:
            if a == b:
                raise ValueError(f"self-loop edge ({a}, {b})")
            missing = [x for x in (a, b) if x not in seen]
            if missing:
                raise ValueError(f"edge ({a}, {b}) references undeclared node(s) {missing}")
        return self


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    graph: GraphModel
    search: SearchModel = Field(default_factory=SearchModel)
