import os
from math import isfinite
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


# ----------------- MAP DOCUMENT ---------------------
# Map files come from external editors; unknown keys are ignored rather than rejected.


class PositionModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    x: float
    y: float

    @field_validator("x", "y")
    @classmethod
    def _finite(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v):
            raise ValueError(f"{info.field_name} must be finite")
        return v


class NodeRecordModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    id: str
    position: PositionModel
    connections: list[str] = Field(default_factory=list)


class MapDocumentModel(BaseModel):
    model_config = ConfigDict(extra="ignore")
    nodes: list[NodeRecordModel] = Field(default_factory=list)


# ----------------- MAP SOURCES ---------------------


class MapByPath(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    fmt: Literal["json", "pickle"] = "json"

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class MapInline(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["inline"] = "inline"
    document: MapDocumentModel


MapSourceUnion = Annotated[MapByPath | MapInline, Field(discriminator="by")]


class GraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    symmetric_edges: bool = True


# ----------------- ROUTE PLANNERS ---------------------


class RoutePlannerAStarModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"


class RoutePlannerDijkstraModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


RoutePlannerUnion = Annotated[
    RoutePlannerAStarModel | RoutePlannerDijkstraModel,
    Field(discriminator="kind"),
]

# ----------------- DIRECTION EXTRACTORS ---------------------


class DirectionsHeadingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["heading"] = "heading"
    # forward cutoff; the back cutoff is 180 - turn_threshold_deg
    turn_threshold_deg: float = 20.0

    @field_validator("turn_threshold_deg")
    @classmethod
    def _in_range(cls, v: float) -> float:
        if not (0.0 < v < 90.0):
            raise ValueError("turn_threshold_deg must be in (0, 90)")
        return v


# single variant: plain model so "kind" may be omitted
DirectionsUnion = DirectionsHeadingModel


# ------------------------------------------------------------------


class MechanicsModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    route_planner: RoutePlannerUnion = Field(default_factory=RoutePlannerAStarModel)
    directions: DirectionsUnion = Field(default_factory=DirectionsHeadingModel)


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start_node: str = "GATE"
    heading: tuple[float, float] = (0.0, -1.0)  # facing into campus

    @field_validator("heading")
    @classmethod
    def _nonzero(cls, v: tuple[float, float]) -> tuple[float, float]:
        if v[0] == 0 and v[1] == 0:
            raise ValueError("heading must be a non-zero vector")
        return v


class NavigatorModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    map: MapSourceUnion
    graph: GraphModel = GraphModel()
    mechanics: MechanicsModel = Field(default_factory=MechanicsModel)
    session: SessionModel = SessionModel()
    log: LogModel = LogModel()
