# runtime/registries.py
import os
from collections.abc import Callable
from typing import Any

from campus_nav.app.protocols import DirectionExtractor, RoutePlanner
from campus_nav.config.models import (
    DirectionsHeadingModel,
    DirectionsUnion,
    MapByPath,
    MapDocumentModel,
    MapInline,
    MapSourceUnion,
    RoutePlannerAStarModel,
    RoutePlannerDijkstraModel,
    RoutePlannerUnion,
)
from campus_nav.domain.graph import MapGraph
from campus_nav.domain.mechanics.mechanics_directions import HeadingDirectionExtractor
from campus_nav.domain.mechanics.mechanics_route_planners import (
    AStarRoutePlanner,
    DijkstraRoutePlanner,
)
from campus_nav.runtime.resources import load_map_from_path

MapSourceFactory = Callable[[MapSourceUnion, dict], MapDocumentModel]
RoutePlannerFactory = Callable[[RoutePlannerUnion, dict], RoutePlanner]
DirectionsFactory = Callable[[DirectionsUnion, dict], DirectionExtractor]

_map_source_registry: dict[str, MapSourceFactory] = {}
_route_planner_registry: dict[str, RoutePlannerFactory] = {}
_directions_registry: dict[str, DirectionsFactory] = {}


def _lookup(registry: dict[str, Any], kind: str, what: str):
    try:
        return registry[kind]
    except KeyError:
        raise ValueError(f"Unknown {what} kind {kind!r}") from None


# ----- Map sources --------------------------


def register_map_source(by: str):
    def deco(fn: MapSourceFactory):
        _map_source_registry[by] = fn
        return fn

    return deco


def load_map_document(cfg: MapSourceUnion, *, deps: dict | None = None) -> MapDocumentModel:
    return _lookup(_map_source_registry, cfg.by, "map source")(cfg, deps or {})


@register_map_source("path")
def _load_by_path(cfg: MapByPath, deps):
    if not os.path.exists(cfg.file):
        raise FileNotFoundError(cfg.file)
    return load_map_from_path(cfg.file, cfg.fmt)


@register_map_source("inline")
def _load_inline(cfg: MapInline, deps):
    return cfg.document


# --------------------- Route Planners  ---------------------
def register_route_planner(kind: str):
    def deco(fn: RoutePlannerFactory):
        _route_planner_registry[kind] = fn
        return fn

    return deco


def make_route_planner(cfg: RoutePlannerUnion, *, deps: dict) -> RoutePlanner:
    return _lookup(_route_planner_registry, cfg.kind, "route planner")(cfg, deps)


def _graph(deps: dict) -> MapGraph:
    if "graph" not in deps:
        raise ValueError("No graph provided")
    return deps["graph"]


@register_route_planner("astar")
def _make_astar(cfg: RoutePlannerAStarModel, deps):
    return AStarRoutePlanner(_graph(deps))


@register_route_planner("dijkstra")
def _make_dijkstra(cfg: RoutePlannerDijkstraModel, deps):
    return DijkstraRoutePlanner(_graph(deps))


# ---------------------- Direction extractors ----------------------------


def register_directions(kind: str):
    def deco(fn: DirectionsFactory):
        _directions_registry[kind] = fn
        return fn

    return deco


def make_directions(cfg: DirectionsUnion, *, deps: dict) -> DirectionExtractor:
    return _lookup(_directions_registry, cfg.kind, "directions")(cfg, deps)


@register_directions("heading")
def _make_heading(cfg: DirectionsHeadingModel, deps):
    return HeadingDirectionExtractor(_graph(deps), turn_threshold_deg=cfg.turn_threshold_deg)
