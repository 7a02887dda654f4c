# campus_nav/domain/mechanics/mechanics_factory.py

from campus_nav.config.models import GraphModel, MapSourceUnion, MechanicsModel
from campus_nav.domain.graph import MapGraph
from campus_nav.domain.mechanics.mechanics_core import Mechanics
from campus_nav.runtime.registries import load_map_document, make_directions, make_route_planner


def build_graph(source: MapSourceUnion, cfg: GraphModel | None = None) -> MapGraph:
    cfg = cfg or GraphModel()
    doc = load_map_document(source)
    return MapGraph.from_document(doc, symmetric=cfg.symmetric_edges)


def build_mechanics(cfg: MechanicsModel, graph: MapGraph) -> Mechanics:
    deps = {"graph": graph}
    route_planner = make_route_planner(cfg.route_planner, deps=deps)
    directions = make_directions(cfg.directions, deps=deps)

    return Mechanics(route_planner=route_planner, directions=directions)
