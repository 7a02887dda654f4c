from typing import Protocol, runtime_checkable

from campus_nav.domain.entities.geography import Point, Route
from campus_nav.domain.entities.guidance import DirectionStep


# ------------- Mechanics --------------------
@runtime_checkable
class RoutePlanner(Protocol):
    """
    Responsibilities:
      • Compute the cheapest node sequence between two map nodes.
      • Raise UnknownNodeError for missing endpoints, NoPathFoundError when disconnected.
    Costs are Euclidean distances in map units.
    """

    def route(self, start: str, goal: str) -> Route: ...
    def distance_m(self, start: str, goal: str) -> float: ...


@runtime_checkable
class DirectionExtractor(Protocol):
    """
    Responsibilities:
      • Turn a node sequence plus the user's facing vector into relative steps.
      • Never fail on coincident node positions.
    """

    def extract(self, route: Route, heading: Point) -> list[DirectionStep]: ...


@runtime_checkable
class Mechanics(Protocol):
    """
    Convenience façade bundling the core mechanics components.
    """

    route_planner: RoutePlanner
    directions: DirectionExtractor

    def plan(self, start: str, goal: str, heading: Point) -> tuple[Route, list[DirectionStep]]:
        route = self.route_planner.route(start, goal)
        return route, self.directions.extract(route, heading)


# ------------- Session observers --------------------
@runtime_checkable
class SessionHooks(Protocol):
    def route_planned(self, route: Route, steps: list[DirectionStep]): ...
    def step_issued(self, step: DirectionStep, *, index: int): ...
    def arrived(self, node_id: str): ...
    def stray_arrival(self, node_id: str, *, expected: str | None): ...
    def error(self, op: str, *, exc: BaseException, **kw): ...
