# campus_nav/domain/mechanics/mechanics_core.py
from dataclasses import dataclass

from campus_nav.app.protocols import DirectionExtractor, Mechanics, RoutePlanner
from campus_nav.domain.entities.geography import Point, Route
from campus_nav.domain.entities.guidance import DirectionStep


@dataclass
class Mechanics(Mechanics):
    route_planner: RoutePlanner
    directions: DirectionExtractor

    def route(self, start: str, goal: str) -> Route:
        return self.route_planner.route(start, goal)

    def distance_m(self, start: str, goal: str) -> float:
        return self.route_planner.distance_m(start, goal)

    def plan(self, start: str, goal: str, heading: Point) -> tuple[Route, list[DirectionStep]]:
        route = self.route_planner.route(start, goal)
        return route, self.directions.extract(route, heading)
