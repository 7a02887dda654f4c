# campus_nav/domain/mechanics/mechanics_route_planners.py
"""
Shortest-path search over a MapGraph.

- Edge cost and heuristic are both Euclidean distance, so the heuristic is
  admissible and consistent and the returned route is optimal.
- Frontier is a binary heap keyed (f, node_id): equal-cost ties resolve to the
  lowest node id, which keeps results reproducible.
"""

import heapq
import logging
import math

from campus_nav.app.protocols import RoutePlanner
from campus_nav.domain.entities.geography import Route, Segment
from campus_nav.domain.errors import NoPathFoundError, UnknownNodeError
from campus_nav.domain.graph import MapGraph

log = logging.getLogger(__name__)


class AStarRoutePlanner(RoutePlanner):
    def __init__(self, graph: MapGraph):
        self.G = graph

    def route(self, start: str, goal: str) -> Route:
        if start not in self.G:
            raise UnknownNodeError(start, "start node")
        if goal not in self.G:
            raise UnknownNodeError(goal, "goal node")

        nodes = self._search(start, goal)
        segs, L = [], 0.0
        for u, v in zip(nodes, nodes[1:]):
            d = self.G.distance_m(u, v)
            L += d
            segs.append(Segment(u, v, self.G.node_point(u), self.G.node_point(v), d))
        return Route(tuple(nodes), tuple(segs), L)

    def distance_m(self, start: str, goal: str) -> float:
        return self.route(start, goal).total_length_m

    def _h(self, u: str, goal: str) -> float:
        return self.G.distance_m(u, goal)

    def _search(self, start: str, goal: str) -> list[str]:
        came_from: dict[str, str] = {}
        g_score: dict[str, float] = {start: 0.0}
        open_heap: list[tuple[float, str, float]] = [(self._h(start, goal), start, 0.0)]
        expanded = 0

        while open_heap:
            _, current, g = heapq.heappop(open_heap)
            if g > g_score[current]:
                continue  # stale entry, a cheaper one was pushed later
            expanded += 1

            if current == goal:
                log.debug("route %s -> %s: expanded %d nodes", start, goal, expanded)
                return _reconstruct_path(came_from, current)

            for nxt in self.G.neighbors(current):
                tentative_g = g + self.G.distance_m(current, nxt)
                if tentative_g < g_score.get(nxt, math.inf):
                    came_from[nxt] = current
                    g_score[nxt] = tentative_g
                    heapq.heappush(open_heap, (tentative_g + self._h(nxt, goal), nxt, tentative_g))

        raise NoPathFoundError(start, goal)


class DijkstraRoutePlanner(AStarRoutePlanner):
    """Uninformed variant; same costs, zero heuristic."""

    def _h(self, u: str, goal: str) -> float:
        return 0.0


def _reconstruct_path(came_from: dict[str, str], current: str) -> list[str]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
