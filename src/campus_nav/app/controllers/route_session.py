# app/controllers/route_session.py
"""
Route session: the only stateful part of navigation.

Holds the graph reference, the user's logical position and facing, and the
active instruction sequence. Progress advances only when the position source
reports the node the user is currently walking to; anything else is ignored.

Not synchronized: hosts running several threads must serialize calls.
"""

import logging
from enum import Enum

from campus_nav.app.hooks import NoopHooks
from campus_nav.app.protocols import Mechanics, SessionHooks
from campus_nav.config.models import MechanicsModel
from campus_nav.domain.entities.geography import Point, Route, Vec, to_point
from campus_nav.domain.entities.guidance import Arrived, DirectionStep
from campus_nav.domain.errors import (
    MapNotReadyError,
    NavigationError,
    NoActiveRouteError,
    UnknownNodeError,
)
from campus_nav.domain.graph import MapGraph
from campus_nav.domain.mechanics.mechanics_directions import normalize
from campus_nav.domain.mechanics.mechanics_factory import build_mechanics

log = logging.getLogger(__name__)

Guidance = DirectionStep | Arrived


class SessionState(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ARRIVED = "arrived"


class NavigationSession:
    def __init__(
        self,
        graph: MapGraph | None = None,
        *,
        mechanics: Mechanics | None = None,
        start_node: str = "GATE",
        heading: Vec = (0.0, -1.0),
        hooks: SessionHooks | None = None,
    ):
        self._graph: MapGraph | None = None
        self._mechanics: Mechanics | None = None
        self._hooks = hooks or NoopHooks()
        self._start = start_node
        self._heading = Point(0.0, -1.0)
        self.set_heading(heading)

        self._route: Route | None = None
        self._steps: tuple[DirectionStep, ...] = ()
        self._index = 0
        self._target: str | None = None

        if graph is not None:
            self.load_graph(graph, mechanics)

    # ------------------------------------------------------------------
    # Readiness
    # ------------------------------------------------------------------

    def load_graph(self, graph: MapGraph, mechanics: Mechanics | None = None) -> None:
        """Attach the loaded map. Until this succeeds every navigation call fails fast."""
        if mechanics is None:
            mechanics = build_mechanics(MechanicsModel(), graph)
        if self._start not in graph:
            raise UnknownNodeError(self._start, "start node")
        self._graph, self._mechanics = graph, mechanics
        self._clear_route()
        log.info("map loaded: %d nodes, start=%s", len(graph), self._start)

    @property
    def ready(self) -> bool:
        return self._graph is not None

    def _require_graph(self) -> MapGraph:
        if self._graph is None:
            raise MapNotReadyError("map not loaded")
        return self._graph

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        if self._route is None:
            return SessionState.IDLE
        if self._index >= len(self._steps):
            return SessionState.ARRIVED
        return SessionState.ACTIVE

    @property
    def start_node(self) -> str:
        return self._start

    @property
    def heading(self) -> Point:
        return self._heading

    @property
    def route(self) -> Route | None:
        return self._route

    @property
    def steps(self) -> tuple[DirectionStep, ...]:
        return self._steps

    @property
    def step_index(self) -> int:
        return self._index

    @property
    def current_target(self) -> str | None:
        return self._target

    @property
    def current_step(self) -> DirectionStep | None:
        if self.state is SessionState.ACTIVE:
            return self._steps[self._index]
        return None

    @property
    def destination(self) -> str | None:
        return self._route.goal if self._route else None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def set_start_node(self, node_id: str) -> None:
        graph = self._require_graph()
        if node_id not in graph:
            exc = UnknownNodeError(node_id, "start node")
            self._hooks.error("set_start_node", exc=exc, node=node_id)
            raise exc
        self._start = node_id
        log.debug("start node set to %s", node_id)

    def set_heading(self, heading: Vec) -> None:
        unit = normalize(to_point(heading))
        if unit is None:
            raise ValueError("heading must be a non-zero vector")
        self._heading = unit

    def navigate_to(self, destination: str) -> Guidance:
        """
        Plan from the current start node and install the new route.

        Returns the first step, or Arrived when destination is the start node.
        On failure the previously active route is left untouched.
        """
        graph = self._require_graph()
        if destination not in graph:
            exc = UnknownNodeError(destination, "destination")
            self._hooks.error("navigate_to", exc=exc, node=destination)
            raise exc

        try:
            route, steps = self._mechanics.plan(self._start, destination, self._heading)
        except NavigationError as exc:
            self._hooks.error("navigate_to", exc=exc, node=destination, start=self._start)
            raise

        self._route, self._steps, self._index = route, tuple(steps), 0
        self._hooks.route_planned(route, steps)

        if not self._steps:
            self._target = None
            self._hooks.arrived(destination)
            return Arrived(destination)

        first = self._steps[0]
        self._target = first.to_id
        self._hooks.step_issued(first, index=0)
        return first

    def advance_step(self) -> Guidance:
        self._require_graph()
        state = self.state
        if state is SessionState.IDLE:
            raise NoActiveRouteError("no active route")
        if state is SessionState.ARRIVED:
            return Arrived(self._route.goal)

        self._index += 1
        if self._index >= len(self._steps):
            self._target = None
            self._hooks.arrived(self._route.goal)
            return Arrived(self._route.goal)

        step = self._steps[self._index]
        self._target = step.to_id
        self._hooks.step_issued(step, index=self._index)
        return step

    def on_node_reached(self, node_id: str) -> Guidance | None:
        self._require_graph()
        if self._target is None or node_id != self._target:
            self._hooks.stray_arrival(node_id, expected=self._target)
            return None

        self._start = node_id
        return self.advance_step()

    def _clear_route(self) -> None:
        self._route, self._steps, self._index, self._target = None, (), 0, None
