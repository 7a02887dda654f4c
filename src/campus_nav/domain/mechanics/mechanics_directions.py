import logging
import math

from campus_nav.app.protocols import DirectionExtractor
from campus_nav.domain.entities.geography import Point, Route, Vec, to_point
from campus_nav.domain.entities.guidance import Action, DirectionStep
from campus_nav.domain.graph import MapGraph

log = logging.getLogger(__name__)

TURN_THRESHOLD_DEG = 20.0
_EPS = 1e-12


def normalize(v: Point) -> Point | None:
    """Unit vector along v, or None for a zero-length vector."""
    mag = math.hypot(v.x, v.y)
    if mag < _EPS:
        return None
    return Point(v.x / mag, v.y / mag)


def signed_angle_deg(heading: Vec, movement: Vec) -> float:
    """Angle from heading to movement in degrees, (-180, 180], positive = counter-clockwise."""
    h, m = to_point(heading), to_point(movement)
    dot = h.x * m.x + h.y * m.y
    cross = h.x * m.y - h.y * m.x
    return math.degrees(math.atan2(cross, dot))


def classify_turn(angle_deg: float, threshold_deg: float = TURN_THRESHOLD_DEG) -> Action:
    # strict on both cutoffs: exactly threshold / 180 - threshold is a turn
    a = abs(angle_deg)
    if a < threshold_deg:
        return Action.FORWARD
    if a > 180.0 - threshold_deg:
        return Action.BACK
    if angle_deg > 0:
        return Action.LEFT
    return Action.RIGHT


def extract_directions(
    graph: MapGraph,
    node_ids: list[str] | tuple[str, ...],
    heading: Vec,
    *,
    turn_threshold_deg: float = TURN_THRESHOLD_DEG,
) -> list[DirectionStep]:
    steps: list[DirectionStep] = []
    h = to_point(heading)

    for i in range(1, len(node_ids)):
        u, v = node_ids[i - 1], node_ids[i]
        movement = graph.node_point(v) - graph.node_point(u)

        if i == 1:
            action, angle = Action.START_FORWARD, None
        else:
            angle = signed_angle_deg(h, movement)
            action = classify_turn(angle, turn_threshold_deg)

        steps.append(DirectionStep(u, v, action, angle_deg=angle, length_m=movement.norm()))

        unit = normalize(movement)
        if unit is None:
            log.warning("coincident positions on %s -> %s; holding heading", u, v)
        else:
            h = unit

    return steps


class HeadingDirectionExtractor(DirectionExtractor):
    def __init__(self, graph: MapGraph, turn_threshold_deg: float = TURN_THRESHOLD_DEG):
        self.G, self.turn_threshold_deg = graph, turn_threshold_deg

    def extract(self, route: Route, heading: Point) -> list[DirectionStep]:
        return extract_directions(
            self.G, route.node_ids, heading, turn_threshold_deg=self.turn_threshold_deg
        )
