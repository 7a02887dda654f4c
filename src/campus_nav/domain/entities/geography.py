import math
from dataclasses import dataclass


# Core geometry types used by mechanics
@dataclass(frozen=True)
class Point:
    x: float  # map units (meters for campus maps)
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def norm(self) -> float:
        return math.hypot(self.x, self.y)


Vec = Point | tuple[float, float]


def to_point(p: Vec) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


@dataclass(frozen=True)
class Node:
    id: str
    point: Point
    neighbors: tuple[str, ...] = ()


@dataclass(frozen=True)
class Segment:
    from_id: str
    to_id: str
    start: Point
    end: Point
    length_m: float


@dataclass(frozen=True)
class Route:
    """Start-to-goal node sequence, inclusive, with the walked segments."""

    node_ids: tuple[str, ...]
    segments: tuple[Segment, ...]
    total_length_m: float

    @property
    def start(self) -> str:
        return self.node_ids[0]

    @property
    def goal(self) -> str:
        return self.node_ids[-1]

    def __len__(self) -> int:
        return len(self.node_ids)
