from dataclasses import dataclass
from enum import Enum


class Action(Enum):
    START_FORWARD = "START_FORWARD"
    FORWARD = "FORWARD"
    BACK = "BACK"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class DirectionStep:
    from_id: str
    to_id: str
    action: Action
    angle_deg: float | None = None  # None for the start step
    length_m: float = 0.0


@dataclass(frozen=True)
class Arrived:
    """Terminal signal: the user stands at the destination."""

    node_id: str
