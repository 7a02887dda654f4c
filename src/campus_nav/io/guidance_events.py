# campus_nav/io/guidance_events.py

from dataclasses import dataclass


# Base type for analytics events emitted alongside the guidance stream
@dataclass
class GuidanceEvent:
    run_id: str
    seq: int  # per-session emission counter (for total ordering)
    name: str  # stable event name


@dataclass
class RoutePlannedEvt(GuidanceEvent):
    start: str
    goal: str
    node_ids: list[str]
    total_length_m: float
    n_steps: int


@dataclass
class StepIssuedEvt(GuidanceEvent):
    index: int
    from_id: str
    to_id: str
    action: str
    angle_deg: float | None = None


@dataclass
class ArrivedEvt(GuidanceEvent):
    node_id: str


@dataclass
class NavigationFailedEvt(GuidanceEvent):
    op: str
    error: str
    node_id: str | None = None
