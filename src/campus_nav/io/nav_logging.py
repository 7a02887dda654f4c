# io/nav_logging.py
import json
import logging
import sys

from campus_nav.app.hooks import NoopHooks
from campus_nav.domain.entities.geography import Route
from campus_nav.domain.entities.guidance import DirectionStep
from campus_nav.io.guidance_events import (
    ArrivedEvt,
    NavigationFailedEvt,
    RoutePlannedEvt,
    StepIssuedEvt,
)
from campus_nav.io.recorder import Recorder


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="campus_nav", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SessionLogging(NoopHooks):
    """
    One place to shape and emit structured logs and guidance events for a navigation session.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._seq = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _record(self, cls, name: str, **fields):
        self._seq += 1
        if self.recorder:
            self.recorder.emit(cls(run_id=self.run_id, seq=self._seq, name=name, **fields))

    # --------------------------------------------------------

    def route_planned(self, route: Route, steps: list[DirectionStep]):
        self._emit(
            "INFO",
            "route_planned",
            path=list(route.node_ids),
            length_m=round(route.total_length_m, 3),
            steps=len(steps),
        )
        if self.debug:
            for i, s in enumerate(steps):
                self._emit("DEBUG", "direction", index=i, frm=s.from_id, to=s.to_id, action=s.action.value)
        self._record(
            RoutePlannedEvt,
            "RoutePlanned",
            start=route.start,
            goal=route.goal,
            node_ids=list(route.node_ids),
            total_length_m=route.total_length_m,
            n_steps=len(steps),
        )

    def step_issued(self, step: DirectionStep, *, index: int):
        self._emit("INFO", "step_issued", index=index, frm=step.from_id, to=step.to_id, action=step.action.value)
        self._record(
            StepIssuedEvt,
            "StepIssued",
            index=index,
            from_id=step.from_id,
            to_id=step.to_id,
            action=step.action.value,
            angle_deg=step.angle_deg,
        )

    def arrived(self, node_id: str):
        self._emit("INFO", "arrived", node=node_id)
        self._record(ArrivedEvt, "Arrived", node_id=node_id)

    def stray_arrival(self, node_id: str, *, expected: str | None):
        if self.debug:
            self._emit("DEBUG", "stray_arrival", node=node_id, expected=expected)

    def error(self, op: str, *, exc: BaseException, **extra):
        self._emit("ERROR", "navigation_error", op=op, error=str(exc), kind=type(exc).__name__, **extra)
        self._record(
            NavigationFailedEvt,
            "NavigationFailed",
            op=op,
            error=str(exc),
            node_id=extra.get("node"),
        )
