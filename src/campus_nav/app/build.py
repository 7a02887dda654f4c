# campus_nav/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from campus_nav.app.controllers.route_session import NavigationSession
from campus_nav.app.hooks import NoopHooks
from campus_nav.app.protocols import SessionHooks
from campus_nav.config.models import NavigatorModel
from campus_nav.domain.graph import MapGraph
from campus_nav.domain.mechanics.mechanics_core import Mechanics
from campus_nav.domain.mechanics.mechanics_factory import build_graph, build_mechanics
from campus_nav.io.nav_logging import SessionLogging  # JSON logs
from campus_nav.io.recorder import JsonlSink, Recorder, Sink


@dataclass
class App:
    graph: MapGraph
    mechanics: Mechanics
    session: NavigationSession
    hooks: SessionHooks


def build(
    cfg: NavigatorModel | Mapping,
    *,
    use_logging: bool = True,
    sinks: tuple[Sink, ...] | None = None,
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, NavigatorModel) else NavigatorModel.model_validate(cfg)

    # 1) Map -> graph (the only I/O; must finish before the session is usable)
    graph = build_graph(model.map, model.graph)

    # 2) Search + direction extraction
    mechanics = build_mechanics(model.mechanics, graph)

    # 3) Hooks
    if use_logging:
        recorder = Recorder(*(sinks or (JsonlSink(),)))
        hooks = SessionLogging(
            run_id=model.run_id,
            level="DEBUG" if model.log.debug else model.log.level,
            debug=model.log.debug,
            recorder=recorder,
        )
    else:
        hooks = NoopHooks()

    # 4) Session (inject deps explicitly)
    session = NavigationSession(
        graph,
        mechanics=mechanics,
        start_node=model.session.start_node,
        heading=model.session.heading,
        hooks=hooks,
    )

    return App(graph, mechanics, session, hooks)
