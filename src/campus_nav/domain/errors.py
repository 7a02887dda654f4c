# campus_nav/domain/errors.py


class NavigationError(Exception):
    """Base class for every failure surfaced by the navigation core."""


class UnknownNodeError(NavigationError, KeyError):
    def __init__(self, node_id: str, role: str = "node"):
        self.node_id, self.role = node_id, role
        super().__init__(f"unknown {role} {node_id!r}")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class NoPathFoundError(NavigationError):
    def __init__(self, start: str, goal: str):
        self.start, self.goal = start, goal
        super().__init__(f"no path from {start!r} to {goal!r}")


class MapNotReadyError(NavigationError):
    pass


class NoActiveRouteError(NavigationError):
    pass
