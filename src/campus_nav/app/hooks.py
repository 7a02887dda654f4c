# app/hooks.py
from campus_nav.app.protocols import SessionHooks


class NoopHooks(SessionHooks):
    def route_planned(self, *_, **__):
        pass

    def step_issued(self, *_, **__):
        pass

    def arrived(self, *_, **__):
        pass

    def stray_arrival(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
