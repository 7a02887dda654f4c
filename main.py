# main.py
import argparse

from campus_nav.app.build import build
from campus_nav.domain.entities.guidance import Arrived


def run(map_file: str, destination: str, arrivals: list[str], start: str = "GATE"):
    app = build(
        {
            "name": "demo",
            "map": {"by": "path", "file": map_file},
            "session": {"start_node": start},
        },
        use_logging=False,
    )
    s = app.session

    out = s.navigate_to(destination)
    print(out)

    # Replay position-source events; strays are ignored by the session
    for node_id in arrivals:
        out = s.on_node_reached(node_id)
        if out is None:
            continue
        print(out)
        if isinstance(out, Arrived):
            break
    return s


if __name__ == "__main__":
    p = argparse.ArgumentParser(description="Turn-by-turn directions over a campus map")
    p.add_argument("map_file")
    p.add_argument("destination")
    p.add_argument("arrivals", nargs="*", help="node ids reported by the position source")
    p.add_argument("--start", default="GATE")
    a = p.parse_args()
    run(a.map_file, a.destination, a.arrivals, start=a.start)
