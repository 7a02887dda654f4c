# tests/domain/test_directions.py
import logging
import math

import pytest

from campus_nav.domain.entities.geography import Point
from campus_nav.domain.entities.guidance import Action
from campus_nav.domain.graph import MapGraph
from campus_nav.domain.mechanics.mechanics_directions import (
    HeadingDirectionExtractor,
    classify_turn,
    extract_directions,
    normalize,
    signed_angle_deg,
)
from campus_nav.domain.mechanics.mechanics_route_planners import AStarRoutePlanner


def rec(nid, x, y, *conns):
    return {"id": nid, "position": {"x": x, "y": y}, "connections": list(conns)}


@pytest.fixture
def plus() -> MapGraph:
    # a "+" junction at O with arms N, E, S, W and a straight extension NN
    return MapGraph.build(
        [
            rec("S", 0, -10, "O"),
            rec("O", 0, 0, "N", "E", "W"),
            rec("N", 0, 10, "NN"),
            rec("NN", 0, 20),
            rec("E", 10, 0),
            rec("W", -10, 0),
            rec("NE", 2, 10, "O"),  # ~11 deg off straight ahead
        ]
    )


# ---------- signed angle convention


def test_signed_angle_sign_convention():
    # counter-clockwise from heading is positive
    assert signed_angle_deg((0, 1), (-1, 0)) == pytest.approx(90.0)
    assert signed_angle_deg((0, 1), (1, 0)) == pytest.approx(-90.0)
    assert signed_angle_deg((0, 1), (10, 0)) == pytest.approx(-90.0)
    assert signed_angle_deg((1, 0), (1, 0)) == pytest.approx(0.0)
    assert signed_angle_deg((1, 0), (-1, 0)) == pytest.approx(180.0)


def test_signed_angle_ignores_magnitudes():
    assert signed_angle_deg(Point(0, 5), Point(3, 3)) == pytest.approx(-45.0)


# ---------- classification bands and boundaries


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, Action.FORWARD),
        (19.999, Action.FORWARD),
        (-19.999, Action.FORWARD),
        (20.0, Action.LEFT),
        (-20.0, Action.RIGHT),
        (90.0, Action.LEFT),
        (-90.0, Action.RIGHT),
        (160.0, Action.LEFT),
        (-160.0, Action.RIGHT),
        (160.001, Action.BACK),
        (-160.001, Action.BACK),
        (180.0, Action.BACK),
    ],
)
def test_classify_turn_boundaries(angle, expected):
    assert classify_turn(angle) is expected


def test_classify_turn_custom_threshold():
    assert classify_turn(25.0, threshold_deg=30.0) is Action.FORWARD
    assert classify_turn(145.0, threshold_deg=30.0) is Action.LEFT
    assert classify_turn(155.0, threshold_deg=30.0) is Action.BACK


# ---------- extraction


def test_single_node_path_yields_no_steps(plus):
    assert extract_directions(plus, ["O"], (0, 1)) == []


def test_first_step_is_always_start_forward(plus):
    # facing away from the walking direction still starts with START_FORWARD
    steps = extract_directions(plus, ["O", "S"], (0, 1))
    assert len(steps) == 1
    assert steps[0].action is Action.START_FORWARD
    assert steps[0].angle_deg is None
    assert steps[0].length_m == pytest.approx(10.0)


@pytest.mark.parametrize(
    "path, expected",
    [
        (["S", "O", "N"], Action.FORWARD),
        (["S", "O", "E"], Action.RIGHT),
        (["S", "O", "W"], Action.LEFT),
        (["N", "O", "N"], Action.BACK),
        (["S", "O", "NE"], Action.FORWARD),
    ],
)
def test_turn_relative_to_previous_leg(plus, path, expected):
    steps = extract_directions(plus, path, (1, 0))
    assert [s.action for s in steps] == [Action.START_FORWARD, expected]
    assert (steps[1].from_id, steps[1].to_id) == (path[1], path[2])


def test_heading_snaps_to_each_walked_leg(plus):
    steps = extract_directions(plus, ["W", "O", "N", "NN"], (0, -1))
    assert [s.action for s in steps] == [Action.START_FORWARD, Action.LEFT, Action.FORWARD]
    assert steps[1].angle_deg == pytest.approx(90.0)
    assert steps[2].angle_deg == pytest.approx(0.0)


def test_coincident_positions_hold_heading(caplog):
    g = MapGraph.build(
        [rec("A", 0, 0, "B"), rec("B", 0, 10, "B2"), rec("B2", 0, 10, "C"), rec("C", 10, 10)]
    )
    with caplog.at_level(logging.WARNING):
        steps = extract_directions(g, ["A", "B", "B2", "C"], (0, 1))
    actions = [s.action for s in steps]
    # zero-length leg keeps the A->B heading, so B2->C is still a right turn
    assert actions == [Action.START_FORWARD, Action.FORWARD, Action.RIGHT]
    assert all(s.angle_deg is None or not math.isnan(s.angle_deg) for s in steps)
    assert "coincident" in caplog.text


def test_normalize_zero_vector_is_none():
    assert normalize(Point(0.0, 0.0)) is None
    u = normalize(Point(3.0, 4.0))
    assert u == Point(0.6, 0.8)


def test_extractor_on_planned_route():
    g = MapGraph.build([rec("GATE", 0, 0, "A"), rec("A", 0, 10, "B"), rec("B", 10, 10)])
    route = AStarRoutePlanner(g).route("GATE", "B")
    steps = HeadingDirectionExtractor(g).extract(route, Point(0, -1))
    assert [(s.from_id, s.to_id, s.action) for s in steps] == [
        ("GATE", "A", Action.START_FORWARD),
        ("A", "B", Action.RIGHT),
    ]
    assert steps[1].angle_deg == pytest.approx(-90.0)


def test_extractor_threshold_is_configurable(plus):
    route = AStarRoutePlanner(plus).route("S", "NE")
    wide = HeadingDirectionExtractor(plus, turn_threshold_deg=5.0).extract(route, Point(0, 1))
    assert wide[-1].action is Action.RIGHT
