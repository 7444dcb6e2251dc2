from __future__ import annotations

import pytest

from beacon_align.core.frames import IDENTITY_FRAME, ReferenceFrame
from beacon_align.core.points import (
    ORIGIN,
    Point,
    add,
    as_point,
    manhattan_distance,
    negate,
    relative_to,
    rotate,
    sub,
)


def test_add_sub():
    a, b = Point(1, -2, 3), Point(10, 20, -30)
    assert add(a, b) == Point(11, 18, -27)
    assert sub(a, b) == Point(-9, -22, 33)
    assert sub(add(a, b), b) == a
    assert add(a, negate(a)) == ORIGIN


def test_relative_to_points_from_origin_to_target():
    origin, p = Point(1, 1, 1), Point(4, -1, 1)
    assert relative_to(origin, p) == Point(3, -2, 0)
    assert add(origin, relative_to(origin, p)) == p


def test_manhattan_distance():
    assert manhattan_distance(Point(1105, -1205, 1229), Point(-92, -2380, -20)) == 3621
    assert manhattan_distance(ORIGIN, ORIGIN) == 0


def test_total_order():
    pts = [Point(1, 0, 0), Point(0, 5, 5), Point(0, 5, -1)]
    assert sorted(pts) == [Point(0, 5, -1), Point(0, 5, 5), Point(1, 0, 0)]


def test_as_point():
    assert as_point([1, 2, 3]) == Point(1, 2, 3)
    assert as_point((4.0, -5, 6)) == Point(4, -5, 6)
    with pytest.raises(ValueError):
        as_point([1, 2])
    with pytest.raises(ValueError):
        as_point([1, 2.5, 3])
    with pytest.raises(ValueError):
        as_point([True, 2, 3])


def test_frame_apply_compose_inverse():
    f = ReferenceFrame(rotation=7, translation=Point(10, -20, 30))
    g = ReferenceFrame(rotation=13, translation=Point(-3, 4, 5))
    p = Point(8, -1, 6)

    assert f.apply(p) == add(rotate(p, 7), Point(10, -20, 30))
    assert f.compose(g).apply(p) == f.apply(g.apply(p))
    assert f.inverse().apply(f.apply(p)) == p
    assert f.compose(f.inverse()) == IDENTITY_FRAME
    assert IDENTITY_FRAME.apply(p) == p


def test_frame_rejects_bad_rotation():
    with pytest.raises(ValueError):
        ReferenceFrame(rotation=24, translation=ORIGIN)
