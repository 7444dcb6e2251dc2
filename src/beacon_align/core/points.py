from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from .rotations import ROTATIONS, check_rotation_index, mat_vec


class Point(NamedTuple):
    """Integer 3D point; tuple ordering gives the total order used for sorting."""

    x: int
    y: int
    z: int


ORIGIN = Point(0, 0, 0)


def as_point(values: Sequence[int]) -> Point:
    if isinstance(values, Point):
        return values
    if len(values) != 3:
        raise ValueError(f"point must have exactly 3 coordinates, got {len(values)}")
    coords = []
    for v in values:
        if isinstance(v, bool) or int(v) != v:
            raise ValueError(f"point coordinates must be integers, got {values!r}")
        coords.append(int(v))
    return Point(*coords)


def add(a: Point, b: Point) -> Point:
    return Point(a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Point, b: Point) -> Point:
    return Point(a[0] - b[0], a[1] - b[1], a[2] - b[2])


def negate(p: Point) -> Point:
    return Point(-p[0], -p[1], -p[2])


def relative_to(origin: Point, p: Point) -> Point:
    """Vector from `origin` to `p`."""
    return sub(p, origin)


def rotate(p: Point, rotation: int) -> Point:
    return Point(*mat_vec(ROTATIONS[check_rotation_index(rotation)], p))


def manhattan_distance(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2])
