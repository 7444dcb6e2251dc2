from __future__ import annotations

import random

import pytest

from beacon_align.align.aggregate import aggregate, count_beacons, max_scanner_distance, merge_beacons
from beacon_align.align.resolver import ResolutionState, resolve_frames
from beacon_align.core.frames import IDENTITY_FRAME
from beacon_align.core.points import Point
from beacon_align.core.scanner import build_scanners


def test_merge_and_count():
    a = [Point(1, 1, 1), Point(0, 0, 0)]
    b = [Point(0, 0, 0), Point(2, 2, 2)]
    assert merge_beacons([a, b]) == (Point(0, 0, 0), Point(1, 1, 1), Point(2, 2, 2))
    assert count_beacons([a, b]) == 3
    assert count_beacons([]) == 0


def test_max_scanner_distance():
    assert max_scanner_distance([Point(0, 0, 0)]) == 0
    assert max_scanner_distance([]) == 0
    assert max_scanner_distance([Point(0, 0, 0), Point(1, -2, 3), Point(-1, 1, 0)]) == 8


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_aggregation_ignores_order(seed: int):
    rng = random.Random(seed)
    sets = [[Point(rng.randint(-5, 5), rng.randint(-5, 5), rng.randint(-5, 5)) for _ in range(20)] for _ in range(4)]
    origins = [Point(rng.randint(-99, 99), rng.randint(-99, 99), rng.randint(-99, 99)) for _ in range(6)]
    count = count_beacons(sets)
    dist = max_scanner_distance(origins)

    shuffled_sets = [list(s) for s in sets]
    for s in shuffled_sets:
        rng.shuffle(s)
    rng.shuffle(shuffled_sets)
    rng.shuffle(origins)
    assert count_beacons(shuffled_sets) == count
    assert max_scanner_distance(origins) == dist


def test_example_totals(example_reports):
    result = aggregate(resolve_frames(build_scanners(example_reports)))
    assert result.beacon_count == 79
    assert result.max_distance == 3621
    assert len(result.beacons) == 79
    assert result.origins[0] == Point(0, 0, 0)
    assert result.summary()["scanners"] == 5


def test_aggregate_requires_complete_state():
    state = ResolutionState(2)
    state.resolve(0, IDENTITY_FRAME, (Point(1, 2, 3),))
    with pytest.raises(ValueError):
        aggregate(state)
