from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from beacon_align.core.frames import ReferenceFrame
from beacon_align.core.points import Point, manhattan_distance

from .resolver import ResolutionState


@dataclass(frozen=True, slots=True)
class RegistrationResult:
    frames: tuple[ReferenceFrame, ...]
    beacons: tuple[Point, ...]
    beacon_count: int
    max_distance: int

    @property
    def origins(self) -> tuple[Point, ...]:
        return tuple(f.translation for f in self.frames)

    def summary(self) -> dict:
        return {
            "scanners": len(self.frames),
            "beacon_count": self.beacon_count,
            "max_distance": self.max_distance,
            "origins": [tuple(o) for o in self.origins],
        }


def merge_beacons(beacon_sets: Iterable[Iterable[Point]]) -> tuple[Point, ...]:
    """Sorted distinct beacons across all sets."""
    merged = sorted(itertools.chain.from_iterable(beacon_sets))
    out: list[Point] = []
    for p in merged:
        if not out or out[-1] != p:
            out.append(p)
    return tuple(out)


def count_beacons(beacon_sets: Iterable[Iterable[Point]]) -> int:
    return len(merge_beacons(beacon_sets))


def max_scanner_distance(origins: Sequence[Point]) -> int:
    return max((manhattan_distance(a, b) for a, b in itertools.combinations(origins, 2)), default=0)


def aggregate(state: ResolutionState) -> RegistrationResult:
    slots = state.slots()
    frames = tuple(s.frame for s in slots)
    beacons = merge_beacons(s.beacons for s in slots)
    return RegistrationResult(
        frames=frames,
        beacons=beacons,
        beacon_count=len(beacons),
        max_distance=max_scanner_distance([f.translation for f in frames]),
    )
