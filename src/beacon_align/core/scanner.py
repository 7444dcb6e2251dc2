from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from .points import Point, as_point, relative_to, rotate
from .rotations import ROTATIONS

# fingerprint[rotation][anchor] -> sorted relative vectors (anchor's own zero vector included)
Fingerprint = tuple[tuple[tuple[Point, ...], ...], ...]


@dataclass(frozen=True, slots=True)
class Scanner:
    scanner_id: int
    beacons: tuple[Point, ...]
    fingerprint: Fingerprint

    def __len__(self) -> int:
        return len(self.beacons)

    def anchor_vectors(self, rotation: int, anchor: int) -> tuple[Point, ...]:
        return self.fingerprint[rotation][anchor]


def preprocess(beacons: Sequence[Point]) -> Fingerprint:
    """Build the translation-invariant fingerprint of a beacon set.

    For each of the 24 rotations, every rotated beacon acts once as anchor and
    contributes the sorted vectors from itself to every rotated beacon. Matching
    never needs to rotate at compare time.
    """
    fingerprint = []
    for r in range(len(ROTATIONS)):
        rotated = [rotate(b, r) for b in beacons]
        per_anchor = tuple(tuple(sorted(relative_to(anchor, q) for q in rotated)) for anchor in rotated)
        fingerprint.append(per_anchor)
    return tuple(fingerprint)


def build_scanner(scanner_id: int, points: Iterable[Sequence[int]]) -> Scanner:
    beacons = tuple(as_point(p) for p in points)
    if len(set(beacons)) != len(beacons):
        raise ValueError(f"scanner {scanner_id} reports duplicate beacons")
    return Scanner(scanner_id=scanner_id, beacons=beacons, fingerprint=preprocess(beacons))


def build_scanners(
    reports: Sequence[Iterable[Sequence[int]]],
    *,
    max_workers: int | None = None,
) -> list[Scanner]:
    """Build one scanner per report; ids follow input order.

    Each worker only reads its own report, so fingerprints are built concurrently.
    """
    if max_workers == 1:
        return [build_scanner(i, pts) for i, pts in enumerate(reports)]
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="fingerprint") as pool:
        return list(pool.map(build_scanner, range(len(reports)), reports))
