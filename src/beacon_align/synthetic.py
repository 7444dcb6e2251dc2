from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from .core.frames import IDENTITY_FRAME, ReferenceFrame
from .core.points import Point
from .core.rotations import ROTATIONS


@dataclass(frozen=True, slots=True)
class SyntheticScene:
    reports: list[list[Point]]
    frames: list[ReferenceFrame]
    beacons: tuple[Point, ...]


def random_points(rng: random.Random, count: int, spread: int = 1000, *, exclude: Iterable[Point] = ()) -> list[Point]:
    """`count` distinct points in [-spread, spread]^3, avoiding `exclude`."""
    if count < 0:
        raise ValueError("count must be >= 0")
    if spread < 1:
        raise ValueError("spread must be >= 1")
    taken = set(exclude)
    out: list[Point] = []
    while len(out) < count:
        p = Point(rng.randint(-spread, spread), rng.randint(-spread, spread), rng.randint(-spread, spread))
        if p in taken:
            continue
        taken.add(p)
        out.append(p)
    return out


def random_frame(rng: random.Random, spread: int = 1000) -> ReferenceFrame:
    return ReferenceFrame(
        rotation=rng.randrange(len(ROTATIONS)),
        translation=Point(rng.randint(-spread, spread), rng.randint(-spread, spread), rng.randint(-spread, spread)),
    )


def observe(points: Iterable[Point], frame: ReferenceFrame) -> list[Point]:
    """Local coordinates of global `points` seen by a scanner placed at `frame`."""
    local = frame.inverse()
    return [local.apply(p) for p in points]


def make_chain(
    n_scanners: int,
    seed: int = 0,
    *,
    shared: int = 12,
    unique: int = 13,
    spread: int = 1000,
) -> SyntheticScene:
    """Scanners in a chain: neighbours share exactly `shared` beacons, others none.

    Scanner 0 sits at the identity frame; the others get random frames.
    Reports list each scanner's beacons in its local frame, shuffled.
    """
    if n_scanners < 1:
        raise ValueError("n_scanners must be >= 1")

    rng = random.Random(seed)
    pool = random_points(rng, (n_scanners - 1) * shared + n_scanners * unique, spread)
    links = [pool[k * shared : (k + 1) * shared] for k in range(n_scanners - 1)]
    base = (n_scanners - 1) * shared
    own = [pool[base + k * unique : base + (k + 1) * unique] for k in range(n_scanners)]

    frames = [IDENTITY_FRAME] + [random_frame(rng, spread) for _ in range(n_scanners - 1)]
    reports: list[list[Point]] = []
    for k in range(n_scanners):
        seen = list(own[k])
        if k > 0:
            seen.extend(links[k - 1])
        if k < n_scanners - 1:
            seen.extend(links[k])
        rng.shuffle(seen)
        reports.append(observe(seen, frames[k]))

    return SyntheticScene(reports=reports, frames=frames, beacons=tuple(sorted(pool)))
