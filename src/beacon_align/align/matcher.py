from __future__ import annotations

from collections.abc import Sequence

from beacon_align.core.frames import ReferenceFrame
from beacon_align.core.points import Point, rotate, sub
from beacon_align.core.rotations import IDENTITY_INDEX, ROTATIONS
from beacon_align.core.scanner import Scanner


def count_common(a: Sequence[Point], b: Sequence[Point], min_overlap: int) -> int:
    """Count elements shared by two sorted sequences, giving up early.

    The walk stops as soon as the matches so far plus what remains in the
    shorter tail cannot reach `min_overlap`; the returned count is then only a
    lower bound, but always below `min_overlap`.
    """
    i = j = matched = 0
    la, lb = len(a), len(b)
    while i < la and j < lb:
        if matched + min(la - i, lb - j) < min_overlap:
            return matched
        va, vb = a[i], b[j]
        if va == vb:
            matched += 1
            i += 1
            j += 1
        elif va < vb:
            i += 1
        else:
            j += 1
    return matched


def find_overlap(base: Scanner, other: Scanner, min_overlap: int) -> ReferenceFrame | None:
    """Search for a rigid transform placing `other` in `base`'s local frame.

    Returns the frame mapping `other`-local points into `base`-local points
    under which at least `min_overlap` beacons coincide, or None.
    """
    if min_overlap < 1:
        raise ValueError("min_overlap must be >= 1")
    if len(base) < min_overlap or len(other) < min_overlap:
        return None

    # If min_overlap beacons are shared, one of them sits among the first
    # N - min_overlap + 1 anchors.
    n_anchors = len(base) - min_overlap + 1
    for base_anchor in range(n_anchors):
        base_vectors = base.anchor_vectors(IDENTITY_INDEX, base_anchor)
        for rotation in range(len(ROTATIONS)):
            for other_anchor, other_vectors in enumerate(other.fingerprint[rotation]):
                if count_common(base_vectors, other_vectors, min_overlap) < min_overlap:
                    continue
                # Both zero vectors are in the intersection: the anchors are the same beacon.
                translation = sub(base.beacons[base_anchor], rotate(other.beacons[other_anchor], rotation))
                return ReferenceFrame(rotation=rotation, translation=translation)
    return None
