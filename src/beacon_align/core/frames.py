from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from beacon_align.invariants.rotation_group import compose_rotations

from .points import ORIGIN, Point, add, negate, rotate
from .rotations import IDENTITY_INDEX, check_rotation_index, inverse_rotation_index


@dataclass(frozen=True, slots=True)
class ReferenceFrame:
    """Placement of a scanner: ``global = rotate(local, rotation) + translation``.

    `translation` is also the scanner's origin expressed in the target frame.
    """

    rotation: int
    translation: Point

    def __post_init__(self) -> None:
        check_rotation_index(self.rotation)

    def apply(self, p: Point) -> Point:
        return add(rotate(p, self.rotation), self.translation)

    def apply_all(self, points: Iterable[Point]) -> tuple[Point, ...]:
        return tuple(self.apply(p) for p in points)

    def compose(self, inner: ReferenceFrame) -> ReferenceFrame:
        """Frame equivalent to applying `inner` first, then `self`."""
        return ReferenceFrame(
            rotation=compose_rotations(self.rotation, inner.rotation),
            translation=add(rotate(inner.translation, self.rotation), self.translation),
        )

    def inverse(self) -> ReferenceFrame:
        inv = inverse_rotation_index(self.rotation)
        return ReferenceFrame(rotation=inv, translation=negate(rotate(self.translation, inv)))


IDENTITY_FRAME = ReferenceFrame(rotation=IDENTITY_INDEX, translation=ORIGIN)
