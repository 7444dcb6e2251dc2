from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from beacon_align.core.rotations import ROTATIONS, ROTATION_INDEX, Matrix3, check_rotation_index, mat_mul


@dataclass(frozen=True, slots=True)
class RotationGroup:
    compose_table: tuple[tuple[int, ...], ...]

    def compose(self, outer: int, inner: int) -> int:
        """Index of the rotation that applies `inner` first, then `outer`."""
        return self.compose_table[check_rotation_index(outer)][check_rotation_index(inner)]


@lru_cache(maxsize=1)
def build_compose_table() -> RotationGroup:
    table: list[tuple[int, ...]] = []
    for a in range(24):
        row = []
        for b in range(24):
            # Apply b then a (matrix multiplication for coordinate transforms)
            cmat: Matrix3 = mat_mul(ROTATIONS[a], ROTATIONS[b])
            try:
                row.append(ROTATION_INDEX[cmat])
            except KeyError as e:
                raise AssertionError("rotation closure violated") from e
        table.append(tuple(row))
    return RotationGroup(compose_table=tuple(table))


def compose_rotations(outer: int, inner: int) -> int:
    return build_compose_table().compose(outer, inner)
