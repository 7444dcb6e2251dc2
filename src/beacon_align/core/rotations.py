from __future__ import annotations

import itertools

Matrix3 = tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]

IDENTITY: Matrix3 = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


def det3(m: Matrix3) -> int:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def mat_mul(a: Matrix3, b: Matrix3) -> Matrix3:
    out = []
    for r in range(3):
        out.append(tuple(sum(a[r][k] * b[k][c] for k in range(3)) for c in range(3)))
    return (out[0], out[1], out[2])  # type: ignore[return-value]


def mat_vec(m: Matrix3, v: tuple[int, int, int]) -> tuple[int, int, int]:
    x, y, z = v
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def transpose(m: Matrix3) -> Matrix3:
    return (
        (m[0][0], m[1][0], m[2][0]),
        (m[0][1], m[1][1], m[2][1]),
        (m[0][2], m[1][2], m[2][2]),
    )


def generate_proper_rotations() -> list[Matrix3]:
    """Generate the 24 proper cube rotations as signed axis permutations with det=+1.

    Every row holds exactly one non-zero entry (+1 or -1); reflections (det=-1)
    are filtered out. The result is sorted so rotation indices are stable across
    runs. Each matrix is orthonormal, so its transpose is its inverse.
    """
    mats: list[Matrix3] = []
    for perm in itertools.permutations(IDENTITY, 3):
        for signs in itertools.product([1, -1], repeat=3):
            rows = [tuple(s * v for v in row) for s, row in zip(signs, perm)]
            m = (rows[0], rows[1], rows[2])  # type: ignore[assignment]
            if det3(m) == 1:
                mats.append(m)

    uniq = list(dict.fromkeys(mats))
    if len(uniq) != 24:
        raise AssertionError(f"expected 24 proper rotations, got {len(uniq)}")

    uniq.sort()
    return uniq


ROTATIONS: list[Matrix3] = generate_proper_rotations()
ROTATION_INDEX: dict[Matrix3, int] = {m: i for i, m in enumerate(ROTATIONS)}
IDENTITY_INDEX: int = ROTATION_INDEX[IDENTITY]


def check_rotation_index(rotation: int) -> int:
    if not (0 <= rotation < len(ROTATIONS)):
        raise ValueError(f"rotation index must be in [0..23], got {rotation}")
    return rotation


def inverse_rotation_index(rotation: int) -> int:
    m = ROTATIONS[check_rotation_index(rotation)]
    return ROTATION_INDEX[transpose(m)]
