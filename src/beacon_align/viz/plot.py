from __future__ import annotations

import matplotlib.pyplot as plt

from beacon_align.align.aggregate import RegistrationResult


def plot_registration(result: RegistrationResult, *, ax=None, title: str | None = None):
    """3D scatter of merged beacons with scanner origins overlaid."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")

    if result.beacons:
        bx, by, bz = zip(*result.beacons)
        ax.scatter(bx, by, bz, c="tab:blue", s=8, label="beacons")
    ox, oy, oz = zip(*result.origins)
    ax.scatter(ox, oy, oz, c="tab:red", marker="^", s=60, label="scanners")
    for i, (x, y, z) in enumerate(result.origins):
        ax.text(x, y, z, str(i))

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title or f"{result.beacon_count} beacons, max scanner distance {result.max_distance}")
    ax.legend(loc="upper left")
    return ax
