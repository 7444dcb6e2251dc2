from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from beacon_align import register  # noqa: E402
from beacon_align.viz.plot import plot_registration  # noqa: E402


def test_plot_registration(example_reports):
    result = register(example_reports)
    ax = plot_registration(result)
    assert "79 beacons" in ax.get_title()
    assert len(ax.collections) == 2
    plt.close("all")
