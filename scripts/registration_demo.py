from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from beacon_align import RegistrationConfig, register  # noqa: E402
from beacon_align.synthetic import make_chain  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a synthetic chain of scanners")
    ap.add_argument("--scanners", type=int, default=8)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--workers", type=int, default=None)
    ap.add_argument("--plot", type=str, default=None, help="optional PNG path")
    args = ap.parse_args()

    scene = make_chain(args.scanners, args.seed)
    result = register(scene.reports, RegistrationConfig(max_workers=args.workers))

    print({
        **result.summary(),
        "expected_beacon_count": len(scene.beacons),
        "frames_match": list(result.frames) == scene.frames,
    })

    if args.plot:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from beacon_align.viz.plot import plot_registration

        plot_registration(result)
        plt.savefig(args.plot, dpi=120)


if __name__ == "__main__":
    main()
