from __future__ import annotations

import time
from collections.abc import Iterable, Sequence

from beacon_align.align.aggregate import RegistrationResult, aggregate
from beacon_align.align.resolver import resolve_frames
from beacon_align.config import RegistrationConfig
from beacon_align.core.scanner import build_scanners
from beacon_align.utils.logger import configure, get_logger

logger = get_logger(__name__)


def register(
    reports: Sequence[Iterable[Sequence[int]]],
    config: RegistrationConfig | None = None,
) -> RegistrationResult:
    """Place every scanner report in the first report's frame and merge the beacons.

    Raises:
    - ValueError for empty input or malformed points
    - UnresolvableOverlapGraph when some scanner overlaps no placed scanner
    """
    cfg = (config or RegistrationConfig.from_env()).validate()
    configure(cfg.log_level)
    if not reports:
        raise ValueError("at least one scanner report is required")

    t0 = time.perf_counter()
    scanners = build_scanners(reports, max_workers=cfg.max_workers)
    t1 = time.perf_counter()
    logger.info(f"built {len(scanners)} fingerprints in {t1 - t0:.3f}s")

    state = resolve_frames(scanners, min_overlap=cfg.min_overlap, max_workers=cfg.max_workers)
    t2 = time.perf_counter()
    logger.info(f"resolved frames in {t2 - t1:.3f}s")

    result = aggregate(state)
    logger.info(f"{result.beacon_count} distinct beacons, max scanner distance {result.max_distance}")
    return result
