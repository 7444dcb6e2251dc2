from __future__ import annotations

import threading
from collections import deque
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from beacon_align.config import MIN_OVERLAP
from beacon_align.core.frames import IDENTITY_FRAME, ReferenceFrame
from beacon_align.core.points import Point
from beacon_align.core.scanner import Scanner
from beacon_align.errors import ResolutionConflict, UnresolvableOverlapGraph
from beacon_align.utils.logger import get_logger

from .matcher import find_overlap

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ResolvedSlot:
    frame: ReferenceFrame
    beacons: tuple[Point, ...]


class ResolutionState:
    """Write-once placement slots, one per scanner."""

    def __init__(self, n: int):
        if n < 1:
            raise ValueError("at least one scanner is required")
        self._slots: list[ResolvedSlot | None] = [None] * n
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._slots)

    def resolve(self, index: int, frame: ReferenceFrame, beacons: tuple[Point, ...]) -> ResolvedSlot:
        slot = ResolvedSlot(frame=frame, beacons=beacons)
        with self._lock:
            if self._slots[index] is not None:
                raise ResolutionConflict(index)
            self._slots[index] = slot
        return slot

    def is_resolved(self, index: int) -> bool:
        return self._slots[index] is not None

    def slot(self, index: int) -> ResolvedSlot:
        s = self._slots[index]
        if s is None:
            raise KeyError(f"scanner {index} is not resolved")
        return s

    def unresolved(self) -> list[int]:
        return [i for i, s in enumerate(self._slots) if s is None]

    def complete(self) -> bool:
        return all(s is not None for s in self._slots)

    def slots(self) -> list[ResolvedSlot]:
        if not self.complete():
            raise ValueError(f"scanners still unresolved: {self.unresolved()}")
        return list(self._slots)  # type: ignore[arg-type]


class FrameResolver:
    """Place every scanner in scanner 0's frame by walking the overlap graph.

    Newly placed scanners enter a frontier queue; each is compared once against
    every scanner still unplaced. Comparisons may run on a thread pool, but only
    the resolver thread writes to the state.
    """

    def __init__(self, scanners: Sequence[Scanner], *, min_overlap: int = MIN_OVERLAP, max_workers: int | None = None):
        if not scanners:
            raise ValueError("at least one scanner is required")
        if min_overlap < 1:
            raise ValueError("min_overlap must be >= 1")
        self.scanners = list(scanners)
        self.min_overlap = min_overlap
        self.max_workers = max_workers
        self.state = ResolutionState(len(self.scanners))
        self.seen: set[tuple[int, int]] = set()

    def _compare(self, pair: tuple[int, int]) -> ReferenceFrame | None:
        i, j = pair
        return find_overlap(self.scanners[i], self.scanners[j], self.min_overlap)

    def _place(self, j: int, via: int, frame: ReferenceFrame) -> None:
        global_frame = self.state.slot(via).frame.compose(frame)
        self.state.resolve(j, global_frame, global_frame.apply_all(self.scanners[j].beacons))
        logger.debug(
            f"scanner {self.scanners[j].scanner_id} placed via {self.scanners[via].scanner_id}: "
            f"rotation={global_frame.rotation} origin={tuple(global_frame.translation)}"
        )

    def run(self) -> ResolutionState:
        first = self.scanners[0]
        self.state.resolve(0, IDENTITY_FRAME, first.beacons)
        frontier: deque[int] = deque([0])

        pool = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="overlap") if self.max_workers != 1 else None
        try:
            while frontier:
                i = frontier.popleft()
                pairs = [(i, j) for j in self.state.unresolved() if (i, j) not in self.seen]
                if not pairs:
                    continue
                self.seen.update(pairs)
                results = pool.map(self._compare, pairs) if pool is not None else map(self._compare, pairs)
                for (_, j), frame in zip(pairs, results):
                    if frame is None:
                        continue
                    self._place(j, i, frame)
                    frontier.append(j)
        finally:
            if pool is not None:
                pool.shutdown(wait=True)

        remaining = self.state.unresolved()
        if remaining:
            ids = [self.scanners[j].scanner_id for j in remaining]
            logger.error(f"overlap graph is disconnected; unresolved scanners: {ids}")
            raise UnresolvableOverlapGraph(ids, attempted_pairs=len(self.seen))

        logger.info(f"resolved {len(self.scanners)} scanners after {len(self.seen)} comparisons")
        return self.state


def resolve_frames(
    scanners: Sequence[Scanner],
    *,
    min_overlap: int = MIN_OVERLAP,
    max_workers: int | None = None,
) -> ResolutionState:
    return FrameResolver(scanners, min_overlap=min_overlap, max_workers=max_workers).run()
