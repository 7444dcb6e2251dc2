"""beacon_align.align"""

from .aggregate import RegistrationResult, aggregate, count_beacons, max_scanner_distance, merge_beacons
from .matcher import count_common, find_overlap
from .resolver import FrameResolver, ResolutionState, resolve_frames

__all__ = [
    "FrameResolver",
    "RegistrationResult",
    "ResolutionState",
    "aggregate",
    "count_beacons",
    "count_common",
    "find_overlap",
    "max_scanner_distance",
    "merge_beacons",
    "resolve_frames",
]
