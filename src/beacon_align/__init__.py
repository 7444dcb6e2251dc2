"""Beacon Align package."""

from .align.aggregate import RegistrationResult
from .align.matcher import find_overlap
from .align.resolver import FrameResolver, resolve_frames
from .config import MIN_OVERLAP, RegistrationConfig
from .core.frames import IDENTITY_FRAME, ReferenceFrame
from .core.points import Point
from .core.scanner import Scanner, build_scanner, build_scanners
from .errors import BeaconAlignError, ResolutionConflict, UnresolvableOverlapGraph
from .pipeline import register

__all__ = [
    "BeaconAlignError",
    "FrameResolver",
    "IDENTITY_FRAME",
    "MIN_OVERLAP",
    "Point",
    "ReferenceFrame",
    "RegistrationConfig",
    "RegistrationResult",
    "ResolutionConflict",
    "Scanner",
    "UnresolvableOverlapGraph",
    "build_scanner",
    "build_scanners",
    "find_overlap",
    "register",
    "resolve_frames",
]
