from __future__ import annotations


class BeaconAlignError(Exception):
    """Base class for registration failures."""


class UnresolvableOverlapGraph(BeaconAlignError):
    """Some scanners cannot be reached from scanner 0 through overlaps."""

    def __init__(self, unresolved: list[int], attempted_pairs: int):
        self.unresolved = list(unresolved)
        self.attempted_pairs = attempted_pairs
        super().__init__(
            f"{len(self.unresolved)} scanner(s) never overlapped a placed scanner "
            f"after {attempted_pairs} comparisons: {self.unresolved}"
        )


class ResolutionConflict(BeaconAlignError):
    """A scanner slot was written twice."""

    def __init__(self, scanner_id: int):
        self.scanner_id = scanner_id
        super().__init__(f"scanner {scanner_id} is already resolved")
