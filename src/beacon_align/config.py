"""Runtime settings for scanner registration.

Defaults live here as module constants; `RegistrationConfig.from_env()` lets a
deployment override them through ``BEACON_ALIGN_*`` environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

# Fewer shared beacons risks coincidental matches; more misses sparse true overlaps.
MIN_OVERLAP: Final[int] = 12

ENV_PREFIX: Final[str] = "BEACON_ALIGN_"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


def env_str(key: str, default: str) -> str:
    """Resolve string from environment variable with fallback."""
    value = os.getenv(ENV_PREFIX + key)
    return value if value is not None else default


def env_int(key: str, default: int | None) -> int | None:
    """Resolve integer from environment variable with fallback."""
    value = os.getenv(ENV_PREFIX + key)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX + key} must be an integer, got {value!r}") from e


@dataclass(frozen=True, slots=True)
class RegistrationConfig:
    min_overlap: int = MIN_OVERLAP
    max_workers: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    def validate(self) -> RegistrationConfig:
        if self.min_overlap < 1:
            raise ValueError("min_overlap must be >= 1")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        return self

    @classmethod
    def from_env(cls) -> RegistrationConfig:
        return cls(
            min_overlap=env_int("MIN_OVERLAP", MIN_OVERLAP),  # type: ignore[arg-type]
            max_workers=env_int("MAX_WORKERS", None),
            log_level=env_str("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        ).validate()
