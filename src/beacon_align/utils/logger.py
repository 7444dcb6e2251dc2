"""Logging helpers built on top of loguru."""

from __future__ import annotations

import contextlib
import sys
import threading

from loguru import logger as _logger

from beacon_align.config import DEFAULT_LOG_LEVEL, env_str

LOG_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green>"
    "[<level>{level:.3}</level>]"
    "[<cyan>{extra[module]}</cyan>] "
    "<level>{message}</level>"
)

_lock = threading.Lock()
_sink_id: int | None = None


def _is_package_record(record) -> bool:
    return "module" in record["extra"]


def configure(level: str | None = None) -> None:
    """Install or replace the package's own stderr sink.

    Sinks added by the host application are left untouched. `level` falls back
    to BEACON_ALIGN_LOG_LEVEL.
    """
    global _sink_id
    with _lock:
        if _sink_id is not None:
            _logger.remove(_sink_id)
        else:
            # loguru's stock stderr handler would duplicate ours
            with contextlib.suppress(ValueError):
                _logger.remove(0)
        _sink_id = _logger.add(
            sys.stderr,
            level=(level or env_str("LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper(),
            format=LOG_FORMAT,
            filter=_is_package_record,
        )


def get_logger(name: str):
    """Return the shared loguru logger bound to a module name."""
    if _sink_id is None:
        configure()
    return _logger.bind(module=name)
