from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional

from config.settings import get_settings


_INITIALIZED: bool = False

# Each summarizer run is its own task, so these follow the run that logs.
_RUN_LOCATION: ContextVar[str] = ContextVar("run_location", default="-")
_RUN_PHASE: ContextVar[str] = ContextVar("run_phase", default="-")


def bind_run(*, location: Optional[str] = None, phase: Optional[str] = None) -> None:
    """Attach the current profile URL and pipeline phase to later log records."""
    if location is not None:
        _RUN_LOCATION.set(location)
    if phase is not None:
        _RUN_PHASE.set(phase)


class SafeExtraFormatter(logging.Formatter):
    """Formatter that tolerates missing extra fields.

    ``location`` and ``phase`` default to the run bound with ``bind_run``.
    """

    DEFAULTS: dict[str, Any] = {
        "step": "-",
        "status": "-",
        "duration_ms": "-",
        "error": "-",
        "run_id": "-",
    }

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key, value in self.DEFAULTS.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        if not hasattr(record, "location"):
            record.location = _RUN_LOCATION.get()
        if not hasattr(record, "phase"):
            record.phase = _RUN_PHASE.get()
        return super().format(record)


def init_logging(level: str | None = None) -> None:
    global _INITIALIZED
    if _INITIALIZED:
        return

    log_level_str = (level or get_settings().log_level).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        formatter = SafeExtraFormatter(
            fmt=(
                "%(asctime)s %(levelname)s %(name)s %(message)s "
                "location=%(location)s phase=%(phase)s step=%(step)s status=%(status)s "
                "duration_ms=%(duration_ms)s error=%(error)s run_id=%(run_id)s"
            )
        )
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _INITIALIZED = True
