from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

_CONFIGURED = False

_FILE_LEVELS = ("DEBUG", "INFO", "ERROR")


def _level_filter(level: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return record["level"].name == level

    return _filter


def _metadata(service: str, version: str, environment: str) -> dict:
    return {
        "service": service,
        "version": version,
        "env": environment,
        "request_id": None,
        "user_id": None,
    }


def configure_logging(
    service: str = "maybe-functors",
    version: Optional[str] = None,
    environment: Optional[str] = None,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure Loguru sinks once per process.

    With MF_DISABLE_FILE_LOGS=1 only stderr is used. Otherwise records go to
    JSON-lines files, one per level:
      • <log_dir>/YYYY-MM-DD/debug.json
      • <log_dir>/YYYY-MM-DD/info.json
      • <log_dir>/YYYY-MM-DD/error.json
    plus a colorized stderr sink when attached to a terminal.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    version = version or os.getenv("MF_VERSION", "0.1.0")
    environment = environment or os.getenv("MF_ENV", "dev")
    extra = _metadata(service, version, environment)

    logger.remove()

    if os.getenv("MF_DISABLE_FILE_LOGS") == "1":
        logger.add(sys.stderr, level="INFO", colorize=sys.stderr.isatty(), enqueue=False)
        logger.configure(extra=extra)
        _CONFIGURED = True
        return

    base = Path(log_dir) if log_dir is not None else Path("logs")
    day_dir = base / datetime.now(timezone.utc).strftime("%Y-%m-%d")
    day_dir.mkdir(parents=True, exist_ok=True)

    for level in _FILE_LEVELS:
        logger.add(
            day_dir / f"{level.lower()}.json",
            level=level,
            filter=_level_filter(level),
            serialize=True,
            rotation="10 MB",
            retention="30 days",
            enqueue=True,
        )

    if sys.stderr.isatty():
        logger.add(sys.stderr, level="INFO", colorize=True, enqueue=True)

    logger.configure(extra=extra)
    _CONFIGURED = True
