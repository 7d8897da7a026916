"""Logging configuration for opten-text.

One named logger, ``opten-text``, writes to stderr.  Library functions only
emit DEBUG records (plus a WARNING on rejected integer tokens), so a
default INFO level keeps embedding applications quiet.

The CLI calls :func:`set_level` from ``[logging].level`` and
:func:`configure_file_logging` when a log directory is configured.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

logger = logging.getLogger("opten-text")
logger.setLevel(logging.INFO)

handler = logging.StreamHandler(sys.stderr)
handler.setLevel(logging.INFO)

# Shared between stderr and file handlers
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
logger.addHandler(handler)

DEFAULT_LOG_DIR = "data/logs"

LEVEL_NAMES: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def level_from_name(name: str) -> int:
    """Map a level name (any case) to its :mod:`logging` constant.

    Raises :class:`ValueError` for names outside :data:`LEVEL_NAMES`.
    """
    upper = name.strip().upper()
    if upper not in LEVEL_NAMES:
        raise ValueError(f"unknown log level {name!r}")
    return logging.getLevelNamesMapping()[upper]


def set_level(level: int) -> None:
    """Apply *level* to the logger and its stderr handler."""
    logger.setLevel(level)
    handler.setLevel(level)


def configure_file_logging(
    log_dir: str = DEFAULT_LOG_DIR,
    *,
    level: int = logging.INFO,
) -> logging.FileHandler:
    """Add a timestamped file handler to the logger.

    Creates ``log_dir`` if it does not exist.  Returns the handler so
    callers (or tests) can remove it later.

    Args:
        log_dir: Directory for log files.  Created automatically.
        level: Logging level for the file handler (default: INFO).

    Returns:
        The :class:`logging.FileHandler` that was added.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    filename = log_path / f"opten-text_{timestamp}.log"

    file_handler = logging.FileHandler(str(filename), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))

    # The file may ask for more detail than stderr
    if level < logger.level:
        logger.setLevel(level)

    logger.addHandler(file_handler)
    return file_handler


__all__ = ["configure_file_logging", "level_from_name", "logger", "set_level"]
