from __future__ import annotations

import logging
import re
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from . import config

LOGGER = logging.getLogger("locator_tutorial")
_LOGGER_INITIALISED = False

_WHITESPACE = re.compile(r"\s+")


def _configure_logger(log_path: Path, stream: TextIO | None = None) -> None:
    """Configure the shared application logger to write to ``log_path``.

    Console output goes to ``stream`` (stdout by default).
    """

    global _LOGGER_INITIALISED

    log_path.parent.mkdir(parents=True, exist_ok=True)

    for handler in list(LOGGER.handlers):
        LOGGER.removeHandler(handler)
        try:
            handler.close()
        except Exception:  # noqa: BLE001
            continue

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    stream_handler.setFormatter(formatter)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)

    LOGGER.setLevel(logging.INFO)
    LOGGER.addHandler(stream_handler)
    LOGGER.addHandler(file_handler)
    LOGGER.propagate = False

    _LOGGER_INITIALISED = True


def _ensure_logger() -> None:
    """Initialise the logger lazily using the default log file."""

    if _LOGGER_INITIALISED:
        return

    ensure_dirs()
    _configure_logger(config.LOG_FILE)


def setup_session_logger(stream: TextIO | None = None) -> Path:
    """Rotate to a fresh timestamped log file for the current session."""

    timestamp = datetime.utcnow().strftime("%Y%m%d_%H%M%S")
    log_path = config.LOG_DIR / f"locate_{timestamp}.log"
    _configure_logger(log_path, stream)
    LOGGER.info("Logging to %s", log_path)
    return log_path


def ensure_dirs() -> None:
    """Ensure that the data and log directories exist."""

    config.DATA_DIR.mkdir(parents=True, exist_ok=True)
    config.LOG_DIR.mkdir(parents=True, exist_ok=True)


def log_line(message: str) -> None:
    """Write a timestamped log line to stdout and the active log file."""

    _ensure_logger()
    LOGGER.info(message)


def normalise_text(text: str | None) -> str:
    """Collapse whitespace runs the way a browser renders inline text."""

    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()


__all__ = [
    "LOGGER",
    "ensure_dirs",
    "log_line",
    "normalise_text",
    "setup_session_logger",
]
