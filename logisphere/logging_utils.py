"""Logging configuration helpers for the application."""

from __future__ import annotations

import logging
from pathlib import Path


# Per-user location so an installed (read-only) package can still log
LOG_FILE = Path.home() / ".logisphere" / "logisphere.log"


def setup_logging() -> None:
    """Configure :mod:`logging` to write messages to :data:`LOG_FILE`."""

    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.FileHandler(LOG_FILE, encoding="utf-8")],
    )
