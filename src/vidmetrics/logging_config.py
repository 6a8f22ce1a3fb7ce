"""Logging configuration shared by the CLI and library callers."""
from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import get_config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Route vidmetrics logs to stdout; ``level`` overrides LOG_LEVEL."""
    cfg = get_config()
    name = (level or cfg.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
