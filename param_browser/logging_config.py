from __future__ import annotations

import logging
import os
from typing import Optional

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "PARAM_BROWSER_LOG_FORMAT"
LOG_LEVEL_ENV = "PARAM_BROWSER_LOG_LEVEL"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _formatter(mode: str) -> logging.Formatter:
    if mode == "plain":
        return logging.Formatter(PLAIN_FORMAT)
    # extra={...} fields end up as top-level JSON keys
    return jsonlogger.JsonFormatter(PLAIN_FORMAT)


def configure_logging(
        level: Optional[int] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Install a single stream handler on the root logger.

    Format, first match wins:
        1) force_format ("json" or "plain")
        2) PARAM_BROWSER_LOG_FORMAT
        3) "json"

    Level: the level argument, else PARAM_BROWSER_LOG_LEVEL (a level name),
    else INFO.
    """
    mode = (force_format or os.getenv(LOG_FORMAT_ENV) or "json").lower()

    if level is None:
        level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV, "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(_formatter(mode))

    # Replace any existing handlers to avoid duplicate logs
    root.handlers.clear()
    root.addHandler(handler)
