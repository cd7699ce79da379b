"""Root logger setup for the Streamlit app."""

import logging
import os
import sys
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR


def resolve_log_level(level: Optional[str] = None) -> int:
    """Numeric log level from an explicit name or the environment.

    Falls back to DEFAULT_LOG_LEVEL when the name is missing or unknown.
    """
    name = level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL
    numeric_level = getattr(logging, name.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = getattr(logging, DEFAULT_LOG_LEVEL)
    return numeric_level


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Streamlit reruns the page script on every interaction, so existing
    handlers are replaced rather than stacked.
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_log_level(level))

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    root_logger.addHandler(handler)

    # Streamlit's file watcher is noisy at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)
