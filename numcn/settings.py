"""
Runtime settings read from the environment.

The library itself never touches logging handlers; the entry points
(api.py, main.py) call configure_logging() after loading .env.

Variables:
    NUMCN_LOG_LEVEL    DEBUG / INFO / WARNING / ERROR (default: WARNING)
"""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def log_level() -> int:
    """Resolve NUMCN_LOG_LEVEL to a logging level, falling back to the default."""
    name = os.environ.get("NUMCN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        logger.warning("Unknown NUMCN_LOG_LEVEL %r — using %s", name, DEFAULT_LOG_LEVEL)
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def configure_logging() -> int:
    """Apply NUMCN_LOG_LEVEL to the numcn loggers. Returns the level used."""
    level = log_level()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("numcn").setLevel(level)
    return level
