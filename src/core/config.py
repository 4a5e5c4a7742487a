"""
Process level configuration, read from environment variables.

The rules of the game (board size, barrier length, home lines) are fixed constants and live in src/twixt.

* TWIXT_LOG_LEVEL: name of the log level (default: WARNING)
"""

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "TWIXT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_log_level() -> int:
    """Level requested through the environment. Unknown names fall back to the default."""
    raw = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelNamesMapping().get(raw)
    return level if level is not None else DEFAULT_LOG_LEVEL


def configure_logging(level: Optional[int] = None) -> None:
    """For the host application: library modules only create loggers, they never install handlers."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format=LOG_FORMAT,
    )
