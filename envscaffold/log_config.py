# envscaffold/log_config.py
"""
Logging configuration for envscaffold.

The library only creates module loggers; applications that want console
output call :func:`setup_logging` once at start-up.
"""

import os
import sys
import logging

# Allow runtime log level control via environment variable
LOG_LEVEL_ENV = "ENVSCAFFOLD_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] (%(name)s) %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _level_from_env() -> int:
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    return getattr(logging, name, logging.INFO)


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure root logging with a single stderr handler."""
    level = logging.DEBUG if debug else _level_from_env()

    root = logging.getLogger()
    # Remove all previous handlers (avoid duplicates)
    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(console)
    root.setLevel(level)

    logger = logging.getLogger("envscaffold")
    logger.debug("Logging initialized (level=%s)", logging.getLevelName(level))
    return logger
