"""Logging setup for specscout.

Library code only calls ``get_logger``. Handlers are attached by the entry
points (``specscout detect``/``inspect``/``serve``) through
``configure_logging``; importing the package leaves logging untouched.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "specscout"
DEFAULT_LEVEL = logging.INFO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: int | str = DEFAULT_LEVEL,
    log_file: Optional[Path] = None,
    console: bool = True,
) -> None:
    """Attach handlers to the ``specscout`` logger, replacing earlier ones.

    Console output goes to stderr so ``--json`` output on stdout stays
    machine-readable.

    Args:
        level: A ``logging`` level or its name (``"debug"``, ``"WARNING"``...)
        log_file: Also write to this file, creating parent directories
        console: Write to stderr

    Example:
        configure_logging(logging.DEBUG)
        configure_logging(settings.log_level, log_file=Path("logs/specscout.log"))
    """
    level = _resolve_level(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    package_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. ``get_logger(__name__)`` -> ``specscout.discovery.fetcher``."""
    return logging.getLogger(name)


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL
