"""Logging setup for the CLI and scripts."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logger(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Configure the root logger and return it.

    Modules log through `logging.getLogger(__name__)`, so configuring the
    root logger once is enough for the whole package.

    Args:
        level: Logging level, as an int or a name such as "DEBUG".

    Returns:
        The configured root logger.
    """
    log = logging.getLogger()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        level = resolved if isinstance(resolved, int) else logging.WARNING
    log.setLevel(level)

    if any(isinstance(h, logging.StreamHandler) and h.stream is sys.stderr for h in log.handlers):
        return log

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    log.addHandler(h)
    return log
