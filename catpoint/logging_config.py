"""Logging setup for the security console."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-40s | %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Install a single stdout handler on the root logger.

    Calling this again replaces the handler instead of stacking a new one.

    Parameters
    ----------
    level
        Level name ("DEBUG", "INFO", ...) or numeric level.

    Returns
    -------
    logging.Logger
        The configured root logger.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = numeric

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_catpoint", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._catpoint = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
    return root
