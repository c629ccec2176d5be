"""Logging configuration for duplifinder.

Standard error carries only skipped-root and per-file diagnostics by
default. Scan progress and silently skipped walk entries are opt-in.
"""

from __future__ import annotations

import logging


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the duplifinder logger.

    Default: warnings and errors. ``verbose``: progress (INFO) and walk
    skips (DEBUG), prefixed with the level. ``quiet``: errors only.
    """
    level = logging.WARNING
    fmt = "%(message)s"
    if verbose:
        level = logging.DEBUG
        fmt = "%(levelname)s: %(message)s"
    elif quiet:
        level = logging.ERROR

    root_logger = logging.getLogger("duplifinder")
    root_logger.handlers.clear()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
