from __future__ import annotations

"""
Logging Handler Factories.

Builds the sinks fed by the queue listener. Every handler created here is
tagged so configure_logging can later remove its own handlers without
touching those of a host application.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from printree.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_printree_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_printree_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_sink_handlers(cfg: LoggingConfig) -> List[logging.Handler]:
    """
    Create the stderr and file sinks requested by `cfg`.

    Args:
        cfg: Logging settings.

    Returns:
        List[logging.Handler]: Zero, one or two tagged handlers.
    """
    sinks: List[logging.Handler] = []

    if cfg.console:
        sh = logging.StreamHandler(sys.stderr)
        sh.setLevel(cfg.level_int)
        sh.setFormatter(logging.Formatter(cfg.console_fmt))
        sinks.append(tag_handler(sh))

    if cfg.log_file:
        fh = _open_log_file(cfg)
        if fh is not None:
            sinks.append(tag_handler(fh))

    return sinks


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Open the rotating log file; on failure warn on stderr and skip it."""
    try:
        parent = os.path.dirname(os.path.abspath(cfg.log_file))
        os.makedirs(parent, exist_ok=True)
        fh = RotatingFileHandler(
            cfg.log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None

    fh.setLevel(cfg.level_int)
    fh.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return fh
