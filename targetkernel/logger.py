"""Logging helpers.

`get_logger` attaches a shared stream handler (and a rotating file handler
when `settings.log_file` is set) so every module logs with the same format.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

from targetkernel.config import settings

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler: RotatingFileHandler | None = None
if settings.log_file:
    _log_dir = os.path.dirname(settings.log_file)
    if _log_dir:
        os.makedirs(_log_dir, exist_ok=True)
    _file_handler = RotatingFileHandler(settings.log_file, maxBytes=5 * 1024 * 1024, backupCount=3)
    _file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: int | str | None = None) -> logging.Logger:
    """Return a logger with the shared handlers attached exactly once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level if level is not None else settings.log_level.upper())
        logger.addHandler(_stream_handler)
        if _file_handler is not None:
            logger.addHandler(_file_handler)
        logger.propagate = False
    return logger
