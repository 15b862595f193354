"""Rotating log file handler."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..formatters import JsonFormatter

PLAIN_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'


class FileHandler(RotatingFileHandler):
    """Size-rotated log file, JSON lines by default.

    The parent directory is created on construction and the handler
    accepts every level; filtering is left to the loggers.
    """

    def __init__(self, filename: str, max_bytes: int = 10 * 1024 * 1024,
                 backup_count: int = 5, encoding: str = 'utf-8', use_json: bool = True):
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        super().__init__(str(path), maxBytes=max_bytes, backupCount=backup_count, encoding=encoding)

        self.setFormatter(JsonFormatter() if use_json else logging.Formatter(PLAIN_FORMAT))
        self.setLevel(logging.DEBUG)
