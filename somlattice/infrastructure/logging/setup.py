"""Setup and configuration for the structured logging system."""

import logging
from pathlib import Path
from typing import Optional, Dict, Any

from .structured_logger import get_logger
from .handlers import ConsoleHandler, FileHandler


def _reset_root_logger(level: int) -> logging.Logger:
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    return root_logger


def setup_logging(config,
                  log_file: Optional[str] = None,
                  console: bool = True,
                  log_level: Optional[str] = None):
    """Configure console and rotating file logging.

    Args:
        config: Config instance (anything with dot-notation ``get``)
        log_file: Optional log file path (uses ``logging.file`` from config if not provided)
        console: Whether to enable console logging
        log_level: Minimum log level (defaults to ``logging.level`` from config)
    """
    log_level = log_level or config.get('logging.level', 'INFO')
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    root_logger = _reset_root_logger(level)

    if console:
        console_handler = ConsoleHandler(show_context=True)
        console_handler.setLevel(level)
        root_logger.addHandler(console_handler)

    if log_file is None:
        log_file = config.get('logging.file')
        if log_file is None:
            log_file = Path(config.get('paths.logs_dir', 'logs')) / 'somlattice.log'

    file_handler = FileHandler(
        filename=str(log_file),
        max_bytes=config.get('logging.max_file_size', 10 * 1024 * 1024),
        backup_count=config.get('logging.backup_count', 5),
        use_json=True
    )
    # Capture everything in files
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    logger = get_logger(__name__)
    logger.info(
        "Structured logging initialized",
        extra={
            'context': {
                'log_level': str(log_level),
                'handlers': {'console': console, 'file': str(log_file)}
            }
        }
    )


def setup_simple_logging(log_level: str = 'INFO'):
    """Console-only logging for scripts and debugging.

    Args:
        log_level: Minimum log level
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger = _reset_root_logger(level)

    console_handler = ConsoleHandler(show_context=True)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)


def get_log_stats() -> Dict[str, Any]:
    """Describe the file handlers attached to the root logger."""
    stats = {}
    for handler in logging.getLogger().handlers:
        if isinstance(handler, FileHandler):
            stats['file'] = {
                'filename': handler.baseFilename,
                'max_bytes': handler.maxBytes,
                'backup_count': handler.backupCount
            }
        elif isinstance(handler, ConsoleHandler):
            stats['console'] = {'level': logging.getLevelName(handler.level)}
    return stats
