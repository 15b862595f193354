"""Structured logging infrastructure for SOM computations."""

from .structured_logger import StructuredLogger, get_logger, run_context, map_context, map_scope
from .decorators import log_operation
from .setup import setup_logging, setup_simple_logging, get_log_stats

__all__ = [
    'StructuredLogger',
    'get_logger',
    'run_context',
    'map_context',
    'map_scope',
    'log_operation',
    'setup_logging',
    'setup_simple_logging',
    'get_log_stats'
]
