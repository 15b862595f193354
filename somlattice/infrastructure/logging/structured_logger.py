"""Structured logger carrying run and map correlation ids."""

import logging
import sys
import time
import traceback
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, Optional

# Correlation ids shared by every logger in the current context
run_context: ContextVar[Optional[str]] = ContextVar('run_id', default=None)
map_context: ContextVar[Optional[str]] = ContextVar('map_id', default=None)


@contextmanager
def map_scope(map_id: str, run_id: Optional[str] = None) -> Iterator[None]:
    """Tag all records logged inside the block with a map (and run) id.

    Example:
        with map_scope('10x10-torus', run_id='a1b2c3'):
            dm = dist_matrix(grid, toroidal=True)
    """
    map_token = map_context.set(map_id)
    run_token = run_context.set(run_id) if run_id is not None else None
    try:
        yield
    finally:
        map_context.reset(map_token)
        if run_token is not None:
            run_context.reset(run_token)


def _format_traceback(exc_info) -> Optional[str]:
    if isinstance(exc_info, BaseException):
        exc_info = (type(exc_info), exc_info, exc_info.__traceback__)
    elif not isinstance(exc_info, tuple):
        exc_info = sys.exc_info()
    if exc_info[0] is None:
        return None
    return ''.join(traceback.format_exception(*exc_info))


class StructuredLogger(logging.Logger):
    """Logger that attaches ``context``, ``performance`` and ``traceback``
    attributes to every record.

    The context holds the run and map ids, the logger name, a UTC
    timestamp, the logger's persistent fields and any ``extra['context']``
    of the call. Formatters read these attributes; plain ``logging``
    formatters simply ignore them.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._context_fields: Dict[str, Any] = {}
        self._start_times: Dict[str, float] = {}

    def _base_context(self) -> Dict[str, Any]:
        context = {
            'run_id': run_context.get(),
            'map_id': map_context.get(),
            'logger_name': self.name,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }
        context.update(self._context_fields)
        return {k: v for k, v in context.items() if v is not None}

    def _log(self, level, msg, args, exc_info=None, extra=None, stack_info=False, **kwargs):
        extra = dict(extra) if isinstance(extra, dict) else {}
        context = self._base_context()
        context.update(extra.pop('context', None) or {})
        performance = extra.pop('performance', None)
        traceback_str = extra.pop('traceback', None)

        if traceback_str is None and exc_info:
            traceback_str = _format_traceback(exc_info)

        extra.update(context=context, performance=performance, traceback=traceback_str)
        # The traceback travels as an attribute; exc_info would print it twice
        super()._log(level, msg, args, exc_info=False, extra=extra,
                     stack_info=stack_info, **kwargs)

    def add_context(self, **fields):
        """Attach fields to every later record of this logger.

        Example:
            logger.add_context(grid='10x10', toroidal=True)
        """
        self._context_fields.update(fields)

    def remove_context(self, *keys):
        for key in keys:
            self._context_fields.pop(key, None)

    def clear_context(self):
        self._context_fields.clear()

    def start_operation(self, operation: str):
        """Start the clock for a named operation."""
        self._start_times[operation] = time.perf_counter()
        self.debug(f"Started operation: {operation}")

    def end_operation(self, operation: str, **metrics):
        """Stop the clock started by ``start_operation`` and log the timing."""
        started = self._start_times.pop(operation, None)
        if started is None:
            self.warning(f"No start time for operation: {operation}")
            return
        self.log_performance(operation, time.perf_counter() - started, **metrics)

    def log_performance(self, operation: str, duration: float, **metrics):
        """Log the duration of an operation at DEBUG.

        ``items_processed`` in metrics adds a throughput figure.

        Example:
            logger.log_performance('visual', 0.12, items_processed=5000)
        """
        performance = {'operation': operation, 'duration_seconds': round(duration, 6), **metrics}
        if duration > 0 and 'items_processed' in metrics:
            performance['items_per_second'] = round(metrics['items_processed'] / duration, 2)

        self.debug(f"Performance: {operation} completed in {duration:.3f}s",
                   extra={'performance': performance})

    def log_error_with_context(self, error: Exception, operation: Optional[str] = None, **context):
        """Log an exception with its type, the operation and extra fields."""
        error_context = {'error_type': type(error).__name__,
                         'error_module': type(error).__module__, **context}
        if operation:
            error_context['operation'] = operation

        self.error(f"{type(error).__name__}: {error}", exc_info=error,
                   extra={'context': error_context})


_logger_cache: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    """Return the structured logger for ``name``, creating it on first use.

    A plain ``logging.Logger`` registered under the same name earlier
    (e.g. by ``logging.getLogger``) is promoted in place, so its level,
    handlers and existing references are kept.

    Example:
        from somlattice.infrastructure.logging import get_logger
        logger = get_logger(__name__)
    """
    if name in _logger_cache:
        return _logger_cache[name]

    previous_class = logging.getLoggerClass()
    logging.setLoggerClass(StructuredLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(previous_class)

    if not isinstance(logger, StructuredLogger):
        logger.__class__ = StructuredLogger
        logger._context_fields = {}
        logger._start_times = {}

    _logger_cache[name] = logger
    return logger
