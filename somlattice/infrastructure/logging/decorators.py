"""Decorators for automatic logging and error capture."""

import functools
import time
import inspect
from typing import Callable, Any, Optional, TypeVar

import numpy as np

from .structured_logger import get_logger, StructuredLogger

# Type variable for decorated functions
F = TypeVar('F', bound=Callable[..., Any])


def _describe_argument(value: Any) -> Any:
    """Summarize an argument for log context without dumping arrays."""
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    shape = getattr(value, 'shape', None)
    if shape is not None:
        return f"<{type(value).__name__} shape={tuple(shape)}>"
    return f"<{type(value).__name__}>"


def log_operation(operation_name: Optional[str] = None,
                  log_args: bool = False,
                  log_performance: bool = True):
    """Decorator to log operation execution and capture errors.

    Failures are logged with their context and re-raised unchanged.

    Args:
        operation_name: Custom operation name (defaults to function name)
        log_args: Whether to log function arguments
        log_performance: Whether to log performance metrics

    Example:
        @log_operation("dist_matrix", log_args=True)
        def dist_matrix(grid, toroidal):
            ...
    """
    def decorator(func: F) -> F:
        name = operation_name or func.__name__
        logger = get_logger(func.__module__)
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()
            context = {'operation': name}

            if log_args:
                bound_args = signature.bind(*args, **kwargs)
                bound_args.apply_defaults()
                context['arguments'] = {
                    arg_name: _describe_argument(arg_value)
                    for arg_name, arg_value in bound_args.arguments.items()
                }

            try:
                logger.debug(f"Starting {name}", extra={'context': context})
                result = func(*args, **kwargs)

                if log_performance and isinstance(logger, StructuredLogger):
                    metrics = {'status': 'success'}
                    if isinstance(result, np.ndarray):
                        metrics['items_processed'] = int(result.shape[0]) if result.ndim else 1
                    logger.log_performance(name, time.perf_counter() - start_time, **metrics)
                else:
                    logger.debug(f"Completed {name}", extra={'context': context})

                return result

            except Exception as e:
                duration = time.perf_counter() - start_time
                logger.error(
                    f"Failed {name}: {e}",
                    exc_info=True,
                    extra={
                        'context': context,
                        'performance': {
                            'duration': duration,
                            'status': 'failed',
                            'error_type': type(e).__name__
                        }
                    }
                )
                raise

        return wrapper  # type: ignore
    return decorator
