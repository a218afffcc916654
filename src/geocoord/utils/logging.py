"""
Logging utility decorators.

This module provides function call logging and performance tracking for
the public entry points.
"""

import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_REPR_LENGTH = 200


def truncate_repr(value: Any, max_length: int = MAX_REPR_LENGTH) -> str:
    """
    ``repr`` of a value, shortened for log lines.

    Args:
        value: Value to represent
        max_length: Maximum length of the returned string

    Returns:
        The repr, cut to ``max_length`` characters with a trailing ``...``
    """
    text = repr(value)
    if len(text) <= max_length:
        return text
    return text[: max(max_length - 3, 0)] + "..."


def log_function_call(
    log_args: bool = True,
    log_result: bool = True,
    log_level: int = logging.DEBUG,
    max_length: int = MAX_REPR_LENGTH,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to log function calls with arguments and results.

    Nothing is formatted unless ``log_level`` is enabled for this module's
    logger.

    Args:
        log_args: Whether to log function arguments
        log_result: Whether to log function result
        log_level: Logging level to use
        max_length: Maximum length of each logged repr

    Returns:
        Decorated function with logging

    Example:
        @log_function_call(log_result=False)
        def create_coordinate(system: str, text: str) -> Coordinate:
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            if not logger.isEnabledFor(log_level):
                return func(*args, **kwargs)

            func_name = f"{func.__module__}.{func.__qualname__}"

            # Log the call
            if log_args:
                args_repr = [truncate_repr(arg, max_length) for arg in args]
                kwargs_repr = [f"{k}={truncate_repr(v, max_length)}" for k, v in kwargs.items()]
                all_args = ", ".join(args_repr + kwargs_repr)
                logger.log(log_level, f"Calling {func_name}({all_args})")
            else:
                logger.log(log_level, f"Calling {func_name}()")

            result = func(*args, **kwargs)

            # Log result
            if log_result:
                logger.log(log_level, f"{func_name} returned: {truncate_repr(result, max_length)}")
            else:
                logger.log(log_level, f"{func_name} completed")

            return result

        return wrapper

    return decorator


def log_performance(
    log_level: int = logging.INFO,
    threshold_ms: Optional[float] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator to log function execution time.

    Args:
        log_level: Logging level to use
        threshold_ms: Only log if execution time exceeds this threshold (milliseconds)

    Returns:
        Decorated function with performance logging

    Example:
        @log_performance(threshold_ms=100)
        def projection_error_meters(points):
            ...
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            func_name = f"{func.__module__}.{func.__qualname__}"
            start_time = time.perf_counter()

            try:
                return func(*args, **kwargs)
            finally:
                duration_ms = (time.perf_counter() - start_time) * 1000

                # Only log if threshold is not set or exceeded
                if threshold_ms is None or duration_ms >= threshold_ms:
                    logger.log(
                        log_level,
                        f"{func_name} executed in {duration_ms:.2f}ms",
                        extra={"duration_ms": duration_ms, "function": func_name},
                    )

        return wrapper

    return decorator
