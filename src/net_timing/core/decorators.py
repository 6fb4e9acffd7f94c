"""Common decorators for error handling and performance logging."""

from __future__ import annotations

import time
from functools import wraps

from ..logging import get_logger
from ..exceptions import RecordParsingError, AnalysisError


logger = get_logger(__name__)


def _translate_errors(exc_cls, label: str):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except exc_cls:
                raise
            except Exception as exc:
                logger.error("%s in %s: %s", label, func.__name__, exc, exc_info=True)
                raise exc_cls(str(exc), context=func.__name__) from exc

        return wrapper

    return decorator


def handle_parse_errors(func):
    """Wrap loader functions to raise :class:`RecordParsingError` on failure."""
    return _translate_errors(RecordParsingError, "Parsing error")(func)


def handle_analysis_errors(func):
    """Wrap estimators to raise :class:`AnalysisError` on failure."""
    return _translate_errors(AnalysisError, "Analysis error")(func)


def log_performance(func):
    """Log execution duration for ``func``."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            duration = time.perf_counter() - start_time
            logger.info("%s call failed after %.3f seconds", func.__name__, duration)
            raise
        duration = time.perf_counter() - start_time
        logger.debug("%s executed in %.3f seconds", func.__name__, duration)
        return result

    return wrapper
