"""Runtime support imported by generated Python bridges"""

import logging
import threading
from typing import Any, Callable, TypeVar

from .errors import BoundaryCallError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_initializers: list[Callable[[], None]] = []
_thread_state = threading.local()


def add_platform_initializer(callback: Callable[[], None]) -> None:
    """Register a callback run once on every thread entering a bridge"""
    _initializers.append(callback)


def init_platform() -> None:
    """Attach the calling thread. Idempotent, cheap after the first call."""
    if getattr(_thread_state, "attached", False):
        return
    for callback in list(_initializers):
        callback()
    _thread_state.attached = True
    logger.debug("Attached thread %s", threading.current_thread().name)


def run_with_exception_conversion(env: Any, default: T, block: Callable[[], T]) -> T:
    """Run ``block``; any exception it raises is logged and ``default`` returned.

    ``env`` is the borrowed environment handle of the current call.
    """
    try:
        return block()
    except Exception as exc:
        error = BoundaryCallError(exc)
        logger.error("Contained error at native boundary: %s", error, exc_info=exc)
        return default
