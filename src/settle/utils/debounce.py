# src/settle/utils/debounce.py
import functools
import logging
from typing import Any, Callable, Dict, List, Optional

from settle.timing.aio_scheduler import AsyncioScheduler
from settle.timing.scheduler import Scheduler

logger = logging.getLogger(__name__)


def debounce(func: Callable[..., Any], delay_ms: float, scheduler: Optional[Scheduler] = None) -> Callable[..., None]:
    """
    Return a wrapper that runs ``func`` once ``delay_ms`` has passed since the
    wrapper was last called, with that last call's arguments.

    Every call cancels the previous pending run. Nothing is returned to the
    caller; errors raised by ``func`` surface wherever ``scheduler`` runs its
    callbacks. Defaults to the asyncio loop running at call time.
    """
    scheduler = scheduler or AsyncioScheduler()
    name = getattr(func, "__qualname__", repr(func))
    pending = None

    @functools.wraps(func)
    def wrapped(*args, **kwargs) -> None:
        nonlocal pending
        if pending is not None:
            logger.debug("%s: cancel %r", name, pending)
            scheduler.cancel(pending)

        def fire():
            nonlocal pending
            pending = None
            logger.debug("%s: fire", name)
            func(*args, **kwargs)

        pending = scheduler.schedule(delay_ms, fire)
        logger.debug("%s: scheduled in %s ms", name, delay_ms)

    return wrapped


def debounced(delay_ms: float, scheduler: Optional[Scheduler] = None):
    """Decorator form of :func:`debounce`."""
    def decorator(func):
        return debounce(func, delay_ms, scheduler)
    return decorator


class Debouncer:
    """Coalesce events by key on one scheduler and run the action once after delay."""
    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        self._handles: Dict[str, Any] = {}

    def schedule(self, key: str, delay_ms: float, func, *args, **kwargs) -> None:
        self.cancel(key)

        def fire():
            self._handles.pop(key, None)
            logger.debug("firing %r", key)
            func(*args, **kwargs)

        self._handles[key] = self.scheduler.schedule(delay_ms, fire)
        logger.debug("scheduled %r in %s ms", key, delay_ms)

    def cancel(self, key: str) -> None:
        h = self._handles.pop(key, None)
        if h is not None:
            logger.debug("cancel %r", key)
            self.scheduler.cancel(h)

    def cancel_all(self) -> None:
        for key in list(self._handles):
            self.cancel(key)

    def pending_keys(self) -> List[str]:
        return list(self._handles)
