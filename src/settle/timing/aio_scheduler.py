# src/settle/timing/aio_scheduler.py
import asyncio
import logging
from typing import Any, Callable, Optional

from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class AsyncioScheduler(Scheduler):
    """Timers on an asyncio event loop (``call_later`` / ``TimerHandle.cancel``).

    Without an explicit loop the running loop is looked up on every
    ``schedule``; asyncio raises ``RuntimeError`` when none is running.
    """
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop

    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = self.loop or asyncio.get_running_loop()
        handle = loop.call_later(delay_ms / 1000, callback)
        logger.debug("call_later %s ms -> %r", delay_ms, handle)
        return handle

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        # no-op on handles that already ran
        handle.cancel()
        logger.debug("cancel %r", handle)
