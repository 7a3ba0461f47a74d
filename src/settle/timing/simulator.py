# src/settle/timing/simulator.py
import heapq
import itertools
import logging
from typing import Any, Callable, List, Tuple

from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class SimulatedTimer:
    __slots__ = ("deadline", "callback", "cancelled", "fired")

    def __init__(self, deadline: float, callback: Callable[[], Any]):
        self.deadline = deadline
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def __repr__(self):
        state = "cancelled" if self.cancelled else "fired" if self.fired else "pending"
        return f"<SimulatedTimer at={self.deadline} {state}>"


class SimulatedScheduler(Scheduler):
    """
    Virtual millisecond clock. Nothing runs until ``advance`` is called; then
    due timers fire in deadline order (ties in the order they were scheduled),
    each one seeing ``now`` equal to its own deadline.
    Exceptions raised by a callback propagate out of ``advance``.
    """
    def __init__(self, start_ms: float = 0.0):
        self._now = float(start_ms)
        self._seq = itertools.count()
        self._queue: List[Tuple[float, int, SimulatedTimer]] = []

    @property
    def now(self) -> float:
        return self._now

    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> SimulatedTimer:
        timer = SimulatedTimer(self._now + delay_ms, callback)
        heapq.heappush(self._queue, (timer.deadline, next(self._seq), timer))
        return timer

    def cancel(self, handle: SimulatedTimer) -> None:
        handle.cancelled = True
        logger.debug("cancel %r", handle)

    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled)

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` and fire what came due. Returns how many fired."""
        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = max(self._now, deadline)
            timer.fired = True
            fired += 1
            logger.debug("t=%s firing %r", self._now, timer)
            timer.callback()
        self._now = max(self._now, target)
        return fired
