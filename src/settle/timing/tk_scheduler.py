# src/settle/timing/tk_scheduler.py
import logging
import tkinter as tk
from typing import Any, Callable, List, Set

from .scheduler import Scheduler

logger = logging.getLogger(__name__)


class TkScheduler(Scheduler):
    """Timers on the Tk event loop of ``widget`` (``after`` / ``after_cancel``).

    Live after ids are tracked so a window can drop all of them on teardown.
    """
    def __init__(self, widget):
        self.widget = widget
        self._live: Set[str] = set()

    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> str:
        def run():
            self._live.discard(job)
            callback()

        # Tk only takes whole milliseconds
        job = self.widget.after(int(round(delay_ms)), run)
        self._live.add(job)
        logger.debug("after %s ms -> %s", delay_ms, job)
        return job

    def cancel(self, handle: str) -> None:
        self._live.discard(handle)
        try:
            self.widget.after_cancel(handle)
            logger.debug("after_cancel(%s)", handle)
        except tk.TclError:
            # widget already destroyed; its timers went with it
            logger.debug("after_cancel(%s) on a destroyed widget", handle)

    def cancel_all(self) -> None:
        for job in list(self._live):
            self.cancel(job)

    def pending(self) -> List[str]:
        return sorted(self._live)
