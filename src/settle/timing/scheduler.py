# src/settle/timing/scheduler.py
from typing import Any, Callable, Protocol


class Scheduler(Protocol):
    """Host timer facility: run a callback after a delay, or cancel it before it runs."""
    def schedule(self, delay_ms: float, callback: Callable[[], Any]) -> Any: ...
    def cancel(self, handle: Any) -> None: ...
