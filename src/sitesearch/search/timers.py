"""
Deferred Execution

Cancellable timers on the running asyncio loop. Each owner keeps its own
handles and cancels them on teardown.
"""

import asyncio
from typing import Any, Callable


class TaskScheduler:
    """Runs callbacks after a delay and cancels whatever is still pending."""

    def __init__(self):
        self._handles: set[asyncio.TimerHandle] = set()

    def schedule(self, delay: float, callback: Callable[..., Any], *args: Any):
        """Run callback(*args) after delay seconds."""
        handle: asyncio.TimerHandle | None = None

        def run():
            self._handles.discard(handle)
            callback(*args)

        handle = asyncio.get_running_loop().call_later(delay, run)
        self._handles.add(handle)
        return handle

    @property
    def pending(self) -> int:
        return len(self._handles)

    def cancel_all(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()


class Debouncer:
    """
    Coalesces rapid calls into one.

    Each trigger cancels the pending run and reschedules it, so only the
    last trigger within the delay window executes.
    """

    def __init__(self, delay: float, callback: Callable[..., Any]):
        self.delay = delay
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args: tuple[Any, ...]) -> None:
        self._handle = None
        self._callback(*args)
