"""One-shot timer scheduling over the host event loop.

WHY: The engine reschedules itself after every word. The CLI runs on an
asyncio loop and the GUI on Tk's mainloop; both offer one-shot delayed
callbacks with a cancellable handle, so the engine only needs that.

HOW: Scheduler is an ABC with schedule() and cancel(). AsyncioScheduler
wraps loop.call_later(); TkScheduler wraps widget.after() / after_cancel().

RULES:
- Delays are in milliseconds (floats allowed)
- cancel() of an already-fired or already-cancelled handle is a no-op
- Callbacks run on the loop's own thread; nothing here spawns threads
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class Scheduler(ABC):
    """Runs a callback once after a delay."""

    @abstractmethod
    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> Any:
        """Schedule ``callback`` after ``delay_ms`` and return a cancel handle."""

    @abstractmethod
    def cancel(self, handle: Any) -> None:
        """Cancel a pending callback."""


class AsyncioScheduler(Scheduler):
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop or asyncio.get_running_loop()

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self._loop.call_later(delay_ms / 1000.0, callback)

    def cancel(self, handle: asyncio.TimerHandle) -> None:
        handle.cancel()


class TkScheduler(Scheduler):
    """Scheduler backed by a Tk widget's ``after`` queue."""

    def __init__(self, widget: Any) -> None:
        self._widget = widget

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> str:
        return self._widget.after(max(1, int(round(delay_ms))), callback)

    def cancel(self, handle: str) -> None:
        self._widget.after_cancel(handle)
