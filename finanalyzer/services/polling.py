"""Fixed-period timer that drives status checks on the running event loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)


class PollTimer:
    """Invoke an async callback every ``interval_seconds`` until cancelled.

    Each tick runs as its own task and the next tick is armed before the
    current one starts, so the period does not stretch with request latency.
    ``cancel`` is idempotent and also cancels ticks that are still running,
    except the one calling it.
    """

    def __init__(
        self,
        interval_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._interval = interval_seconds
        self._callback = callback
        self._handle: asyncio.TimerHandle | None = None
        self._ticks: set[asyncio.Task[None]] = set()

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def pending_ticks(self) -> int:
        return len(self._ticks)

    def start(self) -> None:
        """Arm the first tick. Must be called from within a running event loop."""
        if self._handle is not None:
            return
        self._arm(asyncio.get_running_loop())

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

        current = _current_task()
        for task in list(self._ticks):
            if task is not current:
                task.cancel()

    def _arm(self, loop: asyncio.AbstractEventLoop) -> None:
        self._handle = loop.call_later(self._interval, self._fire)

    def _fire(self) -> None:
        self._arm(asyncio.get_running_loop())
        task = asyncio.ensure_future(self._run_tick())
        self._ticks.add(task)
        task.add_done_callback(self._ticks.discard)

    async def _run_tick(self) -> None:
        try:
            await self._callback()
        except asyncio.CancelledError:
            raise
        except Exception:
            # Errors never stop the timer.
            logger.exception("Poll tick raised an unexpected error")


def _current_task() -> asyncio.Task | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


__all__ = ["PollTimer"]
