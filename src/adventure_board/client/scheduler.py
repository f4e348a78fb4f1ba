# src/adventure_board/client/scheduler.py

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional

from adventure_board.tools.logger import Logger


_LOG, _ = Logger().create(application="client")


class RefreshScheduler:
    """Runs ``callback`` every ``interval`` seconds on a single task.

    ``start()`` while the task is alive does nothing, so there is never more
    than one interval running. A callback that raises is logged and the loop
    simply waits for the next tick.
    """

    def __init__(self, interval: float, callback: Callable[[], Awaitable[None]]):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self._callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> bool:
        """Start ticking. Returns False if a task was already running."""
        if self.running:
            return False
        self._task = asyncio.get_running_loop().create_task(self._run())
        return True

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def aclose(self) -> None:
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self._callback()
            except asyncio.CancelledError:
                raise
            except Exception:
                _LOG.exception("Refresh tick failed")
