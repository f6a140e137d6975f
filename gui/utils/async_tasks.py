"""Async helpers.

Screens run their background work inside a `TaskScope`. Closing the scope
cancels whatever is still pending, so nothing resumes against a torn-down
screen. Blocking calls go through `run_blocking`, which hands them to a
worker thread and resumes on the loop that awaited it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Coroutine, Optional, Set

from gui.utils.logging import log


class ScopeClosedError(RuntimeError):
    """Raised when launching work in a scope that has been closed."""


async def run_blocking(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    return await asyncio.to_thread(fn, *args, **kwargs)


class TaskScope:
    def __init__(self, name: str = "scope", loop: Optional[asyncio.AbstractEventLoop] = None):
        self.name = name
        self._loop = loop
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        return sum(1 for t in self._tasks if not t.done())

    def launch(self, coro: Coroutine[Any, Any, Any], *, name: Optional[str] = None) -> asyncio.Task:
        if self._closed:
            coro.close()
            raise ScopeClosedError(f"{self.name} is closed")
        try:
            loop = self._loop or asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            log("task %s failed: %r", task.get_name(), exc, level=logging.ERROR, screen=self.name)

    def close(self) -> int:
        """Cancel every pending task. Returns how many were cancelled."""
        self._closed = True
        cancelled = 0
        for task in list(self._tasks):
            if not task.done():
                task.cancel()
                cancelled += 1
        log("closed, cancelled %d task(s)", cancelled, level=logging.DEBUG, screen=self.name)
        return cancelled

    async def aclose(self) -> int:
        """Close the scope and wait for the cancelled tasks to unwind."""
        tasks = list(self._tasks)
        cancelled = self.close()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        return cancelled

    async def join(self) -> None:
        """Wait until every task launched so far (and any they launch) is done."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

