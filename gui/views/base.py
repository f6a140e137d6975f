"""Base class for screens.

A screen receives UI events through `handle_event` and owns a `TaskScope`
for its background work. `close()` is the teardown hook; it cancels that
work.
"""

from __future__ import annotations

import asyncio
from typing import Any, Optional

from gui.utils.async_tasks import TaskScope


class BaseView:
    name: str = "base"

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.scope = TaskScope(name=self.name, loop=loop)

    @property
    def closed(self) -> bool:
        return self.scope.closed

    def handle_event(self, event: Any) -> None:
        raise NotImplementedError

    def close(self) -> int:
        return self.scope.close()
