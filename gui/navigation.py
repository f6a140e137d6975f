"""Navigation stack shared by the screens of the app."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol

from gui.utils.logging import log

ROOT_ROUTE = "home"


class Navigator(Protocol):
    def pop(self) -> None: ...


class NavManager:
    """Route stack with pop listeners.

    The root route is never popped; popping it is a logged no-op so that
    overlapping back navigations cannot empty the stack.
    """

    def __init__(self, root: str = ROOT_ROUTE):
        self._stack: List[str] = [root]
        self._listeners: List[Callable[[str], None]] = []

    @property
    def current(self) -> str:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def routes(self) -> List[str]:
        return list(self._stack)

    def push(self, route: str) -> None:
        self._stack.append(route)
        log("Navigated to %s (depth=%d)", route, len(self._stack))

    def pop(self) -> Optional[str]:
        if len(self._stack) <= 1:
            log("Ignoring pop on root route %s", self._stack[0], level=logging.DEBUG)
            return None
        route = self._stack.pop()
        log("Popped %s; now on %s", route, self.current)
        for listener in list(self._listeners):
            listener(route)
        return route

    def add_pop_listener(self, listener: Callable[[str], None]) -> None:
        self._listeners.append(listener)
