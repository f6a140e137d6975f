"""Screen state primitives.

`ScreenState` is a closed union of frozen dataclasses; only `Error` carries a
payload, so the others are exposed as module-level singletons. `Observable`
is the value holder the rendering layer subscribes to. The owning controller
keeps the `MutableObservable` and hands out the read-only base type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class FinishLoading:
    pass


@dataclass(frozen=True)
class Saving:
    pass


@dataclass(frozen=True)
class FinishSaving:
    pass


@dataclass(frozen=True)
class Error:
    message: str


ScreenState = Union[Start, Loading, FinishLoading, Saving, FinishSaving, Error]

START = Start()
LOADING = Loading()
FINISH_LOADING = FinishLoading()
SAVING = Saving()
FINISH_SAVING = FinishSaving()


class Observable(Generic[T]):
    """Read side of an observable value.

    Subscribers are called synchronously with the new value whenever it
    changes. Setting a value equal to the current one notifies nobody.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._subscribers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register `callback`; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class MutableObservable(Observable[T]):
    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        for callback in list(self._subscribers):
            callback(value)


@dataclass
class AppState:
    """Holds ephemeral app-wide UI state."""

    current_view: str = "home"
    status_message: str = ""
    is_busy: bool = False
    flags: Dict[str, Any] = field(default_factory=dict)
    last_error: Optional[str] = None
