"""UI events delivered to the note editor.

The set is closed: `UiEvent` lists every member and the editor dispatches
over all of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Started:
    pass


@dataclass(frozen=True)
class Edit:
    pass


@dataclass(frozen=True)
class ErrorAcknowledged:
    pass


@dataclass(frozen=True)
class BackPressed:
    pass


@dataclass(frozen=True)
class TitleChanged:
    text: str


@dataclass(frozen=True)
class ContentChanged:
    text: str


@dataclass(frozen=True)
class DialogConfirmed:
    pass


@dataclass(frozen=True)
class DialogDismissed:
    pass


UiEvent = Union[
    Started,
    Edit,
    ErrorAcknowledged,
    BackPressed,
    TitleChanged,
    ContentChanged,
    DialogConfirmed,
    DialogDismissed,
]
