"""Note editor screen.

`NoteEditorController` owns the editor's screen state, the title and content
fields and the error dialog flag. It is driven by `UiEvent`s and talks to two
collaborators: a `SaveNote` for persistence and a `Navigator` for leaving the
screen.

Known quirks, kept on purpose:
- When there is nothing to save, back navigation happens while the state is
  still `Saving`; no terminal state is emitted.
- `BackPressed` is not guarded. Each press starts its own save workflow, so
  rapid presses can save the same note twice and pop twice.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from gui.events import (
    BackPressed,
    ContentChanged,
    DialogConfirmed,
    DialogDismissed,
    Edit,
    ErrorAcknowledged,
    Started,
    TitleChanged,
    UiEvent,
)
from gui.navigation import Navigator
from gui.services.note_service import SaveNote
from gui.state import (
    FINISH_LOADING,
    FINISH_SAVING,
    LOADING,
    SAVING,
    START,
    Error,
    MutableObservable,
    Observable,
    ScreenState,
)
from gui.utils.async_tasks import run_blocking
from gui.utils.logging import log
from gui.views.base import BaseView
from quillnote.config import get_settings
from quillnote.models.schemas import NoteSchema


class UnsupportedEventError(NotImplementedError):
    """Raised for events the editor does not handle yet."""

    def __init__(self, event: UiEvent):
        super().__init__(f"{type(event).__name__} is not supported yet")
        self.event = event


def _error_message(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class NoteEditorController(BaseView):
    name = "note_editor"

    def __init__(
        self,
        save_note: SaveNote,
        navigator: Navigator,
        *,
        load_delay: Optional[float] = None,
        save_delay: Optional[float] = None,
        note_type: Optional[str] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        super().__init__(loop=loop)
        settings = get_settings()
        self._save_note = save_note
        self._navigator = navigator
        self._load_delay = settings.load_delay_seconds if load_delay is None else load_delay
        self._save_delay = settings.save_delay_seconds if save_delay is None else save_delay
        self._note_type = note_type or settings.note_type

        self._ui_state: MutableObservable[ScreenState] = MutableObservable(START)
        self._title: MutableObservable[str] = MutableObservable("")
        self._content: MutableObservable[str] = MutableObservable("")
        self._is_dialog_open: MutableObservable[bool] = MutableObservable(False)

    # Observables for the rendering layer

    @property
    def ui_state(self) -> Observable[ScreenState]:
        return self._ui_state

    @property
    def title(self) -> Observable[str]:
        return self._title

    @property
    def content(self) -> Observable[str]:
        return self._content

    @property
    def is_dialog_open(self) -> Observable[bool]:
        return self._is_dialog_open

    def current_state(self) -> ScreenState:
        return self._ui_state.value

    def current_title(self) -> str:
        return self._title.value

    def current_content(self) -> str:
        return self._content.value

    def is_dialog_visible(self) -> bool:
        return self._is_dialog_open.value

    # Events

    def handle_event(self, event: UiEvent) -> None:
        if isinstance(event, (Edit, ErrorAcknowledged)):
            log("%s is not implemented", type(event).__name__, level=logging.ERROR, screen=self.name)
            raise UnsupportedEventError(event)
        if self.closed:
            log("ignoring %r after teardown", event, level=logging.DEBUG, screen=self.name)
            return

        if isinstance(event, Started):
            self._on_start()
        elif isinstance(event, BackPressed):
            self._on_back_pressed()
        elif isinstance(event, TitleChanged):
            self._title.set(event.text)
        elif isinstance(event, ContentChanged):
            self._content.set(event.text)
        elif isinstance(event, (DialogConfirmed, DialogDismissed)):
            self._is_dialog_open.set(False)
        else:
            raise TypeError(f"Unknown editor event: {event!r}")

    def _on_start(self) -> None:
        self.scope.launch(self._load(), name=f"{self.name}-load")
        self._ui_state.set(START)
        self._ui_state.set(LOADING)

    async def _load(self) -> None:
        # No data source yet; the delay stands in for fetching the note.
        log("loading", level=logging.DEBUG, screen=self.name)
        await asyncio.sleep(self._load_delay)
        self._ui_state.set(FINISH_LOADING)
        log("finished loading", level=logging.DEBUG, screen=self.name)

    def _on_back_pressed(self) -> None:
        self.scope.launch(self._save(), name=f"{self.name}-save")
        self._ui_state.set(SAVING)

    async def _save(self) -> None:
        try:
            note = NoteSchema(
                title=self._title.value,
                content=self._content.value,
                type=self._note_type,
            )
            if note.is_blank():
                self._on_nothing_to_save()
                return

            await run_blocking(self._save_note.save, note)
            await asyncio.sleep(self._save_delay)
            self._on_save_success()
        except Exception as e:
            self._on_error(_error_message(e))

    def _on_nothing_to_save(self) -> None:
        log("nothing to save, leaving screen", screen=self.name)
        self._navigator.pop()

    def _on_save_success(self) -> None:
        log("note saved", screen=self.name)
        self._ui_state.set(FINISH_SAVING)
        self._navigator.pop()

    def _on_error(self, message: str) -> None:
        log("save failed: %s", message, level=logging.WARNING, screen=self.name)
        self._is_dialog_open.set(True)
        self._ui_state.set(Error(message))
