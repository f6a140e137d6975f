"""Headless status bar.

Subscribes to an editor's observables and turns them into a one-line status
message, mirrored into the shared AppState when one is given.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from gui.state import (
    AppState,
    Error,
    FinishLoading,
    FinishSaving,
    Loading,
    Saving,
    ScreenState,
    Start,
)
from gui.views.note_editor import NoteEditorController


def describe_state(screen_state: ScreenState) -> str:
    if isinstance(screen_state, Start):
        return "Ready"
    if isinstance(screen_state, Loading):
        return "Loading note…"
    if isinstance(screen_state, FinishLoading):
        return "Editing"
    if isinstance(screen_state, Saving):
        return "Saving…"
    if isinstance(screen_state, FinishSaving):
        return "Saved"
    if isinstance(screen_state, Error):
        return f"Error: {screen_state.message}"
    raise TypeError(f"Unknown screen state: {screen_state!r}")


class StatusBar:
    """
    Status line for the note editor.

    Displays: status message, busy indicator while loading/saving, and
    whether the error dialog is up. Every message shown is kept in
    `history` so headless runs can print or assert on it.
    """

    def __init__(self, state: Optional[AppState] = None):
        self.state = state
        self.message: str = ""
        self.is_busy: bool = False
        self.dialog_open: bool = False
        self.history: List[str] = []
        self._unsubscribers: List[Callable[[], None]] = []

    def attach(self, editor: NoteEditorController) -> None:
        self.detach()
        self._unsubscribers = [
            editor.ui_state.subscribe(self.update_status),
            editor.is_dialog_open.subscribe(self.update_dialog),
        ]
        self.update_status(editor.current_state())
        self.update_dialog(editor.is_dialog_visible())

    def detach(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    def update_status(self, screen_state: ScreenState) -> None:
        self.message = describe_state(screen_state)
        self.is_busy = isinstance(screen_state, (Loading, Saving))
        self.history.append(self.message)
        if self.state is not None:
            self.state.status_message = self.message
            self.state.is_busy = self.is_busy
            if isinstance(screen_state, Error):
                self.state.last_error = screen_state.message

    def update_dialog(self, visible: bool) -> None:
        self.dialog_open = visible

    def render(self) -> str:
        busy = "●" if self.is_busy else " "
        dialog = " [!]" if self.dialog_open else ""
        return f"{busy} {self.message}{dialog}"
