"""Main GUI application object.

Wires the shared AppState, the navigation stack and the note persistence
use case to the screens. Popping a route tears down the screen that owned
it, which cancels that screen's background work.
"""

from __future__ import annotations

import argparse
import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from gui.components.status_bar import StatusBar
from gui.events import BackPressed, ContentChanged, Started, TitleChanged
from gui.navigation import NavManager
from gui.services.note_service import SaveNote, SaveNoteUseCase
from gui.state import AppState, Error
from gui.views.base import BaseView
from gui.views.note_editor import NoteEditorController
from quillnote.config import get_settings
from quillnote.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


@dataclass
class QuillnoteApp:
    """App shell: owns navigation and the live screens."""

    state: AppState = field(default_factory=AppState)
    navigator: NavManager = field(default_factory=NavManager)
    save_note: Optional[SaveNote] = None
    load_delay: Optional[float] = None
    save_delay: Optional[float] = None
    screens: List[BaseView] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.save_note is None:
            self.save_note = SaveNoteUseCase()
        self.navigator.add_pop_listener(self._on_route_popped)
        self.state.current_view = self.navigator.current

    def switch_view(self, view_name: str) -> None:
        """Switch the active view."""

        self.state.current_view = view_name

    def open_note_editor(self, *, start: bool = True) -> NoteEditorController:
        """Push the editor route and return its controller.

        With start=False the caller sends Started itself, e.g. after
        subscribing a renderer.
        """
        editor = NoteEditorController(
            self.save_note,
            self.navigator,
            load_delay=self.load_delay,
            save_delay=self.save_delay,
        )
        self.screens.append(editor)
        self.navigator.push(editor.name)
        self.switch_view(editor.name)
        if start:
            editor.handle_event(Started())
        return editor

    def close_screen(self) -> None:
        """Leave the current screen as if the user navigated back without saving."""
        self.navigator.pop()

    def _on_route_popped(self, route: str) -> None:
        if self.screens:
            screen = self.screens.pop()
            cancelled = screen.close()
            logger.debug("Closed %s (%d pending task(s) cancelled)", screen.name, cancelled)
        self.switch_view(self.navigator.current)


async def _run_editor(args: argparse.Namespace) -> int:
    app = QuillnoteApp(load_delay=args.load_delay, save_delay=args.save_delay)
    status = StatusBar(app.state)

    editor = app.open_note_editor(start=False)
    status.attach(editor)
    editor.handle_event(Started())
    await editor.scope.join()

    editor.handle_event(TitleChanged(args.title))
    editor.handle_event(ContentChanged(args.content))
    editor.handle_event(BackPressed())
    await editor.scope.join()

    for line in status.history:
        logger.info("status: %s", line)
    logger.info("now on %s", app.state.current_view)
    return 1 if isinstance(editor.current_state(), Error) else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Open the note editor headlessly, type a note and press back."
    )
    parser.add_argument("--title", default="", help="Note title")
    parser.add_argument("--content", default="", help="Note body")
    parser.add_argument("--load-delay", type=float, default=None, help="Seconds (default from QUILLNOTE_LOAD_DELAY_MS)")
    parser.add_argument("--save-delay", type=float, default=None, help="Seconds (default from QUILLNOTE_SAVE_DELAY_MS)")
    args = parser.parse_args(argv)

    setup_logging(get_settings().log_level)
    return asyncio.run(_run_editor(args))


if __name__ == "__main__":
    raise SystemExit(main())
