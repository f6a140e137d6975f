"""
App shell tests: navigation wiring, teardown on pop, and the headless entrypoint.
"""

import asyncio
import runpy
from pathlib import Path
from unittest.mock import Mock

import pytest

from gui.app import QuillnoteApp, main
from gui.events import BackPressed, ContentChanged, TitleChanged
from gui.state import FINISH_SAVING, LOADING, Error


def make_app(**kwargs):
    return QuillnoteApp(save_note=Mock(), load_delay=0, save_delay=0, **kwargs)


class TestQuillnoteApp:
    def test_open_note_editor_pushes_route(self):
        async def scenario():
            app = make_app()
            editor = app.open_note_editor()
            assert editor.current_state() == LOADING
            assert app.state.current_view == "note_editor"
            assert app.navigator.routes() == ["home", "note_editor"]
            await editor.scope.join()
            return app

        asyncio.run(scenario())

    def test_successful_save_leaves_screen(self):
        async def scenario():
            app = make_app()
            editor = app.open_note_editor()
            await editor.scope.join()
            editor.handle_event(TitleChanged("T"))
            editor.handle_event(ContentChanged("C"))
            editor.handle_event(BackPressed())
            await editor.scope.join()
            return app, editor

        app, editor = asyncio.run(scenario())
        app.save_note.save.assert_called_once()
        assert editor.current_state() == FINISH_SAVING
        assert editor.closed
        assert app.state.current_view == "home"
        assert app.screens == []

    def test_close_screen_cancels_pending_load(self):
        async def scenario():
            app = QuillnoteApp(save_note=Mock(), load_delay=10, save_delay=0)
            editor = app.open_note_editor()
            app.close_screen()
            await asyncio.sleep(0)
            return app, editor

        app, editor = asyncio.run(scenario())
        assert editor.closed
        assert editor.scope.pending == 0
        assert editor.current_state() == LOADING
        assert app.navigator.current == "home"

    def test_failed_save_stays_on_screen(self):
        async def scenario():
            app = make_app()
            app.save_note.save.side_effect = RuntimeError("disk full")
            editor = app.open_note_editor()
            editor.handle_event(TitleChanged("T"))
            editor.handle_event(ContentChanged("C"))
            editor.handle_event(BackPressed())
            await editor.scope.join()
            return app, editor

        app, editor = asyncio.run(scenario())
        assert editor.current_state() == Error("disk full")
        assert not editor.closed
        assert app.state.current_view == "note_editor"


class TestMain:
    def test_main_saves_and_exits_zero(self, monkeypatch):
        save_note = Mock()
        monkeypatch.setattr("gui.app.SaveNoteUseCase", lambda: save_note)

        code = main(["--title", "T", "--content", "C", "--load-delay", "0", "--save-delay", "0"])

        assert code == 0
        save_note.save.assert_called_once()

    def test_main_reports_failure(self, monkeypatch):
        save_note = Mock()
        save_note.save.side_effect = RuntimeError("disk full")
        monkeypatch.setattr("gui.app.SaveNoteUseCase", lambda: save_note)

        code = main(["--title", "T", "--content", "C", "--load-delay", "0", "--save-delay", "0"])

        assert code == 1

    def test_main_with_empty_note_skips_save(self, monkeypatch):
        save_note = Mock()
        monkeypatch.setattr("gui.app.SaveNoteUseCase", lambda: save_note)

        code = main(["--load-delay", "0", "--save-delay", "0"])

        assert code == 0
        save_note.save.assert_not_called()


class TestLauncher:
    def test_root_launcher_runs_main(self, monkeypatch):
        calls = []

        def fake_main():
            calls.append(True)
            return 0

        monkeypatch.setattr("gui.app.main", fake_main)
        launcher = Path(__file__).resolve().parents[1] / "gui.py"

        with pytest.raises(SystemExit) as excinfo:
            runpy.run_path(str(launcher), run_name="__main__")

        assert excinfo.value.code == 0
        assert calls == [True]
