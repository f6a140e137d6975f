"""Note persistence for the editor screen.

`SaveNote` is the capability the editor depends on. `SaveNoteUseCase` is the
SQLAlchemy-backed implementation used by the app; tests hand the editor a
mock instead.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from quillnote.database.engine import SessionLocal, init_db
from quillnote.database.models import Note
from quillnote.database.repository import add_note
from quillnote.models.schemas import NoteSchema
from quillnote.utils.logger import get_logger

logger = get_logger(__name__)


class NotePersistenceError(Exception):
    """Raised when a note could not be written."""
    pass


class SaveNote(Protocol):
    def save(self, note: NoteSchema) -> None: ...


class SaveNoteUseCase:
    """Persist notes through the repository helpers.

    Args:
        session_factory: Callable returning a new Session (default SessionLocal)
        create_tables: Run init_db() before the first save. Safe when several
            first saves run at once on worker threads.
    """

    def __init__(
        self,
        session_factory: Optional[Callable[[], Session]] = None,
        *,
        create_tables: bool = True,
    ):
        self._session_factory = session_factory or SessionLocal
        self._create_tables = create_tables
        self._tables_lock = threading.Lock()
        self.last_saved_id: Optional[str] = None

    def save(self, note: NoteSchema) -> None:
        db = self._session_factory()
        try:
            self._ensure_tables(db)
            record: Note = add_note(db, note)
            self.last_saved_id = record.id
            logger.info("Saved note %s (%d chars)", record.id, len(note.content))
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning("Saving note failed: %s", e)
            reason = getattr(e, "orig", None) or e
            raise NotePersistenceError(f"Could not save note: {reason}") from e
        finally:
            try:
                db.close()
            except Exception:
                pass

    def _ensure_tables(self, db: Session) -> None:
        if not self._create_tables:
            return
        with self._tables_lock:
            if self._create_tables:
                init_db(db.get_bind())
                self._create_tables = False
