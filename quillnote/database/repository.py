"""Thin repository helpers for notes.

These functions provide a small abstraction over SQLAlchemy sessions so the
save use case can persist editor output deterministically.
"""
from typing import List

from sqlalchemy.orm import Session

from quillnote.models.schemas import NoteSchema

from .models import Note


def add_note(session: Session, payload: NoteSchema) -> Note:
    """Insert a new note row.

    Notes are never updated in place; every save creates a row.
    Returns the persisted Note instance.
    """
    record = Note(
        title=payload.title,
        content=payload.content,
        type=payload.type,
    )
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def get_notes_by_type(session: Session, note_type: str = "note") -> List[Note]:
    """Return notes with the given type tag, oldest first."""
    return (
        session.query(Note)
        .filter(Note.type == note_type)
        .order_by(Note.created_at)
        .all()
    )


def count_notes(session: Session) -> int:
    return session.query(Note).count()
