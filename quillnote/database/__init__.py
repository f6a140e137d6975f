"""Database models and session management."""
from .engine import SessionLocal, get_engine, init_db
from .models import Note, Base
from .repository import add_note, count_notes, get_notes_by_type

__all__ = [
    "SessionLocal",
    "init_db",
    "get_engine",
    "Note",
    "Base",
    "add_note",
    "count_notes",
    "get_notes_by_type",
]
