"""Data schemas and validation."""
from .schemas import NoteSchema

__all__ = [
    "NoteSchema",
]
