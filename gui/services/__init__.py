from .note_service import NotePersistenceError, SaveNote, SaveNoteUseCase

__all__ = [
    "NotePersistenceError",
    "SaveNote",
    "SaveNoteUseCase",
]
