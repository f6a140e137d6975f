from datetime import datetime
import uuid

from sqlalchemy import Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Note(Base):
    """A persisted note.

    Fields:
        title: Note title as typed in the editor
        content: Note body as typed in the editor
        type: Record kind tag; the editor always writes "note"
    """

    __tablename__ = "notes"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    type = Column(String, default="note")  # note
    created_at = Column(DateTime, default=datetime.utcnow)

    def __repr__(self) -> str:  # pragma: no cover - repr utility
        return f"Note(id={self.id}, title={self.title}, type={self.type})"
