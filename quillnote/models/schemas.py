"""Pydantic schemas for notes crossing the persistence boundary.

The editor builds a NoteSchema right before handing it to the save use case.
Title and content are free-form; deciding whether there is anything worth
saving is the editor's job, not the schema's.
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_NOTE_TYPE = "note"


class NoteSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    content: str = ""
    type: str = Field(default=DEFAULT_NOTE_TYPE)

    @field_validator("type")
    @classmethod
    def type_nonempty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Note type cannot be empty")
        return v.strip()

    def is_blank(self) -> bool:
        """True when either field is empty, i.e. there is nothing to save."""
        return self.title == "" or self.content == ""
