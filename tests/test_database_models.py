import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from quillnote.database.engine import get_engine, init_db
from quillnote.database.models import Base, Note
from quillnote.database.repository import add_note, count_notes, get_notes_by_type
from quillnote.models.schemas import NoteSchema


@pytest.fixture()
def session():
    engine = create_engine("sqlite:///:memory:", future=True)
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    sess = Session()
    try:
        yield sess
    finally:
        sess.close()


def test_add_note_inserts_row(session):
    rec = add_note(session, NoteSchema(title="Groceries", content="eggs, milk"))

    assert rec.id
    assert rec.title == "Groceries"
    assert rec.content == "eggs, milk"
    assert rec.type == "note"
    assert rec.created_at is not None
    assert session.query(Note).count() == 1


def test_every_save_creates_a_row(session):
    payload = NoteSchema(title="Same", content="Same body")

    first = add_note(session, payload)
    second = add_note(session, payload)

    assert first.id != second.id
    assert count_notes(session) == 2


def test_get_notes_by_type(session):
    add_note(session, NoteSchema(title="a", content="1"))
    add_note(session, NoteSchema(title="b", content="2", type="memo"))
    add_note(session, NoteSchema(title="c", content="3"))

    notes = get_notes_by_type(session, "note")
    assert [n.title for n in notes] == ["a", "c"]
    assert [n.title for n in get_notes_by_type(session, "memo")] == ["b"]


def test_get_engine_creates_data_directory(tmp_path):
    target = tmp_path / "nested" / "data" / "notes.db"

    eng = get_engine(f"sqlite:///{target}")
    try:
        init_db(eng)
        assert target.parent.is_dir()
        assert target.exists()
    finally:
        eng.dispose()
