"""Database engine and session helpers.

This centralizes engine creation so both the app and tests can share the
same configuration. By default we store the SQLite database under the
project root in `data/notes.db` (override with QUILLNOTE_DATABASE_URL).
"""

import os
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from quillnote.config import PROJECT_ROOT, get_settings

from .models import Base

DB_PATH = os.path.join(PROJECT_ROOT, "data", "notes.db")


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Return a SQLAlchemy engine, creating data dir as needed."""
    url = database_url or get_settings().database_url or f"sqlite:///{DB_PATH}"
    if url.startswith("sqlite:///"):
        db_location = url.replace("sqlite:///", "")
        if db_location != ":memory:" and db_location:
            os.makedirs(os.path.dirname(os.path.abspath(db_location)), exist_ok=True)
    return create_engine(url, echo=False, future=True)


# Default engine/session for application code
engine = get_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)


def init_db(engine_override: Optional[Engine] = None) -> None:
    """Create tables if they don't exist.

    The schema is a single table, so there are no migrations to run.
    """
    eng = engine_override or engine
    Base.metadata.create_all(eng)

