"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Entrypoints (gui, scripts) call
get_settings() so a local .env is respected.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


@dataclass
class Settings:
    # Database (root-level data directory by default)
    database_url: str = field(
        default_factory=lambda: os.getenv(
            "QUILLNOTE_DATABASE_URL",
            "sqlite:///" + os.path.join(PROJECT_ROOT, "data", "notes.db"),
        )
    )

    # Editor screen: simulated latencies
    load_delay_ms: int = field(
        default_factory=lambda: _env_int("QUILLNOTE_LOAD_DELAY_MS", 1000)
    )
    save_delay_ms: int = field(
        default_factory=lambda: _env_int("QUILLNOTE_SAVE_DELAY_MS", 1000)
    )

    # Type tag written on every note built by the editor
    note_type: str = field(
        default_factory=lambda: os.getenv("QUILLNOTE_NOTE_TYPE", "note")
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.getenv("QUILLNOTE_LOG_LEVEL", "INFO")
    )

    @property
    def load_delay_seconds(self) -> float:
        return self.load_delay_ms / 1000.0

    @property
    def save_delay_seconds(self) -> float:
        return self.save_delay_ms / 1000.0


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()
