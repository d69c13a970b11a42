"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings come from the command line (or its environment variables) via
``configure()``; the defaults keep everything under ``data/`` in the
project root.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from sqlalchemy.orm import sessionmaker

from storefront.domain.exceptions import ValidationError
from storefront.infrastructure.persistence.database import (
    create_session_factory,
    create_tables,
)
from storefront.infrastructure.persistence.json_session_store import JsonSessionStore
from storefront.infrastructure.persistence.session_cart_repository import (
    SessionCartRepository,
)
from storefront.infrastructure.persistence.sql_unit_of_work import SqlUnitOfWork

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'storefront.db'}"
DEFAULT_SESSION_DIR = _DATA_DIR / "sessions"

_SESSION_ID = re.compile(r"[A-Za-z0-9_-]{1,64}")


@dataclass
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    session_dir: Path = DEFAULT_SESSION_DIR


_settings = Settings()
_session_factory: sessionmaker | None = None


def configure(database_url: str | None = None, session_dir: str | Path | None = None) -> None:
    global _settings, _session_factory
    _settings = Settings(
        database_url=database_url or DEFAULT_DATABASE_URL,
        session_dir=Path(session_dir) if session_dir else DEFAULT_SESSION_DIR,
    )
    _session_factory = None


def session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(_settings.database_url)
    return _session_factory


def init_database() -> None:
    create_tables(session_factory())


def unit_of_work() -> SqlUnitOfWork:
    return SqlUnitOfWork(session_factory())


def session_store(session_id: str) -> JsonSessionStore:
    if not _SESSION_ID.fullmatch(session_id):
        raise ValidationError(f"Invalid session ID '{session_id}'")
    return JsonSessionStore(_settings.session_dir / f"{session_id}.json")


def cart_repository() -> SessionCartRepository:
    return SessionCartRepository(session_store)
