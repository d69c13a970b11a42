"""Engine and session factory construction."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.infrastructure.persistence.tables import Base


def create_session_factory(database_url: str, echo: bool = False) -> sessionmaker:
    url = make_url(database_url)
    kwargs: dict = {"echo": echo}

    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every session sees an empty database.
            kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, **kwargs)
    return sessionmaker(engine, expire_on_commit=False)


def create_tables(session_factory: sessionmaker) -> None:
    Base.metadata.create_all(bind=session_factory.kw["bind"])


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
