from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

_engine: Engine | None = None


def configure_db(db_url: str) -> Engine:
    global _engine
    if _engine is not None:
        _engine.dispose()
    # sqlite: sessions hop between threadpool workers, and concurrent writers
    # should wait on the file lock rather than fail immediately
    connect_args = {"check_same_thread": False, "timeout": 30} if db_url.startswith("sqlite") else {}
    _engine = create_engine(db_url, echo=False, connect_args=connect_args)
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("DB not configured. Call configure_db(db_url) first.")
    return _engine


def init_db() -> None:
    from . import models  # noqa: F401  (registers the player table)

    SQLModel.metadata.create_all(get_engine())


def get_session() -> Iterator[Session]:
    """FastAPI dependency: one session per request."""
    with Session(get_engine()) as s:
        yield s


@contextmanager
def session_scope() -> Iterator[Session]:
    with Session(get_engine()) as s:
        yield s
