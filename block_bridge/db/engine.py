"""Engine and session helpers for the post store."""

from __future__ import annotations

from sqlalchemy import create_engine as sa_create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

IN_MEMORY_URL = "sqlite+pysqlite:///:memory:"


def create_engine(database_url: str | None = None, *, echo: bool = False) -> Engine:
    """Connect to ``database_url``, or to a single in-memory SQLite database.

    The in-memory database lives on one shared connection, so every session
    created from the engine sees the same posts.
    """
    if database_url:
        return sa_create_engine(database_url, echo=echo)
    return sa_create_engine(
        IN_MEMORY_URL,
        echo=echo,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    # Posts are returned as detached pydantic models, so nothing needs refreshing after commit.
    return sessionmaker(bind=engine, expire_on_commit=False)


__all__ = ["IN_MEMORY_URL", "create_engine", "create_session_factory"]
