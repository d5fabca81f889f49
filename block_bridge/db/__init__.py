"""Database helpers for the SQL-backed content source."""

from .engine import IN_MEMORY_URL, create_engine, create_session_factory
from .schema import Base, DbPost, create_all

__all__ = ["Base", "IN_MEMORY_URL", "DbPost", "create_all", "create_engine", "create_session_factory"]
