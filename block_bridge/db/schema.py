"""SQLAlchemy declarative schema for stored posts."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Integer, String
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.sqltypes import JSON

JSON_TYPE = JSON().with_variant(JSONB, "postgresql")


class Base(DeclarativeBase):
    pass


class DbPost(Base):
    """A content item with its block tree stored in wire format."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    title: Mapped[str] = mapped_column(String(255), default="", nullable=False)
    blocks: Mapped[list[dict[str, Any]]] = mapped_column(JSON_TYPE, default=list, nullable=False)


def create_all(engine: Engine) -> None:
    Base.metadata.create_all(engine)


__all__ = ["Base", "DbPost", "JSON_TYPE", "create_all"]
