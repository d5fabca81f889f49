from __future__ import annotations

from collections.abc import Iterator
from typing import Callable

import pytest
from sqlalchemy.engine import Engine

from block_bridge.collaborators import MediaItem, StaticMediaResolver
from block_bridge.db.engine import create_engine
from block_bridge.db.schema import Base, create_all
from block_bridge.handlers import HandlerContext
from block_bridge.models import Block
from block_bridge.registry import HandlerRegistry
from block_bridge.repositories import PostRepository

SITE_URL = "https://mysite.com"


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Yield an in-memory SQLite engine with the schema created."""
    engine = create_engine()
    create_all(engine)
    try:
        yield engine
    finally:
        with engine.begin() as connection:
            Base.metadata.drop_all(bind=connection)


@pytest.fixture
def session_factory(engine: Engine):
    from block_bridge.db.engine import create_session_factory

    return create_session_factory(engine)


@pytest.fixture
def post_repository(session_factory) -> PostRepository:
    return PostRepository(session_factory)


@pytest.fixture
def block_factory() -> Callable[..., Block]:
    def _factory(
        block_type: str,
        attributes: dict | None = None,
        *,
        raw_content: str = "",
        children: tuple[Block, ...] | list[Block] = (),
    ) -> Block:
        return Block(
            type=block_type,
            attributes=attributes or {},
            raw_content=raw_content,
            children=tuple(children),
        )

    return _factory


@pytest.fixture
def media_resolver() -> StaticMediaResolver:
    return StaticMediaResolver(
        items={
            10: MediaItem(
                url="u1",
                alt="Alt from library",
                caption="Caption from library",
                sizes={
                    "thumbnail": "u1-150.jpg",
                    "medium": "u1-300.jpg",
                    "large": "u1-1024.jpg",
                    "full": "u1.jpg",
                },
            ),
            11: MediaItem(url="u2", sizes={"thumbnail": "u2-150.jpg"}),
        }
    )


@pytest.fixture
def context(media_resolver: StaticMediaResolver) -> HandlerContext:
    return HandlerContext(site_url=SITE_URL, media=media_resolver)


@pytest.fixture
def registry() -> HandlerRegistry:
    return HandlerRegistry()
