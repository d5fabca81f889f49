"""Factory helpers wiring collaborators into a ready-to-use renderer."""

from __future__ import annotations

from block_bridge.assets import AssetAggregator
from block_bridge.cache import TTLCache
from block_bridge.collaborators import (
    ContentSource,
    MediaResolver,
    ScriptResolver,
    ThemeStyleProvider,
    TypeSchemaProvider,
)
from block_bridge.config import BridgeSettings
from block_bridge.db import create_all, create_engine, create_session_factory
from block_bridge.handlers import HandlerContext, NullMediaResolver
from block_bridge.integration import ContentRenderer
from block_bridge.registry import HandlerRegistry
from block_bridge.repositories import PostRepository
from block_bridge.service import BlockContentService
from block_bridge.walker import BlockWalker


def create_content_service(
    settings: BridgeSettings | None = None,
    *,
    source: ContentSource | None = None,
    registry: HandlerRegistry | None = None,
    media: MediaResolver | None = None,
    theme: ThemeStyleProvider | None = None,
    schemas: TypeSchemaProvider | None = None,
    scripts: ScriptResolver | None = None,
) -> BlockContentService:
    """Build a BlockContentService; without ``source`` posts come from the database."""
    cfg = settings or BridgeSettings()
    if source is None:
        engine = create_engine(cfg.database_url)
        create_all(engine)
        source = PostRepository(create_session_factory(engine))

    context = HandlerContext(site_url=cfg.site_url or "", media=media or NullMediaResolver())
    walker = BlockWalker(registry, context=context, max_depth=cfg.max_depth)
    aggregator = AssetAggregator(schemas=schemas, scripts=scripts)
    return BlockContentService(source, walker=walker, theme=theme, schemas=schemas, aggregator=aggregator)


def create_content_renderer(
    settings: BridgeSettings | None = None,
    **collaborators,
) -> ContentRenderer:
    """Build a ContentRenderer with a TTL cache sized from ``settings.cache_ttl``."""
    cfg = settings or BridgeSettings()
    service = create_content_service(cfg, **collaborators)
    return ContentRenderer(service, cache=TTLCache(cfg.cache_ttl))


__all__ = ["create_content_renderer", "create_content_service"]
