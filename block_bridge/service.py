"""Payload builders for the block content API surface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from block_bridge.assets import AssetAggregator
from block_bridge.collaborators import ContentSource, ThemeStyleProvider, TypeSchemaProvider
from block_bridge.errors import PostNotFoundError
from block_bridge.models import AssetBundle, GlobalStyleContext, Post, RenderNode
from block_bridge.walker import BlockWalker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderedDocument:
    post: Post
    nodes: tuple[RenderNode, ...]
    global_styles: GlobalStyleContext
    assets: AssetBundle


class BlockContentService:
    """Coordinates fetch, walk and aggregation for one content item per call."""

    def __init__(
        self,
        source: ContentSource,
        *,
        walker: BlockWalker | None = None,
        theme: ThemeStyleProvider | None = None,
        schemas: TypeSchemaProvider | None = None,
        aggregator: AssetAggregator | None = None,
    ):
        self._source = source
        self._walker = walker or BlockWalker()
        self._theme = theme
        self._schemas = schemas
        self._aggregator = aggregator or AssetAggregator(schemas=schemas)

    # ------------------------------------------------------------------ Queries
    def render_document(self, post_id: int | str) -> RenderedDocument:
        """Fetch and transform a post; raises before walking if it is absent."""
        post = self._require_post(post_id)
        nodes = tuple(self._walker.walk_all(post.blocks))
        global_styles = self._global_styles()
        assets = self._aggregator.aggregate(nodes, global_styles)
        logger.debug("Rendered post %s with %d top-level blocks", post.id, len(nodes))
        return RenderedDocument(post=post, nodes=nodes, global_styles=global_styles, assets=assets)

    def get_block_content(self, post_id: int | str) -> dict[str, Any]:
        document = self.render_document(post_id)
        return {
            "post_id": document.post.id,
            "post_title": document.post.title,
            "blocks": [node.to_wire() for node in document.nodes],
            "global_styles": {
                "theme_json": document.global_styles.base_stylesheet_text,
                "css_variables": dict(document.global_styles.css_variables),
            },
            "scripts": [script.to_wire() for script in document.assets.scripts],
        }

    def get_block_types(self) -> dict[str, dict[str, Any]]:
        if self._schemas is None:
            return {}
        return {schema.name: schema.to_wire() for schema in self._schemas.all()}

    def get_block_assets(self, post_id: int | str) -> dict[str, Any]:
        return self.render_document(post_id).assets.to_wire()

    # ----------------------------------------------------------------- Helpers
    def _require_post(self, post_id: int | str) -> Post:
        normalized = _normalise_post_id(post_id)
        if normalized is None:
            raise PostNotFoundError(post_id)
        post = self._source.get_post(normalized)
        if post is None:
            raise PostNotFoundError(normalized)
        return post

    def _global_styles(self) -> GlobalStyleContext:
        return self._theme.global_styles() if self._theme is not None else GlobalStyleContext()


def _normalise_post_id(post_id: int | str) -> int | None:
    if isinstance(post_id, bool):
        return None
    if isinstance(post_id, int):
        return post_id
    if isinstance(post_id, str) and post_id.strip().isdecimal():
        try:
            return int(post_id)
        except ValueError:
            # Beyond the interpreter's integer string limit.
            return None
    return None


__all__ = ["BlockContentService", "RenderedDocument"]
