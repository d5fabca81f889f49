"""Host-side entry point: fetch, cache and render a post as an HTML fragment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape

from block_bridge.cache import TTLCache
from block_bridge.errors import ContentFetchError, ContentValidationError
from block_bridge.html import (
    FETCH_FAILURE_MESSAGE,
    render_blocks_html,
    render_error_message,
    render_scripts_html,
    render_styles_html,
)
from block_bridge.service import BlockContentService, RenderedDocument

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RenderOptions:
    include_styles: bool = True
    include_scripts: bool = True
    cache: bool = True
    template_wrapper: str = "wp_content_wrapper"


class ContentRenderer:
    """Render a content item for the host page, memoising by content id."""

    def __init__(self, service: BlockContentService, *, cache: TTLCache[RenderedDocument] | None = None):
        self._service = service
        self._cache = cache

    def render_content(self, post_id: int | str, options: RenderOptions | None = None) -> str:
        """Return the complete HTML fragment, or a single fallback message on failure."""
        opts = options or RenderOptions()
        try:
            document = self._document(post_id, use_cache=opts.cache)
        except (ContentFetchError, ContentValidationError) as exc:
            logger.warning("Unable to render post %s: %s (%s)", post_id, exc.message, exc.code)
            return render_error_message(FETCH_FAILURE_MESSAGE)

        parts = []
        if opts.include_styles:
            parts.append(render_styles_html(document.assets))
        if opts.include_scripts:
            parts.append(render_scripts_html(document.assets.scripts))
        parts.append(f'<div class="{escape(opts.template_wrapper)}">')
        parts.append(render_blocks_html(document.nodes))
        parts.append("</div>")
        return "".join(parts)

    def _document(self, post_id: int | str, *, use_cache: bool) -> RenderedDocument:
        if not use_cache or self._cache is None:
            return self._service.render_document(post_id)
        return self._cache.get_or_compute(str(post_id), lambda: self._service.render_document(post_id))


__all__ = ["ContentRenderer", "RenderOptions"]
