"""Handlers for oEmbed-backed blocks."""

from __future__ import annotations

import re
from collections.abc import Callable

from block_bridge.models import Block, RenderNode

from .base import HandlerContext, build_node
from .helpers import align_classes, as_bool, as_str, as_token, element_text, is_external_link

_YOUTUBE_ID = re.compile(r"(?:youtube\.com/(?:watch\?(?:.*&)?v=|embed/|shorts/)|youtu\.be/)([\w-]{11})")
_TWEET_ID = re.compile(r"(?:twitter|x)\.com/[^/]+/status(?:es)?/(\d+)")


def youtube_video_id(url: str) -> str | None:
    match = _YOUTUBE_ID.search(url or "")
    return match.group(1) if match else None


def tweet_id(url: str) -> str | None:
    match = _TWEET_ID.search(url or "")
    return match.group(1) if match else None


_ID_EXTRACTORS: dict[str, Callable[[str], str | None]] = {
    "youtube": youtube_video_id,
    "twitter": tweet_id,
}


class EmbedHandler:
    """Generic embed; subclasses pin the provider for legacy ``core-embed/*`` types."""

    kind = "embed"
    provider: str | None = None
    embed_type: str | None = None

    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        url = as_str(attrs.get("url"))
        provider = self.provider or as_token(attrs.get("providerNameSlug"))
        embed_type = self.embed_type or as_token(attrs.get("type"))

        classes = ["wp-block-embed", *align_classes(attrs.get("align"))]
        if embed_type:
            classes.append(f"is-type-{embed_type}")
        if provider:
            classes.extend([f"is-provider-{provider}", f"wp-block-embed-{provider}"])

        extractor = _ID_EXTRACTORS.get(provider or "")
        return build_node(
            block,
            kind=self.kind,
            classes=classes,
            data=self._data(url, provider, embed_type, extractor, block, context),
        )

    def _data(self, url, provider, embed_type, extractor, block: Block, context: HandlerContext) -> dict:
        attrs = block.attributes
        return {
            "url": url,
            "provider": provider,
            "type": embed_type,
            "responsive": as_bool(attrs.get("responsive"), True),
            "caption": element_text(block.raw_content, "figcaption"),
            "is_external": is_external_link(url, context.site_url),
            "embed_id": extractor(url) if extractor else None,
        }


class YouTubeHandler(EmbedHandler):
    kind = "youtube"
    provider = "youtube"
    embed_type = "video"

    def _data(self, url, provider, embed_type, extractor, block: Block, context: HandlerContext) -> dict:
        data = super()._data(url, provider, embed_type, extractor, block, context)
        video_id = data["embed_id"]
        data["video_id"] = video_id
        data["embed_url"] = f"https://www.youtube.com/embed/{video_id}" if video_id else ""
        return data


class TwitterHandler(EmbedHandler):
    kind = "twitter"
    provider = "twitter"
    embed_type = "rich"

    def _data(self, url, provider, embed_type, extractor, block: Block, context: HandlerContext) -> dict:
        data = super()._data(url, provider, embed_type, extractor, block, context)
        data["tweet_id"] = data["embed_id"]
        return data


__all__ = ["EmbedHandler", "TwitterHandler", "YouTubeHandler", "tweet_id", "youtube_video_id"]
