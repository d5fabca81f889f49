"""Handler protocol and the shared node constructor."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from block_bridge.collaborators import MediaResolver
from block_bridge.models import Block, RenderNode, StylePair

from .helpers import custom_class_tokens


class NullMediaResolver:
    """Resolver used when no media backend is configured; every lookup misses."""

    def image_url(self, media_id: Any, size: str) -> str | None:
        return None

    def attachment_url(self, media_id: Any) -> str | None:
        return None

    def alt_text(self, media_id: Any) -> str | None:
        return None

    def caption(self, media_id: Any) -> str | None:
        return None


@dataclass(frozen=True, slots=True)
class HandlerContext:
    """Read-only inputs shared by every handler during one transformation."""

    site_url: str = ""
    media: MediaResolver = field(default_factory=NullMediaResolver)


class BlockHandler(Protocol):
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        ...


def template_for(kind: str) -> str:
    return f"wp_block_{kind}"


def build_node(
    block: Block,
    *,
    kind: str,
    classes: Iterable[str | None],
    data: Mapping[str, Any],
    inline_styles: Iterable[StylePair] = (),
    template_id: str | None = None,
    include_custom_class: bool = True,
) -> RenderNode:
    tokens = [token for token in classes if isinstance(token, str) and token]
    if include_custom_class:
        tokens.extend(custom_class_tokens(block.attributes))
    return RenderNode(
        kind=kind,
        raw_content=block.raw_content,
        classes=tuple(tokens),
        inline_styles=tuple(inline_styles),
        template_id=template_id or template_for(kind),
        data=dict(data),
        source_type=block.type,
    )


__all__ = ["BlockHandler", "HandlerContext", "NullMediaResolver", "build_node", "template_for"]
