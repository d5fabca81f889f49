"""Fallback handler for block types without a dedicated handler."""

from __future__ import annotations

import copy

from block_bridge.models import Block, RenderNode

from .base import HandlerContext, build_node
from .helpers import align_classes, custom_class_tokens


class GenericHandler:
    """Preserve an unknown block verbatim; never raises."""

    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        block_name = block.type or "unknown"
        classes = [
            "wp-block",
            block_name.replace("/", "-"),
            *align_classes(attrs.get("align")),
            *custom_class_tokens(attrs),
        ]
        return build_node(
            block,
            kind="generic",
            classes=classes,
            template_id="generic",
            include_custom_class=False,
            data={
                "block_name": block_name,
                "raw_content": block.raw_content,
                "attributes": copy.deepcopy(dict(attrs)),
                "anchor": attrs.get("anchor") if isinstance(attrs.get("anchor"), str) else None,
                "has_inner_blocks": bool(block.children),
            },
        )


__all__ = ["GenericHandler"]
