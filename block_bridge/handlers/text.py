"""Handlers for text blocks (paragraph, heading, list, quote, code, ...)."""

from __future__ import annotations

import re

from block_bridge.models import Block, RenderNode

from .base import HandlerContext, build_node
from .helpers import (
    PARAGRAPH_ALLOWED_TAGS,
    as_bool,
    as_int,
    as_str,
    as_token,
    custom_styles,
    has_text_formatting,
    list_items,
    preset_classes,
    strip_tags,
    text_align_classes,
    text_alignment,
    text_without,
)

_LANGUAGE_CLASS = re.compile(r"(?:^|\s)lang(?:uage)?-([\w+-]+)")


class ParagraphHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        align = text_alignment(attrs)
        drop_cap = as_bool(attrs.get("dropCap"), False)

        classes = ["wp-block-paragraph", *preset_classes(attrs), *text_align_classes(align)]
        if drop_cap:
            classes.append("has-drop-cap")

        return build_node(
            block,
            kind="paragraph",
            classes=classes,
            inline_styles=custom_styles(attrs),
            data={
                "content": strip_tags(block.raw_content, PARAGRAPH_ALLOWED_TAGS),
                "has_formatting": has_text_formatting(block.raw_content),
                "alignment": align,
                "drop_cap": drop_cap,
            },
        )


class HeadingHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        level = as_int(attrs.get("level"), 2)
        align = text_alignment(attrs)
        anchor = as_token(attrs.get("anchor"))

        classes = ["wp-block-heading", *preset_classes(attrs), *text_align_classes(align)]
        return build_node(
            block,
            kind="heading",
            classes=classes,
            inline_styles=custom_styles(attrs),
            data={
                "text": strip_tags(block.raw_content).strip(),
                "level": level,
                "anchor": anchor,
                "alignment": align,
            },
        )


class ListHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        ordered = as_bool(attrs.get("ordered"), False)
        start = as_int(attrs.get("start"), None)
        reversed_ = as_bool(attrs.get("reversed"), False)
        items = list_items(block.raw_content)

        return build_node(
            block,
            kind="list",
            classes=["wp-block-list", *preset_classes(attrs)],
            inline_styles=custom_styles(attrs),
            data={
                "ordered": ordered,
                "tag": "ol" if ordered else "ul",
                "start": start,
                "reversed": reversed_,
                "items": items,
                "item_count": len(items) or len(block.children),
            },
        )


class QuoteHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        align = text_alignment(attrs)
        citation = strip_tags(as_str(attrs.get("citation"))).strip()

        return build_node(
            block,
            kind="quote",
            classes=["wp-block-quote", *preset_classes(attrs), *text_align_classes(align)],
            inline_styles=custom_styles(attrs),
            data={
                "text": text_without(block.raw_content, "cite"),
                "citation": citation,
                "alignment": align,
            },
        )


class CodeHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        language = as_token(attrs.get("language"))
        if not language:
            match = _LANGUAGE_CLASS.search(as_str(attrs.get("className")))
            language = match.group(1) if match else None

        return build_node(
            block,
            kind="code",
            classes=["wp-block-code", *preset_classes(attrs)],
            inline_styles=custom_styles(attrs),
            data={"code": strip_tags(block.raw_content), "language": language},
        )


class PreformattedHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        return build_node(
            block,
            kind="preformatted",
            classes=["wp-block-preformatted", *preset_classes(attrs)],
            inline_styles=custom_styles(attrs),
            data={"text": strip_tags(block.raw_content)},
        )


class VerseHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        align = text_alignment(attrs)
        return build_node(
            block,
            kind="verse",
            classes=["wp-block-verse", *preset_classes(attrs), *text_align_classes(align)],
            inline_styles=custom_styles(attrs),
            data={"text": strip_tags(block.raw_content), "alignment": align},
        )


__all__ = [
    "CodeHandler",
    "HeadingHandler",
    "ListHandler",
    "ParagraphHandler",
    "PreformattedHandler",
    "QuoteHandler",
    "VerseHandler",
]
