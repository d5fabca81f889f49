"""Handlers for layout containers and decorative blocks."""

from __future__ import annotations

from collections.abc import Mapping

from block_bridge.models import Block, RenderNode

from .base import HandlerContext, build_node
from .helpers import (
    align_classes,
    as_bool,
    as_number,
    as_str,
    as_token,
    custom_class_tokens,
    is_media_id,
    custom_styles,
    nested,
    preset_classes,
    spacing_styles,
    with_unit,
)


class GroupHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        align = as_token(attrs.get("align"))
        layout_type = as_token(nested(attrs, "layout", "type")) or "default"
        layout_class = "flow" if layout_type == "default" else layout_type

        return build_node(
            block,
            kind="group",
            classes=[
                "wp-block-group",
                *align_classes(align),
                *preset_classes(attrs),
                f"is-layout-{layout_class}",
            ],
            inline_styles=[*custom_styles(attrs), *spacing_styles(attrs)],
            data={
                "tag_name": as_token(attrs.get("tagName")) or "div",
                "layout": layout_type,
                "alignment": align,
                "child_count": len(block.children),
            },
        )


class ColumnsHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        stacked = as_bool(attrs.get("isStackedOnMobile"), True)
        vertical = as_token(attrs.get("verticalAlignment"))

        classes = ["wp-block-columns", *align_classes(attrs.get("align")), *preset_classes(attrs)]
        if stacked:
            classes.append("is-stacked-on-mobile")
        if vertical:
            classes.append(f"are-vertically-aligned-{vertical}")

        return build_node(
            block,
            kind="columns",
            classes=classes,
            inline_styles=[*custom_styles(attrs), *spacing_styles(attrs)],
            data={
                "columns_count": len(block.children),
                "is_stacked_on_mobile": stacked,
                "vertical_alignment": vertical,
            },
        )


class ColumnHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        width = with_unit(attrs.get("width"), "%")
        vertical = as_token(attrs.get("verticalAlignment"))

        classes = ["wp-block-column", *preset_classes(attrs)]
        if vertical:
            classes.append(f"is-vertically-aligned-{vertical}")
        styles = [("flex-basis", width)] if width else []

        return build_node(
            block,
            kind="column",
            classes=classes,
            inline_styles=[*styles, *custom_styles(attrs), *spacing_styles(attrs)],
            data={"width": width, "vertical_alignment": vertical},
        )


def _unit_interval(value) -> float:
    return min(max(as_number(value, 0.5), 0), 1)


class CoverHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        media_id = attrs.get("id")
        url = as_str(attrs.get("url"))
        if not url and is_media_id(media_id):
            url = as_str(context.media.attachment_url(media_id))
        background_type = as_token(attrs.get("backgroundType")) or "image"
        dim_ratio = as_number(attrs.get("dimRatio"), 50)
        has_parallax = as_bool(attrs.get("hasParallax"), False)
        is_repeated = as_bool(attrs.get("isRepeated"), False)
        is_dark = as_bool(attrs.get("isDark"), True)
        content_position = as_token(attrs.get("contentPosition"))
        overlay_color = as_token(attrs.get("overlayColor"))
        custom_overlay = as_token(attrs.get("customOverlayColor"))
        min_height = with_unit(attrs.get("minHeight"), as_token(attrs.get("minHeightUnit")) or "px")

        classes = ["wp-block-cover", *align_classes(attrs.get("align"))]
        if not is_dark:
            classes.append("is-light")
        if has_parallax:
            classes.append("has-parallax")
        if is_repeated:
            classes.append("is-repeated")
        if dim_ratio > 0:
            step = int(round(min(dim_ratio, 100) / 10) * 10)
            classes.extend(["has-background-dim", f"has-background-dim-{step}"])
        if overlay_color:
            classes.append(f"has-{overlay_color}-background-color")
        if content_position:
            classes.extend([
                "has-custom-content-position",
                f"is-position-{content_position.replace(' ', '-')}",
            ])

        styles = []
        if url and background_type == "image":
            styles.append(("background-image", f'url("{url}")'))
            focal = attrs.get("focalPoint")
            if isinstance(focal, Mapping) and "x" in focal and "y" in focal:
                x = round(_unit_interval(focal.get("x")) * 100)
                y = round(_unit_interval(focal.get("y")) * 100)
                styles.append(("background-position", f"{x}% {y}%"))
        if custom_overlay:
            styles.append(("background-color", custom_overlay))
        if min_height:
            styles.append(("min-height", min_height))
        styles.extend(spacing_styles(attrs))

        return build_node(
            block,
            kind="cover",
            classes=classes,
            inline_styles=styles,
            data={
                "url": url,
                "alt": as_str(attrs.get("alt")),
                "background_type": background_type,
                "dim_ratio": dim_ratio,
                "overlay_color": overlay_color or custom_overlay,
                "has_parallax": has_parallax,
                "is_repeated": is_repeated,
                "is_dark": is_dark,
                "min_height": min_height,
                "content_position": content_position,
                "tag_name": as_token(attrs.get("tagName")) or "div",
            },
        )


class SpacerHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        height = with_unit(attrs.get("height")) or "100px"
        width = with_unit(attrs.get("width"))

        styles = [("height", height)]
        if width:
            styles.append(("width", width))

        return build_node(
            block,
            kind="spacer",
            classes=["wp-block-spacer"],
            inline_styles=styles,
            data={"height": height, "width": width},
        )


class SeparatorHandler:
    _VARIANTS = ("wide", "dots")

    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        variant = "default"
        for token in custom_class_tokens(attrs):
            if token.startswith("is-style-") and token[len("is-style-"):] in self._VARIANTS:
                variant = token[len("is-style-"):]

        return build_node(
            block,
            kind="separator",
            classes=[
                "wp-block-separator",
                "has-alpha-channel-opacity",
                *align_classes(attrs.get("align")),
                *preset_classes(attrs, text=False, font_size=False),
            ],
            inline_styles=custom_styles(attrs, text=False, typography=False),
            data={"variant": variant, "tag_name": "hr"},
        )


__all__ = [
    "ColumnHandler",
    "ColumnsHandler",
    "CoverHandler",
    "GroupHandler",
    "SeparatorHandler",
    "SpacerHandler",
]
