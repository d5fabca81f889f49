"""Handlers for links, navigation and data-bearing widgets."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from block_bridge.models import Block, RenderNode

from .base import HandlerContext, build_node
from .helpers import (
    align_classes,
    as_bool,
    as_int,
    as_sequence,
    as_str,
    as_token,
    custom_styles,
    element_text,
    is_external_link,
    nested,
    preset_classes,
    strip_tags,
    table_sections,
    with_unit,
)


class ButtonHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        url = as_str(attrs.get("url"))
        text = as_str(attrs.get("text")) or strip_tags(block.raw_content).strip()
        width = as_token(attrs.get("width"))
        border_radius = attrs.get("borderRadius")
        if border_radius is None:
            border_radius = nested(attrs, "style", "border", "radius")

        classes = ["wp-block-button"]
        if width:
            classes.append(f"is-style-{width}")
        button_classes = ["wp-block-button__link", *preset_classes(attrs, font_size=False)]

        inline_styles = custom_styles(attrs, typography=False)
        radius = with_unit(border_radius)
        if radius:
            inline_styles.append(("border-radius", radius))

        return build_node(
            block,
            kind="button",
            classes=classes,
            inline_styles=inline_styles,
            data={
                "text": text,
                "url": url,
                "target": as_str(attrs.get("linkTarget")) or None,
                "rel": as_str(attrs.get("rel")) or None,
                "placeholder": as_str(attrs.get("placeholder")),
                "button_classes": button_classes,
                "is_external": is_external_link(url, context.site_url),
                "has_custom_styling": bool(inline_styles),
            },
        )


class ButtonsHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        justification = as_token(nested(attrs, "layout", "justifyContent")) or as_token(
            attrs.get("contentJustification")
        )
        orientation = as_token(nested(attrs, "layout", "orientation")) or "horizontal"

        classes = ["wp-block-buttons", *align_classes(attrs.get("align"))]
        if justification:
            classes.append(f"is-content-justification-{justification}")
        if orientation == "vertical":
            classes.append("is-vertical")

        return build_node(
            block,
            kind="buttons",
            classes=classes,
            data={
                "justification": justification,
                "orientation": orientation,
                "button_count": len(block.children),
            },
        )


class SocialLinksHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        icon_color = as_token(attrs.get("iconColor"))
        icon_background = as_token(attrs.get("iconBackgroundColor"))
        size = as_token(attrs.get("size"))

        classes = ["wp-block-social-links", *align_classes(attrs.get("align"))]
        if icon_color:
            classes.append("has-icon-color")
        if icon_background:
            classes.append("has-icon-background-color")
        if size:
            classes.append(size)

        services = [
            service
            for service in (as_token(child.attributes.get("service")) for child in block.children)
            if service
        ]
        return build_node(
            block,
            kind="social-links",
            classes=classes,
            data={
                "icon_color": icon_color or as_token(attrs.get("customIconColor")),
                "icon_background_color": icon_background or as_token(attrs.get("customIconBackgroundColor")),
                "open_in_new_tab": as_bool(attrs.get("openInNewTab"), False),
                "show_labels": as_bool(attrs.get("showLabels"), False),
                "size": size,
                "services": services,
                "link_count": len(block.children),
            },
        )


class NavigationHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        overlay_menu = as_token(attrs.get("overlayMenu")) or "mobile"
        orientation = as_token(nested(attrs, "layout", "orientation")) or "horizontal"

        classes = ["wp-block-navigation", *preset_classes(attrs)]
        if orientation == "vertical":
            classes.append("is-vertical")
        if overlay_menu != "never":
            classes.append("is-responsive")

        return build_node(
            block,
            kind="navigation",
            classes=classes,
            inline_styles=custom_styles(attrs),
            data={
                "ref": as_int(attrs.get("ref"), None),
                "overlay_menu": overlay_menu,
                "orientation": orientation,
                "open_submenus_on_click": as_bool(attrs.get("openSubmenusOnClick"), False),
                "show_submenu_icon": as_bool(attrs.get("showSubmenuIcon"), True),
                "item_count": len(block.children),
            },
        )


class SearchHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        position = as_token(attrs.get("buttonPosition")) or "button-outside"
        use_icon = as_bool(attrs.get("buttonUseIcon"), False)
        width = with_unit(attrs.get("width"), as_token(attrs.get("widthUnit")) or "%")

        classes = ["wp-block-search", f"wp-block-search__{position}", *align_classes(attrs.get("align"))]
        if position != "no-button":
            classes.append("wp-block-search__icon-button" if use_icon else "wp-block-search__text-button")

        return build_node(
            block,
            kind="search",
            classes=classes,
            inline_styles=[("width", width)] if width else [],
            data={
                "label": as_str(attrs.get("label"), "Search"),
                "show_label": as_bool(attrs.get("showLabel"), True),
                "placeholder": as_str(attrs.get("placeholder")),
                "button_text": as_str(attrs.get("buttonText"), "Search"),
                "button_position": position,
                "button_use_icon": use_icon,
                "width": width,
            },
        )


class CalendarHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        return build_node(
            block,
            kind="calendar",
            classes=["wp-block-calendar", *align_classes(attrs.get("align")), *preset_classes(attrs)],
            inline_styles=custom_styles(attrs),
            data={
                "month": as_int(attrs.get("month"), None),
                "year": as_int(attrs.get("year"), None),
            },
        )


class TableHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        fixed = as_bool(attrs.get("hasFixedLayout"), False)
        sections = table_sections(block.raw_content)
        for key in ("head", "body", "foot"):
            rows = _attribute_rows(attrs.get(key))
            if rows:
                sections[key] = rows

        classes = ["wp-block-table", *align_classes(attrs.get("align")), *preset_classes(attrs)]
        if fixed:
            classes.append("has-fixed-layout")

        return build_node(
            block,
            kind="table",
            classes=classes,
            inline_styles=custom_styles(attrs),
            data={
                "head": sections["head"],
                "body": sections["body"],
                "foot": sections["foot"],
                "has_fixed_layout": fixed,
                "caption": as_str(attrs.get("caption")) or element_text(block.raw_content, "figcaption"),
                "row_count": len(sections["body"]),
            },
        )


def _attribute_rows(rows: Any) -> list[list[str]]:
    parsed: list[list[str]] = []
    for row in as_sequence(rows):
        cells = as_sequence(row.get("cells")) if isinstance(row, Mapping) else ()
        if not cells:
            continue
        parsed.append([
            strip_tags(as_str(cell.get("content"))) if isinstance(cell, Mapping) else ""
            for cell in cells
        ])
    return parsed


__all__ = [
    "ButtonHandler",
    "ButtonsHandler",
    "CalendarHandler",
    "NavigationHandler",
    "SearchHandler",
    "SocialLinksHandler",
    "TableHandler",
]
