"""Handlers for media blocks; these are the only ones consulting the media resolver."""

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
    element_text,
    is_external_link,
    is_media_id,
    media_sizes,
    with_unit,
)


def _first(value: Any, fallback: Any) -> Any:
    # Explicit attribute values win even when empty; only absence falls through.
    return value if value is not None else fallback


def _media_id(value: Any) -> int | str | None:
    return value if is_media_id(value) else None


def _attachment_url(context: HandlerContext, media_id: int | str | None) -> str:
    return as_str(context.media.attachment_url(media_id)) if media_id is not None else ""


class ImageHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        media = context.media
        image_id = _media_id(attrs.get("id"))
        align = as_token(attrs.get("align"))
        width = attrs.get("width")
        height = attrs.get("height")
        size_slug = as_token(attrs.get("sizeSlug")) or "large"
        href = as_str(attrs.get("href")) or None

        url = as_str(attrs.get("url")) or _attachment_url(context, image_id)
        library_alt = media.alt_text(image_id) if image_id is not None else None
        alt = as_str(_first(attrs.get("alt"), library_alt))
        caption = as_str(_first(attrs.get("caption"), element_text(block.raw_content, "figcaption")))

        inline_styles = []
        for prop, value in (("width", width), ("height", height)):
            css_value = with_unit(value)
            if css_value:
                inline_styles.append((prop, css_value))

        return build_node(
            block,
            kind="image",
            classes=["wp-block-image", *align_classes(align), f"size-{size_slug}"],
            inline_styles=inline_styles,
            data={
                "id": image_id,
                "url": url,
                "alt": alt,
                "caption": caption,
                "alignment": align,
                "width": width,
                "height": height,
                "size_slug": size_slug,
                "sizes": media_sizes(media, image_id) if image_id is not None else {},
                "has_link": bool(href),
                "link_url": href,
                "link_target": as_str(attrs.get("linkTarget")) or None,
                "link_destination": as_str(attrs.get("linkDestination")) or None,
                "link_is_external": is_external_link(href, context.site_url),
            },
        )


class GalleryHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        columns = as_int(attrs.get("columns"), 3)
        image_crop = as_bool(attrs.get("imageCrop"), True)
        align = as_token(attrs.get("align"))
        images = [
            self._normalise(entry, context)
            for entry in as_sequence(attrs.get("images"))
            if isinstance(entry, Mapping)
        ]

        classes = ["wp-block-gallery", f"columns-{columns}", *align_classes(align)]
        if image_crop:
            classes.append("is-cropped")

        return build_node(
            block,
            kind="gallery",
            classes=classes,
            data={
                "images": images,
                "columns": columns,
                "image_crop": image_crop,
                "size_slug": as_token(attrs.get("sizeSlug")) or "large",
                "link_to": as_token(attrs.get("linkTo")) or "none",
                "caption": as_str(attrs.get("caption")),
                "total_images": len(images),
            },
        )

    @staticmethod
    def _normalise(entry: Mapping[str, Any], context: HandlerContext) -> dict[str, Any]:
        media_id = _media_id(entry.get("id"))
        if media_id is None:
            return {
                "url": as_str(entry.get("url")),
                "alt": as_str(entry.get("alt")),
                "caption": as_str(entry.get("caption")),
            }
        media = context.media
        return {
            "id": media_id,
            "url": as_str(_first(entry.get("url"), media.attachment_url(media_id))),
            "alt": as_str(_first(entry.get("alt"), media.alt_text(media_id))),
            "caption": as_str(_first(entry.get("caption"), media.caption(media_id))),
            "sizes": media_sizes(media, media_id),
        }


class AudioHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        src = as_str(attrs.get("src")) or _attachment_url(context, _media_id(attrs.get("id")))
        align = as_token(attrs.get("align"))

        return build_node(
            block,
            kind="audio",
            classes=["wp-block-audio", *align_classes(align)],
            data={
                "src": src,
                "autoplay": as_bool(attrs.get("autoplay"), False),
                "loop": as_bool(attrs.get("loop"), False),
                "preload": as_token(attrs.get("preload")),
                "caption": element_text(block.raw_content, "figcaption"),
                "alignment": align,
            },
        )


class VideoHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        src = as_str(attrs.get("src")) or _attachment_url(context, _media_id(attrs.get("id")))
        align = as_token(attrs.get("align"))

        return build_node(
            block,
            kind="video",
            classes=["wp-block-video", *align_classes(align)],
            data={
                "src": src,
                "poster": as_str(attrs.get("poster")),
                "autoplay": as_bool(attrs.get("autoplay"), False),
                "controls": as_bool(attrs.get("controls"), True),
                "loop": as_bool(attrs.get("loop"), False),
                "muted": as_bool(attrs.get("muted"), False),
                "plays_inline": as_bool(attrs.get("playsInline"), False),
                "preload": as_token(attrs.get("preload")) or "metadata",
                "caption": element_text(block.raw_content, "figcaption"),
                "alignment": align,
            },
        )


class FileHandler:
    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        href = as_str(attrs.get("href")) or _attachment_url(context, _media_id(attrs.get("id")))
        align = as_token(attrs.get("align"))
        show_button = as_bool(attrs.get("showDownloadButton"), True)

        return build_node(
            block,
            kind="file",
            classes=["wp-block-file", *align_classes(align)],
            data={
                "href": href,
                "file_name": as_str(attrs.get("fileName")),
                "text_link_href": as_str(attrs.get("textLinkHref"), href),
                "text_link_target": as_str(attrs.get("textLinkTarget")) or None,
                "show_download_button": show_button,
                "download_button_text": as_str(attrs.get("downloadButtonText"), "Download"),
                "display_preview": as_bool(attrs.get("displayPreview"), False),
                "is_external": is_external_link(href, context.site_url),
                "alignment": align,
            },
        )


__all__ = ["AudioHandler", "FileHandler", "GalleryHandler", "ImageHandler", "VideoHandler"]
