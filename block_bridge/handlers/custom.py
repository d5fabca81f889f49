"""Handlers for site-specific custom blocks."""

from __future__ import annotations

from block_bridge.models import Block, RenderNode

from .base import HandlerContext, build_node
from .helpers import as_bool, as_number, as_str, as_token, is_media_id

FILLED_STAR = "★"
EMPTY_STAR = "☆"
STAR_COUNT = 5


def star_display(rating: float | int) -> str:
    """Five glyphs, filled while the 1-indexed position is within ``rating``."""
    return "".join(FILLED_STAR if position <= rating else EMPTY_STAR for position in range(1, STAR_COUNT + 1))


class TestimonialHandler:
    __test__ = False

    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        attrs = block.attributes
        author_name = as_str(attrs.get("authorName"))
        author_image = attrs.get("authorImage")
        rating = as_number(attrs.get("rating"), 5)
        show_rating = as_bool(attrs.get("showRating"), True)
        background_color = as_token(attrs.get("backgroundColor")) or "white"
        text_color = as_token(attrs.get("textColor")) or "black"
        border_style = as_token(attrs.get("borderStyle")) or "solid"

        classes = [
            "wp-block-testimonial",
            f"has-{background_color}-background",
            f"has-{text_color}-color",
            f"border-{border_style}",
        ]

        image: dict[str, str] = {}
        if is_media_id(author_image):
            image = {
                "url": context.media.attachment_url(author_image) or "",
                "alt": context.media.alt_text(author_image) or "",
            }
        elif as_str(author_image):
            image = {"url": as_str(author_image), "alt": author_name}

        node = build_node(
            block,
            kind="custom_testimonial",
            classes=classes,
            data={
                "testimonial_text": as_str(attrs.get("testimonialText")),
                "author_name": author_name,
                "author_title": as_str(attrs.get("authorTitle")),
                "author_image": image,
                "rating": rating,
                "star_display": star_display(rating) if show_rating else "",
                "show_rating": show_rating,
                "has_author_image": bool(image),
            },
        )
        return node.model_copy(update={"data": {**node.data, "css_classes": " ".join(node.classes)}})


__all__ = ["EMPTY_STAR", "FILLED_STAR", "STAR_COUNT", "TestimonialHandler", "star_display"]
