"""Per-block-type attribute extractors."""

from .base import BlockHandler, HandlerContext, NullMediaResolver, build_node, template_for
from .custom import TestimonialHandler, star_display
from .embed import EmbedHandler, TwitterHandler, YouTubeHandler
from .generic import GenericHandler
from .helpers import is_external_link, media_sizes, strip_tags
from .interactive import (
    ButtonHandler,
    ButtonsHandler,
    CalendarHandler,
    NavigationHandler,
    SearchHandler,
    SocialLinksHandler,
    TableHandler,
)
from .layout import (
    ColumnHandler,
    ColumnsHandler,
    CoverHandler,
    GroupHandler,
    SeparatorHandler,
    SpacerHandler,
)
from .media import AudioHandler, FileHandler, GalleryHandler, ImageHandler, VideoHandler
from .text import (
    CodeHandler,
    HeadingHandler,
    ListHandler,
    ParagraphHandler,
    PreformattedHandler,
    QuoteHandler,
    VerseHandler,
)

DEFAULT_HANDLERS: dict[str, BlockHandler] = {
    # Text
    "core/paragraph": ParagraphHandler(),
    "core/heading": HeadingHandler(),
    "core/list": ListHandler(),
    "core/quote": QuoteHandler(),
    "core/code": CodeHandler(),
    "core/preformatted": PreformattedHandler(),
    "core/verse": VerseHandler(),
    # Media
    "core/image": ImageHandler(),
    "core/gallery": GalleryHandler(),
    "core/audio": AudioHandler(),
    "core/video": VideoHandler(),
    "core/file": FileHandler(),
    # Layout
    "core/group": GroupHandler(),
    "core/columns": ColumnsHandler(),
    "core/column": ColumnHandler(),
    "core/cover": CoverHandler(),
    "core/spacer": SpacerHandler(),
    "core/separator": SeparatorHandler(),
    # Interactive
    "core/button": ButtonHandler(),
    "core/buttons": ButtonsHandler(),
    "core/social-links": SocialLinksHandler(),
    "core/navigation": NavigationHandler(),
    # Embeds
    "core/embed": EmbedHandler(),
    "core-embed/youtube": YouTubeHandler(),
    "core-embed/twitter": TwitterHandler(),
    # Advanced
    "core/table": TableHandler(),
    "core/calendar": CalendarHandler(),
    "core/search": SearchHandler(),
    # Custom
    "custom/testimonial": TestimonialHandler(),
}

__all__ = [
    "BlockHandler",
    "DEFAULT_HANDLERS",
    "GenericHandler",
    "HandlerContext",
    "NullMediaResolver",
    "build_node",
    "is_external_link",
    "media_sizes",
    "star_display",
    "strip_tags",
    "template_for",
]
