"""Block tree to host render-model bridge."""

__version__ = "0.1.0"

from .assets import AssetAggregator  # noqa: E402
from .errors import (  # noqa: E402
    BlockBridgeError,
    ContentFetchError,
    ContentValidationError,
    PostNotFoundError,
)
from .factory import create_content_renderer, create_content_service  # noqa: E402
from .handlers import HandlerContext  # noqa: E402
from .models import AssetBundle, Block, GlobalStyleContext, RenderNode, ScriptRef  # noqa: E402
from .registry import HandlerRegistry  # noqa: E402
from .walker import BlockWalker  # noqa: E402

__all__ = [
    "AssetAggregator",
    "AssetBundle",
    "Block",
    "BlockBridgeError",
    "BlockWalker",
    "ContentFetchError",
    "ContentValidationError",
    "GlobalStyleContext",
    "HandlerContext",
    "HandlerRegistry",
    "PostNotFoundError",
    "RenderNode",
    "ScriptRef",
    "__version__",
    "create_content_renderer",
    "create_content_service",
]
