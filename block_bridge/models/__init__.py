"""Block and render model exports."""

from .block import Block, count_blocks, parse_blocks
from .post import Post
from .render import AssetBundle, GlobalStyleContext, RenderNode, ScriptRef, StylePair
from .schema import BlockTypeSchema

__all__ = [
    "AssetBundle",
    "Block",
    "BlockTypeSchema",
    "GlobalStyleContext",
    "Post",
    "RenderNode",
    "ScriptRef",
    "StylePair",
    "count_blocks",
    "parse_blocks",
]
