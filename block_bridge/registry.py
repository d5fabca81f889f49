"""Block-type to handler dispatch table."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from block_bridge.handlers import DEFAULT_HANDLERS, BlockHandler, GenericHandler, HandlerContext
from block_bridge.models import Block, RenderNode

logger = logging.getLogger(__name__)

HandlerFn = Callable[[Block, HandlerContext], RenderNode]


class _FunctionHandler:
    def __init__(self, fn: HandlerFn):
        self._fn = fn

    def extract(self, block: Block, *, context: HandlerContext) -> RenderNode:
        return self._fn(block, context)


def _default_handlers() -> dict[str, BlockHandler]:
    return dict(DEFAULT_HANDLERS)


@dataclass(slots=True)
class HandlerRegistry:
    """One handler per block type; unknown types go to the fallback handler."""

    _handlers: dict[str, BlockHandler] = field(default_factory=_default_handlers)
    _fallback_handler: BlockHandler = field(default_factory=GenericHandler)

    @classmethod
    def empty(cls) -> HandlerRegistry:
        return cls(_handlers={})

    def register(self, block_type: str, handler: BlockHandler | HandlerFn) -> None:
        """Store ``handler`` for ``block_type``, replacing any earlier registration."""
        if not hasattr(handler, "extract"):
            handler = _FunctionHandler(handler)
        self._handlers[block_type] = handler

    def unregister(self, block_type: str) -> None:
        self._handlers.pop(block_type, None)

    def handler_for(self, block_type: str) -> BlockHandler:
        return self._handlers.get(block_type, self._fallback_handler)

    def is_registered(self, block_type: str) -> bool:
        return block_type in self._handlers

    @property
    def block_types(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, block: Block, *, context: HandlerContext | None = None) -> RenderNode:
        """Return the node for ``block`` without children attached."""
        ctx = context or HandlerContext()
        handler = self._handlers.get(block.type)
        if handler is None:
            logger.debug("No handler for %r; using fallback", block.type)
            handler = self._fallback_handler
        node = handler.extract(block, context=ctx)
        if node.source_type != block.type:
            node = node.model_copy(update={"source_type": block.type})
        return node


__all__ = ["HandlerFn", "HandlerRegistry"]
