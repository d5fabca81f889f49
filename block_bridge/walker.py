"""Recursive application of the handler registry to a block tree."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from block_bridge.config import DEFAULT_MAX_DEPTH
from block_bridge.errors import ContentValidationError
from block_bridge.handlers import HandlerContext
from block_bridge.models import Block, RenderNode
from block_bridge.registry import HandlerRegistry

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame:
    block: Block
    node: RenderNode
    depth: int
    next_child: int = 0
    children: list[RenderNode] = field(default_factory=list)


class BlockWalker:
    """Produce a render tree isomorphic to the input block tree.

    Nodes are dispatched in pre-order (parent before children, children left
    to right). Traversal uses an explicit stack so nesting deeper than
    ``max_depth`` raises ``ContentValidationError`` instead of exhausting the
    interpreter stack.
    """

    def __init__(
        self,
        registry: HandlerRegistry | None = None,
        *,
        context: HandlerContext | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1.")
        self._registry = registry or HandlerRegistry()
        self._context = context or HandlerContext()
        self._max_depth = max_depth

    @property
    def registry(self) -> HandlerRegistry:
        return self._registry

    def walk(self, block: Block) -> RenderNode:
        stack = [self._enter(block, depth=1)]
        while True:
            frame = stack[-1]
            if frame.next_child < len(frame.block.children):
                child = frame.block.children[frame.next_child]
                frame.next_child += 1
                stack.append(self._enter(child, depth=frame.depth + 1))
                continue

            stack.pop()
            node = frame.node.model_copy(
                update={
                    "children": tuple(frame.children),
                    "children_count": len(frame.children),
                    "has_children": bool(frame.children),
                }
            )
            if not stack:
                return node
            stack[-1].children.append(node)

    def walk_all(self, blocks: Iterable[Block]) -> list[RenderNode]:
        return [self.walk(block) for block in blocks]

    def _enter(self, block: Block, *, depth: int) -> _Frame:
        if depth > self._max_depth:
            logger.warning("Block tree exceeds max depth %d at %r", self._max_depth, block.type)
            raise ContentValidationError(
                f"Block nesting exceeds the maximum depth of {self._max_depth}.",
                data={"block_name": block.type, "max_depth": self._max_depth},
            )
        return _Frame(block=block, node=self._registry.dispatch(block, context=self._context), depth=depth)


__all__ = ["BlockWalker"]
