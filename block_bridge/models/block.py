"""Input block model and wire-format parsing."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Block(BaseModel):
    """Immutable content block as delivered by the content source."""

    type: str
    attributes: dict[str, Any] = Field(default_factory=dict)
    raw_content: str = ""
    children: tuple[Block, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> Block:
        """Build a block from the ``blockName``/``attrs``/``innerHTML`` shape."""
        return cls(
            type=payload.get("blockName") or "",
            attributes=dict(payload.get("attrs") or {}),
            raw_content=payload.get("innerHTML") or "",
            children=parse_blocks(payload.get("innerBlocks") or ()),
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "blockName": self.type,
            "attrs": dict(self.attributes),
            "innerHTML": self.raw_content,
            "innerBlocks": [child.to_wire() for child in self.children],
        }


def parse_blocks(payloads: Iterable[Mapping[str, Any]]) -> tuple[Block, ...]:
    """Convert wire payloads to blocks, skipping nameless whitespace nodes."""
    return tuple(
        Block.from_wire(payload)
        for payload in payloads
        if payload.get("blockName")
    )


def count_blocks(blocks: Iterable[Block]) -> int:
    total = 0
    stack = list(blocks)
    while stack:
        block = stack.pop()
        total += 1
        stack.extend(block.children)
    return total


__all__ = ["Block", "count_blocks", "parse_blocks"]
