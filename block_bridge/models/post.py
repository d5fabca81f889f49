"""Content item wrapper delivered by a content source."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .block import Block, parse_blocks


class Post(BaseModel):
    id: int
    title: str = ""
    blocks: tuple[Block, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_wire(cls, post_id: int, title: str, blocks: list[Mapping[str, Any]]) -> Post:
        return cls(id=post_id, title=title, blocks=parse_blocks(blocks))


__all__ = ["Post"]
