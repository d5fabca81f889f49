"""Block type schema metadata."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BlockTypeSchema(BaseModel):
    """Read-only description of a registered block type."""

    name: str
    title: str | None = None
    description: str = ""
    attributes: dict[str, Any] = Field(default_factory=dict)
    supports: dict[str, Any] = Field(default_factory=dict)
    category: str = "common"
    keywords: tuple[str, ...] = Field(default_factory=tuple)
    view_script: str | None = None
    view_script_module: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def script_handles(self) -> list[str]:
        return [handle for handle in (self.view_script, self.view_script_module) if handle]

    def to_wire(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title or self.name,
            "description": self.description,
            "attributes": self.attributes,
            "supports": self.supports,
            "category": self.category,
            "keywords": list(self.keywords),
        }


__all__ = ["BlockTypeSchema"]
