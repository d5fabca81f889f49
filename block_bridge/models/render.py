"""Render-model types produced by the walker and the asset aggregator."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

StylePair = tuple[str, str]


class RenderNode(BaseModel):
    """Normalised presentation of one block, isomorphic to the block tree."""

    kind: str
    raw_content: str = ""
    classes: tuple[str, ...] = Field(default_factory=tuple)
    inline_styles: tuple[StylePair, ...] = Field(default_factory=tuple)
    template_id: str
    data: dict[str, Any] = Field(default_factory=dict)
    children: tuple[RenderNode, ...] = Field(default_factory=tuple)
    source_type: str = ""
    children_count: int = 0
    has_children: bool = False

    model_config = ConfigDict(frozen=True)

    @field_validator("classes", mode="before")
    @classmethod
    def _drop_empty_classes(cls, value: Iterable[str] | None) -> tuple[str, ...]:
        if value is None:
            return ()
        return tuple(token for token in value if token)

    @property
    def style_declarations(self) -> list[str]:
        return [f"{prop}: {value}" for prop, value in self.inline_styles]

    def iter_preorder(self) -> Iterable[RenderNode]:
        stack: list[RenderNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_wire(self) -> dict[str, Any]:
        """Return the host-renderer payload for this node and its subtree."""
        payload: dict[str, Any] = {
            "type": self.kind,
            "content": self.raw_content,
            "classes": list(self.classes),
            "inline_styles": self.style_declarations,
            "xenforo_template": self.template_id,
            "xenforo_data": self.data,
            "original_block_name": self.source_type,
            "has_inner_blocks": self.has_children,
            "inner_blocks_count": self.children_count,
        }
        if self.children:
            payload["inner_blocks"] = [child.to_wire() for child in self.children]
        return payload


class ScriptRef(BaseModel):
    """A view script required by one or more rendered block types."""

    handle: str
    source_url: str = ""
    content: str | None = None
    dependencies: tuple[str, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"handle": self.handle, "src": self.source_url}
        if self.content is not None:
            payload["content"] = self.content
        payload["dependencies"] = list(self.dependencies)
        return payload


class AssetBundle(BaseModel):
    css: str = ""
    scripts: tuple[ScriptRef, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True)

    def to_wire(self) -> dict[str, Any]:
        return {"styles": self.css, "scripts": [script.to_wire() for script in self.scripts]}


class GlobalStyleContext(BaseModel):
    """Theme-level stylesheet text and CSS custom properties."""

    base_stylesheet_text: str = ""
    css_variables: dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @field_validator("css_variables", mode="before")
    @classmethod
    def _collapse_variables(cls, value: Any) -> dict[str, str]:
        # Later entries for the same name replace earlier ones.
        if value is None:
            return {}
        items = value.items() if isinstance(value, Mapping) else value
        collapsed: dict[str, str] = {}
        for name, css_value in items:
            collapsed[_variable_name(str(name))] = str(css_value)
        return collapsed


def _variable_name(name: str) -> str:
    name = name.strip()
    return name if name.startswith("--") else f"--{name}"


__all__ = ["AssetBundle", "GlobalStyleContext", "RenderNode", "ScriptRef", "StylePair"]
