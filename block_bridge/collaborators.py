"""Interfaces for the services the pipeline consults, plus in-memory versions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from block_bridge.models import BlockTypeSchema, GlobalStyleContext, Post, ScriptRef
from block_bridge.theme import css_variables_from_settings

logger = logging.getLogger(__name__)


class MediaResolver(Protocol):
    def image_url(self, media_id: Any, size: str) -> str | None:
        ...

    def attachment_url(self, media_id: Any) -> str | None:
        ...

    def alt_text(self, media_id: Any) -> str | None:
        ...

    def caption(self, media_id: Any) -> str | None:
        ...


class ThemeStyleProvider(Protocol):
    def global_styles(self) -> GlobalStyleContext:
        ...


class TypeSchemaProvider(Protocol):
    def get(self, name: str) -> BlockTypeSchema | None:
        ...

    def all(self) -> list[BlockTypeSchema]:
        ...


class ScriptResolver(Protocol):
    def resolve(self, handle: str) -> ScriptRef | None:
        ...


class ContentSource(Protocol):
    def get_post(self, post_id: int) -> Post | None:
        """Return the post or ``None``; raise ``ContentFetchError`` when unreachable."""
        ...


# ---------------------------------------------------------------------------
# In-memory implementations


@dataclass(slots=True)
class MediaItem:
    url: str = ""
    alt: str = ""
    caption: str = ""
    sizes: dict[str, str] = field(default_factory=dict)


@dataclass(slots=True)
class StaticMediaResolver:
    """Mapping-backed media lookup; unknown ids and sizes resolve to ``None``."""

    items: dict[Any, MediaItem] = field(default_factory=dict)

    def _item(self, media_id: Any) -> MediaItem | None:
        if isinstance(media_id, bool) or not isinstance(media_id, (int, str)):
            return None
        item = self.items.get(media_id)
        if item is None and isinstance(media_id, str) and media_id.strip().isdecimal():
            item = self.items.get(int(media_id))
        return item

    def image_url(self, media_id: Any, size: str) -> str | None:
        item = self._item(media_id)
        if item is None:
            return None
        if size == "full":
            return item.sizes.get("full") or item.url or None
        return item.sizes.get(size)

    def attachment_url(self, media_id: Any) -> str | None:
        item = self._item(media_id)
        return item.url if item else None

    def alt_text(self, media_id: Any) -> str | None:
        item = self._item(media_id)
        return item.alt if item else None

    def caption(self, media_id: Any) -> str | None:
        item = self._item(media_id)
        return item.caption if item else None


@dataclass(slots=True)
class StaticThemeStyleProvider:
    stylesheet: str = ""
    settings: dict[str, Any] = field(default_factory=dict)

    def global_styles(self) -> GlobalStyleContext:
        return GlobalStyleContext(
            base_stylesheet_text=self.stylesheet,
            css_variables=css_variables_from_settings(self.settings),
        )


class StaticTypeSchemaProvider:
    """Fixed set of block type schemas, keyed by name in insertion order."""

    def __init__(self, schemas: Iterable[BlockTypeSchema | Mapping[str, Any]] = ()):
        self._schemas: dict[str, BlockTypeSchema] = {}
        for schema in schemas:
            model = schema if isinstance(schema, BlockTypeSchema) else BlockTypeSchema(**schema)
            self._schemas[model.name] = model

    def get(self, name: str) -> BlockTypeSchema | None:
        return self._schemas.get(name)

    def all(self) -> list[BlockTypeSchema]:
        return list(self._schemas.values())


@dataclass(slots=True)
class ScriptRegistration:
    src: str
    dependencies: Sequence[str] = ()


@dataclass(slots=True)
class FileScriptResolver:
    """Resolve script handles to their source URL and on-disk contents.

    ``src`` values under ``site_url`` are mapped onto ``root``; anything the
    resolver cannot read is returned without ``content``.
    """

    registrations: dict[str, ScriptRegistration] = field(default_factory=dict)
    site_url: str = ""
    root: Path | None = None

    def resolve(self, handle: str) -> ScriptRef | None:
        registration = self.registrations.get(handle)
        if registration is None:
            return None
        return ScriptRef(
            handle=handle,
            source_url=registration.src,
            content=self._read(registration.src),
            dependencies=tuple(registration.dependencies),
        )

    def _read(self, src: str) -> str | None:
        path = self._local_path(src)
        if path is None:
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            logger.warning("Script %s is unreadable: %s", path, exc)
            return None

    def _local_path(self, src: str) -> Path | None:
        if self.root is None or not src:
            return None
        relative = src
        if self.site_url and src.startswith(self.site_url):
            relative = src[len(self.site_url):]
        elif "://" in src:
            return None
        return self.root / relative.lstrip("/")


class InMemoryContentSource:
    """Content source over pre-parsed posts."""

    def __init__(self, posts: Iterable[Post] = ()):
        self._posts = {post.id: post for post in posts}

    def add(self, post: Post) -> None:
        self._posts[post.id] = post

    def get_post(self, post_id: int) -> Post | None:
        return self._posts.get(post_id)


__all__ = [
    "ContentSource",
    "FileScriptResolver",
    "InMemoryContentSource",
    "MediaItem",
    "MediaResolver",
    "ScriptRegistration",
    "ScriptResolver",
    "StaticMediaResolver",
    "StaticThemeStyleProvider",
    "StaticTypeSchemaProvider",
    "ThemeStyleProvider",
    "TypeSchemaProvider",
]
