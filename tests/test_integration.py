from __future__ import annotations

import pytest

from block_bridge.cache import TTLCache
from block_bridge.collaborators import InMemoryContentSource
from block_bridge.config import BridgeSettings
from block_bridge.errors import ContentFetchError
from block_bridge.factory import create_content_renderer
from block_bridge.html import FETCH_FAILURE_MESSAGE
from block_bridge.integration import ContentRenderer, RenderOptions
from block_bridge.models import Block, Post
from block_bridge.service import BlockContentService
from block_bridge.walker import BlockWalker

FALLBACK = f'<div class="wp-content-error">{FETCH_FAILURE_MESSAGE}</div>'


class FailingSource:
    def get_post(self, post_id: int) -> Post | None:
        raise ContentFetchError("connection refused")


class CountingSource(InMemoryContentSource):
    def __init__(self, posts=()):
        super().__init__(posts)
        self.calls = 0

    def get_post(self, post_id: int) -> Post | None:
        self.calls += 1
        return super().get_post(post_id)


def _post() -> Post:
    paragraph = Block(
        type="core/paragraph",
        attributes={"style": {"color": {"text": "#333"}}},
        raw_content="<p>Hello</p>",
    )
    return Post(id=1, title="One", blocks=(Block(type="core/group", children=(paragraph,)),))


def test_renders_wrapper_styles_and_blocks() -> None:
    renderer = ContentRenderer(BlockContentService(InMemoryContentSource([_post()])))

    html = renderer.render_content(1)

    assert html.startswith('<style type="text/css" id="wp-block-styles">')
    assert '<div class="wp_content_wrapper">' in html
    assert 'data-block-address="0.0"' in html
    assert 'style="color: #333"' in html
    assert "<p>Hello</p>" in html
    assert html.endswith("</div></div></div>")


def test_options_can_drop_styles_and_scripts() -> None:
    renderer = ContentRenderer(BlockContentService(InMemoryContentSource([_post()])))

    html = renderer.render_content(1, RenderOptions(include_styles=False, include_scripts=False))

    assert html.startswith('<div class="wp_content_wrapper">')
    assert "<style" not in html


def test_missing_post_renders_fallback_message() -> None:
    renderer = ContentRenderer(BlockContentService(InMemoryContentSource()))

    assert renderer.render_content(99) == FALLBACK


@pytest.mark.parametrize("post_id", ["²", "abc", None])
def test_invalid_post_id_renders_fallback_message(post_id) -> None:
    renderer = ContentRenderer(BlockContentService(InMemoryContentSource([_post()])))

    assert renderer.render_content(post_id) == FALLBACK


def test_unreachable_source_renders_fallback_message() -> None:
    renderer = ContentRenderer(BlockContentService(FailingSource()))

    assert renderer.render_content(1) == FALLBACK


def test_too_deep_content_renders_fallback_message() -> None:
    tree = Block(type="core/paragraph")
    for _ in range(4):
        tree = Block(type="core/group", children=(tree,))
    service = BlockContentService(
        InMemoryContentSource([Post(id=3, blocks=(tree,))]),
        walker=BlockWalker(max_depth=3),
    )

    assert ContentRenderer(service).render_content(3) == FALLBACK


def test_rendered_documents_are_cached_per_post() -> None:
    source = CountingSource([_post()])
    renderer = ContentRenderer(BlockContentService(source), cache=TTLCache(60))

    first = renderer.render_content(1)
    second = renderer.render_content("1")

    assert first == second
    assert source.calls == 1

    renderer.render_content(1, RenderOptions(cache=False))
    assert source.calls == 2


def test_factory_builds_database_backed_renderer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLOCK_BRIDGE_DATABASE_URL", raising=False)

    renderer = create_content_renderer(BridgeSettings(site_url="https://mysite.com", cache_ttl=30))

    assert renderer.render_content(1) == FALLBACK


def test_factory_accepts_explicit_source() -> None:
    renderer = create_content_renderer(
        BridgeSettings(site_url="https://mysite.com"),
        source=InMemoryContentSource([_post()]),
    )

    assert "<p>Hello</p>" in renderer.render_content(1)
