from __future__ import annotations

from pathlib import Path

from block_bridge.collaborators import (
    FileScriptResolver,
    ScriptRegistration,
    StaticMediaResolver,
    StaticThemeStyleProvider,
)
from block_bridge.theme import css_variables_from_settings


def test_css_variables_from_theme_settings():
    settings = {
        "color": {"palette": [{"slug": "primary", "color": "#0073aa"}, {"slug": "broken"}]},
        "typography": {"fontSizes": [{"slug": "small", "size": "13px"}]},
        "spacing": {"spacingSizes": [{"slug": "40", "size": "1rem"}]},
    }

    assert css_variables_from_settings(settings) == {
        "--wp--preset--color--primary": "#0073aa",
        "--wp--preset--font-size--small": "13px",
        "--wp--preset--spacing--40": "1rem",
    }


def test_css_variables_tolerate_missing_sections():
    assert css_variables_from_settings(None) == {}
    assert css_variables_from_settings({"color": "nope"}) == {}


def test_theme_provider_builds_global_context():
    provider = StaticThemeStyleProvider(
        stylesheet="body{}",
        settings={"color": {"palette": [{"slug": "a", "color": "#fff"}, {"slug": "a", "color": "#000"}]}},
    )

    context = provider.global_styles()

    assert context.base_stylesheet_text == "body{}"
    assert context.css_variables == {"--wp--preset--color--a": "#000"}


def test_media_resolver_accepts_numeric_strings(media_resolver: StaticMediaResolver):
    assert media_resolver.attachment_url("10") == "u1"
    assert media_resolver.image_url(99, "large") is None


def test_script_resolver_unknown_handle_returns_none(tmp_path: Path):
    assert FileScriptResolver(root=tmp_path).resolve("nope") is None


def test_script_resolver_ignores_foreign_hosts(tmp_path: Path):
    resolver = FileScriptResolver(
        registrations={"cdn": ScriptRegistration("https://cdn.example.com/lib.js")},
        site_url="https://mysite.com",
        root=tmp_path,
    )

    ref = resolver.resolve("cdn")

    assert ref is not None
    assert ref.content is None
    assert ref.source_url == "https://cdn.example.com/lib.js"
