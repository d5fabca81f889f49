"""Render-tree to HTML fragment conversion for the host page."""

from __future__ import annotations

from collections.abc import Iterable
from html import escape

from block_bridge.assets import ADDRESS_ATTRIBUTE
from block_bridge.models import AssetBundle, RenderNode, ScriptRef

FETCH_FAILURE_MESSAGE = "Unable to fetch WordPress content"


def render_blocks_html(nodes: Iterable[RenderNode]) -> str:
    return "".join(_render_node(node, str(index)) for index, node in enumerate(nodes))


def _render_node(node: RenderNode, address: str) -> str:
    classes = " ".join(["wp-block", *(token for token in node.classes if token != "wp-block")])
    attributes = [
        f'class="{escape(classes)}"',
        f'{ADDRESS_ATTRIBUTE}="{address}"',
        f'data-template="{escape(node.template_id)}"',
    ]
    if node.inline_styles:
        attributes.append(f'style="{escape("; ".join(node.style_declarations))}"')
    inner = "".join(
        _render_node(child, f"{address}.{index}") for index, child in enumerate(node.children)
    )
    return f"<div {' '.join(attributes)}>{node.raw_content}{inner}</div>"


def render_styles_html(bundle: AssetBundle) -> str:
    return f'<style type="text/css" id="wp-block-styles">{bundle.css}</style>'


def render_scripts_html(scripts: Iterable[ScriptRef]) -> str:
    tags = []
    for script in scripts:
        script_id = escape(f"{script.handle}-js")
        if script.content is not None:
            tags.append(f'<script id="{script_id}">{script.content}</script>')
        elif script.source_url:
            tags.append(f'<script id="{script_id}" src="{escape(script.source_url)}"></script>')
    return "".join(tags)


def render_error_message(message: str = FETCH_FAILURE_MESSAGE) -> str:
    return f'<div class="wp-content-error">{escape(message)}</div>'


__all__ = [
    "FETCH_FAILURE_MESSAGE",
    "render_blocks_html",
    "render_error_message",
    "render_scripts_html",
    "render_styles_html",
]
