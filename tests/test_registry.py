from __future__ import annotations

from block_bridge.handlers import HandlerContext, build_node
from block_bridge.models import RenderNode
from block_bridge.registry import HandlerRegistry


def test_dispatch_uses_registered_handler(registry, block_factory, context):
    node = registry.dispatch(block_factory("core/paragraph", raw_content="<p>Hi</p>"), context=context)

    assert node.kind == "paragraph"
    assert node.template_id == "wp_block_paragraph"
    assert node.source_type == "core/paragraph"
    assert node.children == ()


def test_unknown_type_falls_back_to_generic(registry, block_factory):
    attributes = {"align": "wide", "className": "is-special", "nested": {"list": [1, 2, {"x": None}]}}
    block = block_factory("acme/widget", attributes, raw_content="<div>raw</div>")

    node = registry.dispatch(block)

    assert node.kind == "generic"
    assert node.template_id == "generic"
    assert node.source_type == "acme/widget"
    assert node.data["attributes"] == attributes
    assert node.data["attributes"] is not block.attributes
    assert node.data["raw_content"] == "<div>raw</div>"
    assert node.classes == ("wp-block", "acme-widget", "alignwide", "is-special")


def test_fallback_never_raises_on_odd_attributes(registry, block_factory):
    block = block_factory("x/y", {"align": None, "className": 42, "anchor": ["not", "a", "string"]})

    node = registry.dispatch(block)

    assert node.kind == "generic"
    assert node.classes == ("wp-block", "x-y", "42")
    assert node.data["anchor"] is None
    assert "" not in node.classes


def test_register_overrides_existing_handler(block_factory):
    registry = HandlerRegistry()

    class ShoutingParagraph:
        def extract(self, block, *, context):
            return build_node(block, kind="shout", classes=["loud"], data={"text": block.raw_content.upper()})

    registry.register("core/paragraph", ShoutingParagraph())
    node = registry.dispatch(block_factory("core/paragraph", raw_content="hey"))

    assert node.kind == "shout"
    assert node.data == {"text": "HEY"}


def test_last_registration_wins_and_plain_functions_are_accepted(block_factory):
    registry = HandlerRegistry.empty()

    def first(block, context: HandlerContext) -> RenderNode:
        return RenderNode(kind="first", template_id="first")

    def second(block, context: HandlerContext) -> RenderNode:
        return RenderNode(kind="second", template_id="second", classes=["", "kept"])

    registry.register("acme/thing", first)
    registry.register("acme/thing", second)
    node = registry.dispatch(block_factory("acme/thing"))

    assert node.kind == "second"
    assert node.classes == ("kept",)
    assert node.source_type == "acme/thing"
    assert registry.block_types == ["acme/thing"]


def test_unregister_restores_fallback(block_factory):
    registry = HandlerRegistry()
    registry.unregister("core/heading")

    assert not registry.is_registered("core/heading")
    assert registry.dispatch(block_factory("core/heading")).kind == "generic"


def test_default_table_covers_built_in_types(registry):
    expected = {
        "core/paragraph",
        "core/heading",
        "core/image",
        "core/gallery",
        "core/button",
        "core/columns",
        "custom/testimonial",
        "core-embed/youtube",
        "core/table",
    }
    assert expected <= set(registry.block_types)


def test_dispatch_is_deterministic(registry, block_factory, context):
    block = block_factory(
        "core/paragraph",
        {"textColor": "primary", "backgroundColor": "light", "fontSize": "large", "align": "center"},
        raw_content="<p>Hello <strong>world</strong></p>",
    )

    first = registry.dispatch(block, context=context)
    second = registry.dispatch(block, context=context)

    assert first == second
