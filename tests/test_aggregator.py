from __future__ import annotations

from pathlib import Path

from block_bridge.assets import AssetAggregator, BASE_STYLESHEET, RESPONSIVE_STYLESHEET
from block_bridge.collaborators import FileScriptResolver, ScriptRegistration, StaticTypeSchemaProvider
from block_bridge.models import GlobalStyleContext, RenderNode
from block_bridge.walker import BlockWalker


def _node(kind: str, source_type: str, *, styles=(), children=()) -> RenderNode:
    return RenderNode(
        kind=kind,
        template_id=f"wp_block_{kind}",
        source_type=source_type,
        inline_styles=styles,
        children=tuple(children),
    )


def test_css_fragments_follow_fixed_order():
    tree = _node(
        "group",
        "core/group",
        children=[_node("paragraph", "core/paragraph", styles=(("color", "#111"), ("font-size", "18px")))],
    )
    context = GlobalStyleContext(
        base_stylesheet_text="body { margin: 0; }",
        css_variables={"--wp--preset--color--primary": "#000", "--wp--preset--font-size--large": "2rem"},
    )

    css = AssetAggregator().aggregate(tree, context).css

    assert css.startswith(BASE_STYLESHEET)
    theme_at = css.index("body { margin: 0; }")
    root_at = css.index(":root {")
    node_at = css.index('[data-block-address="0.0"] { color: #111; font-size: 18px; }')
    responsive_at = css.index(RESPONSIVE_STYLESHEET)
    assert len(BASE_STYLESHEET) <= theme_at < root_at < node_at < responsive_at
    assert css.count(":root {") == 1
    assert "    --wp--preset--color--primary: #000;" in css
    assert "    --wp--preset--font-size--large: 2rem;" in css
    assert '[data-block-address="0"]' not in css


def test_root_block_has_one_declaration_per_variable():
    context = GlobalStyleContext(css_variables=[("--x", "1"), ("--y", "2"), ("--x", "3")])

    css = AssetAggregator().aggregate([], context).css

    root = css[css.index(":root {"):]
    root = root[: root.index("}") + 1]
    assert root == ":root {\n    --x: 3;\n    --y: 2;\n}"


def test_empty_theme_context_emits_no_root_block():
    css = AssetAggregator().aggregate([]).css

    assert ":root" not in css
    assert css == "\n".join([BASE_STYLESHEET, RESPONSIVE_STYLESHEET])


def test_node_rules_use_preorder_addresses_across_top_level_nodes():
    nodes = [
        _node("a", "x/a", styles=(("color", "red"),)),
        _node("b", "x/b", children=[_node("c", "x/c", styles=(("height", "10px"),))]),
    ]

    css = AssetAggregator().aggregate(nodes).css

    assert css.index('[data-block-address="0"] { color: red; }') < css.index(
        '[data-block-address="1.0"] { height: 10px; }'
    )


def test_script_manifest_dedupes_by_handle_and_tolerates_missing_files(tmp_path: Path):
    scripts_dir = tmp_path / "wp-content" / "plugins"
    scripts_dir.mkdir(parents=True)
    (scripts_dir / "gallery.js").write_text("initGallery();", encoding="utf-8")

    schemas = StaticTypeSchemaProvider(
        [
            {"name": "core/gallery", "view_script": "gallery-view"},
            {"name": "core/image", "view_script": "gallery-view", "view_script_module": "lightbox"},
            {"name": "core/search", "view_script": "search-view"},
            {"name": "core/paragraph"},
        ]
    )
    resolver = FileScriptResolver(
        registrations={
            "gallery-view": ScriptRegistration("https://mysite.com/wp-content/plugins/gallery.js", ("jquery",)),
            "lightbox": ScriptRegistration("https://mysite.com/wp-content/plugins/missing.js"),
        },
        site_url="https://mysite.com",
        root=tmp_path,
    )
    tree = _node(
        "group",
        "core/group",
        children=[
            _node("image", "core/image"),
            _node("gallery", "core/gallery"),
            _node("search", "core/search"),
            _node("image", "core/image"),
            _node("paragraph", "core/paragraph"),
        ],
    )

    scripts = AssetAggregator(schemas=schemas, scripts=resolver).aggregate(tree).scripts

    assert [script.handle for script in scripts] == ["gallery-view", "lightbox"]
    assert scripts[0].content == "initGallery();"
    assert scripts[0].dependencies == ("jquery",)
    assert scripts[1].content is None
    assert scripts[1].source_url == "https://mysite.com/wp-content/plugins/missing.js"


def test_aggregate_consumes_walker_output(block_factory, context):
    tree = block_factory(
        "core/paragraph",
        {"style": {"color": {"text": "#222"}}},
        raw_content="<p>x</p>",
    )
    node = BlockWalker(context=context).walk(tree)

    css = AssetAggregator().aggregate(node).css

    assert '[data-block-address="0"] { color: #222; }' in css
