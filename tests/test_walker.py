from __future__ import annotations

import pytest

from block_bridge.errors import ContentValidationError
from block_bridge.handlers import build_node
from block_bridge.models import Block, RenderNode, count_blocks
from block_bridge.registry import HandlerRegistry
from block_bridge.walker import BlockWalker


def _shape(node: Block | RenderNode) -> tuple:
    return tuple(_shape(child) for child in node.children)


def _sample_tree(block_factory) -> Block:
    return block_factory(
        "core/group",
        children=[
            block_factory("core/heading", {"level": 3}, raw_content="<h3>Title</h3>"),
            block_factory(
                "core/columns",
                children=[
                    block_factory("core/column", children=[block_factory("core/paragraph", raw_content="a")]),
                    block_factory("core/column", children=[block_factory("acme/unknown")]),
                ],
            ),
            block_factory("core/paragraph", raw_content="tail"),
        ],
    )


def test_walk_preserves_tree_shape(block_factory, context):
    tree = _sample_tree(block_factory)

    result = BlockWalker(context=context).walk(tree)

    assert _shape(result) == _shape(tree)
    assert sum(1 for _ in result.iter_preorder()) == count_blocks([tree]) == 8


def test_walk_records_child_bookkeeping(block_factory, context):
    result = BlockWalker(context=context).walk(_sample_tree(block_factory))

    assert result.children_count == 3
    assert result.has_children is True
    heading = result.children[0]
    assert heading.children_count == 0
    assert heading.has_children is False
    columns = result.children[1]
    assert columns.data["columns_count"] == 2
    assert columns.children[1].children[0].kind == "generic"
    assert columns.children[1].children[0].source_type == "acme/unknown"


def test_walk_dispatches_in_preorder(block_factory):
    visited: list[str] = []
    registry = HandlerRegistry.empty()

    def recorder(block, context):
        visited.append(block.raw_content)
        return build_node(block, kind="seen", classes=[], data={})

    registry.register("t", recorder)
    tree = block_factory(
        "t",
        raw_content="root",
        children=[
            block_factory("t", raw_content="a", children=[block_factory("t", raw_content="a1")]),
            block_factory("t", raw_content="b"),
        ],
    )

    result = BlockWalker(registry).walk(tree)

    assert visited == ["root", "a", "a1", "b"]
    assert [node.raw_content for node in result.iter_preorder()] == visited


def test_walk_is_repeatable(block_factory, context):
    tree = _sample_tree(block_factory)
    walker = BlockWalker(context=context)

    assert walker.walk(tree) == walker.walk(tree)


def test_walk_rejects_trees_deeper_than_limit(block_factory):
    tree = block_factory("core/group")
    for _ in range(5):
        tree = block_factory("core/group", children=[tree])

    assert BlockWalker(max_depth=6).walk(tree).children_count == 1
    with pytest.raises(ContentValidationError) as excinfo:
        BlockWalker(max_depth=5).walk(tree)
    assert excinfo.value.code == "invalid_content"


def test_walk_handles_deep_nesting_without_recursion(block_factory):
    depth = 3000
    tree = block_factory("core/group")
    for _ in range(depth - 1):
        tree = Block(type="core/group", children=(tree,))

    result = BlockWalker(max_depth=depth).walk(tree)

    assert result.children_count == 1


def test_walk_all_keeps_top_level_order(block_factory, context):
    blocks = [block_factory("core/paragraph", raw_content=str(index)) for index in range(4)]

    nodes = BlockWalker(context=context).walk_all(blocks)

    assert [node.raw_content for node in nodes] == ["0", "1", "2", "3"]
