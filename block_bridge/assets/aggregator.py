"""Document-level CSS and script manifest assembly."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

from block_bridge.collaborators import ScriptResolver, TypeSchemaProvider
from block_bridge.models import AssetBundle, GlobalStyleContext, RenderNode, ScriptRef

from .stylesheets import BASE_STYLESHEET, RESPONSIVE_STYLESHEET

logger = logging.getLogger(__name__)

ADDRESS_ATTRIBUTE = "data-block-address"


def iter_addressed(nodes: Iterable[RenderNode]) -> Iterator[tuple[str, RenderNode]]:
    """Yield ``(address, node)`` in pre-order; addresses are dotted child indexes."""
    roots = list(nodes)
    stack = [(str(index), roots[index]) for index in reversed(range(len(roots)))]
    while stack:
        address, node = stack.pop()
        yield address, node
        for index in reversed(range(len(node.children))):
            stack.append((f"{address}.{index}", node.children[index]))


def address_selector(address: str) -> str:
    return f'[{ADDRESS_ATTRIBUTE}="{address}"]'


def root_variables_block(variables: Mapping[str, str]) -> str:
    lines = [f"    {name}: {value};" for name, value in variables.items()]
    return "\n".join([":root {", *lines, "}"])


class AssetAggregator:
    """Combine static, theme and per-node styles plus view scripts for a document.

    The CSS fragments are emitted in a fixed order: base stylesheet, theme
    stylesheet, ``:root`` variables, per-node inline styles, responsive rules.
    Later fragments win in the cascade, so the order must not change.
    """

    def __init__(
        self,
        *,
        schemas: TypeSchemaProvider | None = None,
        scripts: ScriptResolver | None = None,
    ):
        self._schemas = schemas
        self._scripts = scripts

    def aggregate(
        self,
        render_tree: RenderNode | Iterable[RenderNode],
        global_styles: GlobalStyleContext | None = None,
    ) -> AssetBundle:
        nodes = [render_tree] if isinstance(render_tree, RenderNode) else list(render_tree)
        return AssetBundle(
            css=self.build_css(nodes, global_styles or GlobalStyleContext()),
            scripts=tuple(self.build_scripts(nodes)),
        )

    def build_css(self, nodes: Iterable[RenderNode], global_styles: GlobalStyleContext) -> str:
        fragments = [BASE_STYLESHEET]
        if global_styles.base_stylesheet_text:
            fragments.append(global_styles.base_stylesheet_text)
        if global_styles.css_variables:
            fragments.append(root_variables_block(global_styles.css_variables))
        fragments.extend(self._node_rules(nodes))
        fragments.append(RESPONSIVE_STYLESHEET)
        return "\n".join(fragments)

    def build_scripts(self, nodes: Iterable[RenderNode]) -> list[ScriptRef]:
        if self._schemas is None or self._scripts is None:
            return []
        manifest: list[ScriptRef] = []
        seen_types: set[str] = set()
        seen_handles: set[str] = set()
        for _, node in iter_addressed(nodes):
            if node.source_type in seen_types:
                continue
            seen_types.add(node.source_type)
            schema = self._schemas.get(node.source_type)
            if schema is None:
                continue
            for handle in schema.script_handles:
                if handle in seen_handles:
                    continue
                seen_handles.add(handle)
                ref = self._scripts.resolve(handle)
                if ref is None:
                    logger.debug("Script handle %r is not registered; skipping", handle)
                    continue
                manifest.append(ref)
        return manifest

    @staticmethod
    def _node_rules(nodes: Iterable[RenderNode]) -> list[str]:
        rules = []
        for address, node in iter_addressed(nodes):
            if not node.inline_styles:
                continue
            declarations = "; ".join(node.style_declarations)
            rules.append(f"{address_selector(address)} {{ {declarations}; }}")
        return rules


__all__ = [
    "ADDRESS_ATTRIBUTE",
    "AssetAggregator",
    "address_selector",
    "iter_addressed",
    "root_variables_block",
]
