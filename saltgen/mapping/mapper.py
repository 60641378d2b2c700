"""Design tree → Salt component tree.

Pre-order walk: classified nodes become components attached to the nearest
mapped ancestor; unclassified nodes (groups, auto-layout passthroughs,
vectors) produce nothing and hand their children up to that ancestor.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional

from .catalog import SALT_CATALOG, ComponentCatalog
from .classifier import STACK_TYPE, classify_node
from .models import DesignNode, MappedComponent, NodeKind
from .props import extract_props

logger = logging.getLogger("saltgen.mapping")


def resolve_design_root(figma_data: Dict[str, Any]) -> Dict[str, Any]:
    """Pick the node tree out of a request payload.

    Design exports carry it under ``structure``, raw Figma file responses
    under ``document``; anything else is treated as the root node itself.
    """
    for key in ("structure", "document"):
        root = figma_data.get(key)
        if isinstance(root, dict):
            return root
    return figma_data


def build_component(
    node: DesignNode,
    catalog: ComponentCatalog = SALT_CATALOG,
) -> Optional[MappedComponent]:
    """Classify a single node and wrap it as a MappedComponent (no children)."""
    component_type = classify_node(node, catalog)
    if component_type is None:
        return None
    component = MappedComponent(
        type=component_type,
        import_path=catalog.import_path(component_type),
        props=extract_props(node, component_type, catalog),
    )
    if node.kind == NodeKind.TEXT and node.text:
        component.content = node.text
    return component


def _map_node(
    node: DesignNode,
    roots: List[MappedComponent],
    parent: Optional[MappedComponent],
    catalog: ComponentCatalog,
) -> None:
    component = build_component(node, catalog)
    if component is not None:
        if parent is not None:
            parent.children.append(component)
        else:
            roots.append(component)
        parent = component

    for child in node.children:
        _map_node(child, roots, parent, catalog)


def map_design_tree(
    root: DesignNode,
    catalog: ComponentCatalog = SALT_CATALOG,
) -> List[MappedComponent]:
    """Map a design tree to an ordered list of root-level Salt components."""
    roots: List[MappedComponent] = []
    _map_node(root, roots, None, catalog)
    logger.debug(
        "map_design_tree: root=%s, mapped_roots=%d, components=%d",
        root.name or root.id, len(roots), count_components(roots),
    )
    return roots


def _collapse_stack(component: MappedComponent) -> MappedComponent:
    """Merge a Stack with its only child when that child is also a Stack."""
    if component.type != STACK_TYPE or len(component.children) != 1:
        return component
    child = component.children[0]
    if child.type != STACK_TYPE:
        return component
    return replace(
        component,
        props={**component.props, **child.props},
        content=child.content,
        children=list(child.children),
    )


def optimize_component_tree(components: List[MappedComponent]) -> List[MappedComponent]:
    """Collapse redundant Stack → Stack nesting, one level per node per pass."""
    optimized = []
    for component in components:
        collapsed = _collapse_stack(component)
        collapsed = replace(collapsed, children=optimize_component_tree(collapsed.children))
        optimized.append(collapsed)
    return optimized


def collect_component_types(components: List[MappedComponent]) -> List[str]:
    """Distinct component types in pre-order of first appearance."""
    seen: List[str] = []

    def visit(nodes: List[MappedComponent]) -> None:
        for node in nodes:
            if node.type not in seen:
                seen.append(node.type)
            visit(node.children)

    visit(components)
    return seen


def count_components(components: List[MappedComponent]) -> int:
    return sum(1 + count_components(c.children) for c in components)
