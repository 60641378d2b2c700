"""Design node → Salt component type classification.

Rule-based, first match wins:
1. Layer name contains a catalog component name (any node kind)
2. Node-kind fallback (text / frame layout / rectangle / instance keywords)

Classification is local: only the node's own fields are inspected, never
its children.
"""

from __future__ import annotations

from typing import Optional

from .catalog import SALT_CATALOG, ComponentCatalog
from .models import DesignNode, LayoutMode, NodeKind

# Component types produced by the node-kind fallback
TEXT_TYPE = "Text"
STACK_TYPE = "Stack"
FLEX_TYPE = "Flex"
CARD_TYPE = "Card"
BUTTON_TYPE = "Button"
BOX_TYPE = "Box"


def match_component_name(
    name: str,
    catalog: ComponentCatalog = SALT_CATALOG,
) -> Optional[str]:
    """Return the first catalog entry whose name is a substring of ``name``."""
    if not name:
        return None
    lower = name.lower()
    for entry in catalog.name_matchable():
        if entry.name.lower() in lower:
            return entry.name
    return None


def match_instance_name(
    name: str,
    catalog: ComponentCatalog = SALT_CATALOG,
) -> Optional[str]:
    """Name match extended with the catalog's keyword aliases (btn, tile, modal...)."""
    direct = match_component_name(name, catalog)
    if direct or not name:
        return direct
    lower = name.lower()
    for keyword, component_type in catalog.keyword_aliases:
        if keyword in lower:
            return component_type
    return None


def _has_corner_radius(node: DesignNode) -> bool:
    return bool(node.corner_radius) and node.corner_radius > 0


def classify_node(
    node: DesignNode,
    catalog: ComponentCatalog = SALT_CATALOG,
) -> Optional[str]:
    """Return the Salt component type for a design node, or None if unmapped."""
    by_name = match_component_name(node.name, catalog)
    if by_name:
        return by_name

    if node.kind == NodeKind.TEXT:
        return TEXT_TYPE

    if node.kind == NodeKind.FRAME:
        mode = node.layout.mode if node.layout else LayoutMode.NONE
        if mode == LayoutMode.VERTICAL:
            return STACK_TYPE
        if mode == LayoutMode.HORIZONTAL:
            return FLEX_TYPE
        if _has_corner_radius(node):
            return CARD_TYPE
        return BOX_TYPE

    if node.kind == NodeKind.RECTANGLE:
        lower = node.lower_name
        if any(k in lower for k in catalog.button_keywords):
            return BUTTON_TYPE
        if _has_corner_radius(node):
            return CARD_TYPE
        return BOX_TYPE

    if node.kind == NodeKind.INSTANCE:
        return match_instance_name(node.name, catalog)

    return None
