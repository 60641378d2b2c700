"""Salt prop extraction for classified design nodes.

Each component type has its own extractor; all of them share the
``hidden`` rule. Numeric design values are quantised onto Salt's 6-step
spacing scale (1-6), which is lossy: 5px and 8px both become 2.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence, Tuple

from .catalog import SALT_CATALOG, ComponentCatalog
from .models import DesignNode, NodeKind, PropValue

Props = Dict[str, PropValue]

# Button size thresholds (bounding-box height, px)
BUTTON_SMALL_MAX_HEIGHT = 32
BUTTON_LARGE_MIN_HEIGHT = 48

# Input placeholder keywords, checked in order
PLACEHOLDER_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("email", "Enter email address"),
    ("password", "Enter password"),
    ("search", "Search..."),
    ("name", "Enter your name"),
)
DEFAULT_PLACEHOLDER = "Enter text..."

# Text font-size tiers (min px, styleAs), largest first
TEXT_STYLE_TIERS: Tuple[Tuple[float, str], ...] = (
    (32, "h1"),
    (24, "h2"),
    (20, "h3"),
    (18, "h4"),
)
TEXT_BODY_STYLE = "body"


# =====================================================================
# Scale / alignment helpers
# =====================================================================


def spacing_bucket(
    value: float,
    thresholds: Sequence[float] = SALT_CATALOG.spacing_thresholds,
) -> int:
    """Map a pixel value onto the spacing scale.

    Boundaries are inclusive, so an exact threshold stays in the lower
    bucket: 4→1, 8→2, 16→3, 24→4, 32→5, 33→6.
    """
    for index, upper in enumerate(thresholds, start=1):
        if value <= upper:
            return index
    return len(thresholds) + 1


def map_alignment(value: Optional[str], table: Dict[str, str]) -> str:
    """Look up a normalised layout alignment; unknown values → 'start'."""
    if not value:
        return "start"
    return table.get(value, "start")


# =====================================================================
# Per-type extractors
# =====================================================================


def _button_props(node: DesignNode, catalog: ComponentCatalog) -> Props:
    name = node.lower_name
    props: Props = {}

    first_fill_colored = bool(node.fills) and bool(node.fills[0].color)
    if "primary" in name or first_fill_colored:
        props["variant"] = "primary"
    elif "secondary" in name:
        props["variant"] = "secondary"
    elif "ghost" in name or "text" in name:
        props["variant"] = "ghost"
    else:
        props["variant"] = "primary"

    height = node.height
    if "small" in name or (height is not None and height < BUTTON_SMALL_MAX_HEIGHT):
        props["size"] = "small"
    elif "large" in name or (height is not None and height > BUTTON_LARGE_MIN_HEIGHT):
        props["size"] = "large"
    else:
        props["size"] = "medium"

    if "disabled" in name:
        props["disabled"] = True
    return props


def _first_child_text(node: DesignNode) -> Optional[str]:
    for child in node.children:
        if child.kind == NodeKind.TEXT and child.text:
            return child.text
    return None


def _input_props(node: DesignNode, catalog: ComponentCatalog) -> Props:
    name = node.lower_name
    props: Props = {}

    placeholder = None
    for keyword, text in PLACEHOLDER_KEYWORDS:
        if keyword in name:
            placeholder = text
            break
    if placeholder is None:
        placeholder = _first_child_text(node) or DEFAULT_PLACEHOLDER
    props["placeholder"] = placeholder

    if "error" in name:
        props["validationStatus"] = "error"
    return props


def _layout_props(node: DesignNode, catalog: ComponentCatalog, with_justify: bool) -> Props:
    props: Props = {}
    layout = node.layout
    if layout is None:
        return props
    if layout.gap is not None:
        props["gap"] = spacing_bucket(layout.gap, catalog.spacing_thresholds)
    props["align"] = map_alignment(layout.primary_align, catalog.align_map)
    if with_justify:
        props["justify"] = map_alignment(layout.counter_align, catalog.justify_map)
    return props


def _stack_props(node: DesignNode, catalog: ComponentCatalog) -> Props:
    return _layout_props(node, catalog, with_justify=False)


def _flex_props(node: DesignNode, catalog: ComponentCatalog) -> Props:
    return _layout_props(node, catalog, with_justify=True)


def _card_props(node: DesignNode, catalog: ComponentCatalog) -> Props:
    props: Props = {}
    if node.fills:
        props["variant"] = "secondary" if node.fills[0].opacity < 1 else "primary"
    padding = node.layout.padding if node.layout else None
    if padding is not None:
        props["padding"] = spacing_bucket(sum(padding) / 4, catalog.spacing_thresholds)
    return props


def text_style_tier(font_size: float) -> str:
    for min_size, tier in TEXT_STYLE_TIERS:
        if font_size >= min_size:
            return tier
    return TEXT_BODY_STYLE


def _text_props(node: DesignNode, catalog: ComponentCatalog) -> Props:
    props: Props = {}
    if node.font_size is not None:
        props["styleAs"] = text_style_tier(node.font_size)
    if node.font_weight is not None:
        props["fontWeight"] = node.font_weight
    if node.text_align:
        props["align"] = node.text_align.lower()
    return props


PROP_EXTRACTORS: Dict[str, Callable[[DesignNode, ComponentCatalog], Props]] = {
    "Button": _button_props,
    "Input": _input_props,
    "Stack": _stack_props,
    "Flex": _flex_props,
    "Card": _card_props,
    "Text": _text_props,
}


def extract_props(
    node: DesignNode,
    component_type: str,
    catalog: ComponentCatalog = SALT_CATALOG,
) -> Props:
    """Build the Salt prop mapping for a node already classified as ``component_type``."""
    props: Props = {}
    if not node.visible:
        props["hidden"] = True

    extractor = PROP_EXTRACTORS.get(component_type)
    if extractor is not None:
        props.update(extractor(node, catalog))
    return props
