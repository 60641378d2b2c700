"""Design tree data model: input design nodes and mapped Salt components.

`DesignNode.from_dict` normalises two input shapes into one model:
- the simplified design export (``text``, ``layout: {mode, gap, align,
  justify, padding}``, ``style: {fontSize, fontWeight, textAlign}``)
- raw Figma REST API nodes (``characters``, ``layoutMode``, ``itemSpacing``,
  ``paddingTop``..., ``primaryAxisAlignItems``, ``absoluteBoundingBox``)

Both are pure trees (no cross references); child order is visual order.
Parsing, mapping and rendering recurse once per tree level, so depth is
capped at settings.MAX_DESIGN_DEPTH.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from saltgen import settings

PropValue = Union[str, int, float, bool]
Padding = Tuple[float, float, float, float]  # top, right, bottom, left


class DesignDataError(ValueError):
    """Raised when a design payload cannot be turned into a node tree."""


class NodeKind(str, Enum):
    TEXT = "TEXT"
    FRAME = "FRAME"
    RECTANGLE = "RECTANGLE"
    INSTANCE = "INSTANCE"
    OTHER = "OTHER"


# Figma node types folded into NodeKind.INSTANCE
_INSTANCE_TYPES = {"INSTANCE", "COMPONENT"}


class LayoutMode(str, Enum):
    VERTICAL = "VERTICAL"
    HORIZONTAL = "HORIZONTAL"
    NONE = "NONE"


@dataclass(frozen=True)
class Fill:
    """One paint entry. ``color`` is a hex string when the paint is solid."""
    color: Optional[str] = None
    opacity: float = 1.0


@dataclass(frozen=True)
class LayoutSpec:
    """Auto-layout descriptor of a frame."""
    mode: LayoutMode = LayoutMode.NONE
    gap: Optional[float] = None
    padding: Optional[Padding] = None
    primary_align: Optional[str] = None  # MIN | CENTER | MAX | SPACE_BETWEEN ...
    counter_align: Optional[str] = None


@dataclass
class DesignNode:
    """One element of the design-tool document tree (read-only input)."""
    id: str = ""
    name: str = ""
    kind: NodeKind = NodeKind.OTHER
    text: Optional[str] = None
    fills: List[Fill] = field(default_factory=list)
    corner_radius: Optional[float] = None
    layout: Optional[LayoutSpec] = None
    width: Optional[float] = None
    height: Optional[float] = None
    font_size: Optional[float] = None
    font_weight: Optional[float] = None
    text_align: Optional[str] = None
    visible: bool = True
    children: List["DesignNode"] = field(default_factory=list)

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        max_depth: Optional[int] = None,
        _depth: int = 0,
    ) -> "DesignNode":
        """Build a DesignNode tree from an exported or raw Figma node dict.

        Malformed scalar fields are dropped or coerced rather than rejected.
        Raises DesignDataError when nesting exceeds ``max_depth`` (defaults
        to settings.MAX_DESIGN_DEPTH).
        """
        if max_depth is None:
            max_depth = settings.MAX_DESIGN_DEPTH
        if _depth > max_depth:
            raise DesignDataError(f"Design tree is nested deeper than {max_depth} levels")

        raw_type = str(data.get("type", "")).upper()
        if raw_type in _INSTANCE_TYPES:
            kind = NodeKind.INSTANCE
        elif raw_type in NodeKind.__members__:
            kind = NodeKind(raw_type)
        else:
            kind = NodeKind.OTHER

        style = _dict(data.get("style"))
        bbox = _dict(data.get("absoluteBoundingBox"))

        text = data.get("text")
        if text is None:
            text = data.get("characters")

        name = data.get("name")
        text_align = style.get("textAlign") or style.get("textAlignHorizontal")

        return cls(
            id=str(data.get("id", "")),
            name="" if name is None else str(name),
            kind=kind,
            text=text if isinstance(text, str) else None,
            fills=[
                _parse_fill(f) for f in _list(data.get("fills"))
                if isinstance(f, dict) and f.get("visible", True) is not False
            ],
            corner_radius=_corner_radius(data),
            layout=_parse_layout(data),
            width=_number(bbox.get("width", data.get("width"))),
            height=_number(bbox.get("height", data.get("height"))),
            font_size=_number(style.get("fontSize")),
            font_weight=_number(style.get("fontWeight")),
            text_align=text_align if isinstance(text_align, str) else None,
            visible=data.get("visible", True) is not False,
            children=[
                cls.from_dict(child, max_depth, _depth + 1)
                for child in _list(data.get("children"))
                if isinstance(child, dict)
            ],
        )


@dataclass
class MappedComponent:
    """One element of the Salt component tree produced by the mapper."""
    type: str
    import_path: str
    props: Dict[str, PropValue] = field(default_factory=dict)
    content: Optional[str] = None
    children: List["MappedComponent"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "type": self.type,
            "import": self.import_path,
            "props": dict(self.props),
            "children": [c.to_dict() for c in self.children],
        }
        if self.content is not None:
            result["content"] = self.content
        return result


# =====================================================================
# Parsing helpers
# =====================================================================


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _corner_radius(data: Dict[str, Any]) -> Optional[float]:
    """``cornerRadius``, else the largest of Figma's per-corner ``rectangleCornerRadii``."""
    radius = _number(data.get("cornerRadius"))
    if radius is not None:
        return radius
    radii = [r for r in (_number(v) for v in _list(data.get("rectangleCornerRadii"))) if r is not None]
    return max(radii) if radii else None


def normalize_alignment(value: Any) -> Optional[str]:
    """'space-between' / 'SPACE_BETWEEN' / 'Space Between' → 'SPACE_BETWEEN'."""
    if not value or not isinstance(value, str):
        return None
    return value.strip().upper().replace("-", "_").replace(" ", "_")


def _color_to_hex(color: Any) -> Optional[str]:
    """Figma RGBA dict (0-1 floats) → '#RRGGBB'; strings pass through."""
    if isinstance(color, str):
        return color or None
    if isinstance(color, dict):
        r = round(color.get("r", 0) * 255)
        g = round(color.get("g", 0) * 255)
        b = round(color.get("b", 0) * 255)
        return f"#{r:02X}{g:02X}{b:02X}"
    return None


def _parse_fill(fill: Dict[str, Any]) -> Fill:
    opacity = _number(fill.get("opacity"))
    return Fill(
        color=_color_to_hex(fill.get("color")),
        opacity=1.0 if opacity is None else opacity,
    )


def _parse_padding(value: Any) -> Optional[Padding]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return (value, value, value, value)
    if isinstance(value, dict):
        return (
            _number(value.get("top")) or 0,
            _number(value.get("right")) or 0,
            _number(value.get("bottom")) or 0,
            _number(value.get("left")) or 0,
        )
    return None


def _parse_layout(data: Dict[str, Any]) -> Optional[LayoutSpec]:
    """Read the auto-layout descriptor from either input shape."""
    padding = _parse_padding(data.get("padding"))

    exported = data.get("layout")
    if isinstance(exported, dict):
        if padding is None:
            padding = _parse_padding(exported.get("padding"))
        return LayoutSpec(
            mode=_layout_mode(exported.get("mode")),
            gap=_number(exported.get("gap")),
            padding=padding,
            primary_align=normalize_alignment(exported.get("align")),
            counter_align=normalize_alignment(exported.get("justify")),
        )

    figma_padding_keys = ("paddingTop", "paddingRight", "paddingBottom", "paddingLeft")
    if padding is None and any(k in data for k in figma_padding_keys):
        padding = tuple(_number(data.get(k)) or 0 for k in figma_padding_keys)  # type: ignore[assignment]

    if "layoutMode" in data or padding is not None:
        return LayoutSpec(
            mode=_layout_mode(data.get("layoutMode")),
            gap=_number(data.get("itemSpacing")),
            padding=padding,
            primary_align=normalize_alignment(data.get("primaryAxisAlignItems")),
            counter_align=normalize_alignment(data.get("counterAxisAlignItems")),
        )
    return None


def _layout_mode(value: Any) -> LayoutMode:
    if isinstance(value, str) and value.upper() in LayoutMode.__members__:
        return LayoutMode(value.upper())
    return LayoutMode.NONE
