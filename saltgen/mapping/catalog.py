"""Salt Design System component catalog.

Immutable lookup tables consulted by the classifier, prop extractor and
prompt renderer. The default ``SALT_CATALOG`` can be replaced by any other
``ComponentCatalog`` instance (tests substitute reduced catalogs).

Entry order is significant: name matching walks entries in declaration
order and the first hit wins, so a layer called "Input Dropdown" resolves
to Input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class CatalogEntry:
    """One Salt component: type name + module it is imported from.

    ``match_by_name`` is False for fallback-only types (Box) that should
    never be picked by a layer-name substring.
    """
    name: str
    import_path: Optional[str] = None
    match_by_name: bool = True


@dataclass(frozen=True)
class ComponentCatalog:
    entries: Tuple[CatalogEntry, ...]
    # (keyword, component type), checked in order for component instances
    keyword_aliases: Tuple[Tuple[str, str], ...] = ()
    # Layer-name keywords that turn a plain rectangle into a button
    button_keywords: Tuple[str, ...] = ("button", "btn", "cta")
    # Layout alignment enum (normalised upper-snake) → Salt align keyword
    align_map: Dict[str, str] = field(default_factory=dict)
    justify_map: Dict[str, str] = field(default_factory=dict)
    # Upper bounds (inclusive) of spacing buckets 1..N; above the last → N+1
    spacing_thresholds: Tuple[float, ...] = (4, 8, 16, 24, 32)

    def name_matchable(self) -> Tuple[CatalogEntry, ...]:
        return tuple(e for e in self.entries if e.match_by_name)

    def component_types(self) -> Tuple[str, ...]:
        return tuple(e.name for e in self.entries)

    def get(self, component_type: str) -> Optional[CatalogEntry]:
        for entry in self.entries:
            if entry.name == component_type:
                return entry
        return None

    def import_path(self, component_type: str) -> str:
        """Module path for a type; unknown or path-less types import by name."""
        entry = self.get(component_type)
        if entry is None or not entry.import_path:
            return component_type
        return entry.import_path


SALT_CATALOG = ComponentCatalog(
    entries=(
        CatalogEntry("Button", "@salt-ds/core/Button"),
        CatalogEntry("Input", "@salt-ds/core/Input"),
        CatalogEntry("Card", "@salt-ds/core/Card"),
        CatalogEntry("Text", "@salt-ds/core/Text"),
        CatalogEntry("Stack", "@salt-ds/core/StackLayout"),
        CatalogEntry("Grid", "@salt-ds/core/GridLayout"),
        CatalogEntry("Flex", "@salt-ds/core/FlexLayout"),
        CatalogEntry("Dropdown", "@salt-ds/core/Dropdown"),
        CatalogEntry("Checkbox", "@salt-ds/core/Checkbox"),
        CatalogEntry("Radio", "@salt-ds/core/RadioButton"),
        CatalogEntry("Switch", "@salt-ds/core/Switch"),
        CatalogEntry("Dialog", "@salt-ds/core/Dialog"),
        CatalogEntry("Tabs", "@salt-ds/core/Tabs"),
        CatalogEntry("Avatar", "@salt-ds/core/Avatar"),
        CatalogEntry("Badge", "@salt-ds/core/Badge"),
        CatalogEntry("Tooltip", "@salt-ds/core/Tooltip"),
        # Fallback for frames/rectangles with no better match; Salt has no
        # Box export so it is imported by bare name.
        CatalogEntry("Box", None, match_by_name=False),
    ),
    keyword_aliases=(
        ("btn", "Button"),
        ("cta", "Button"),
        ("input", "Input"),
        ("field", "Input"),
        ("dropdown", "Dropdown"),
        ("select", "Dropdown"),
        ("card", "Card"),
        ("tile", "Card"),
        ("modal", "Dialog"),
        ("dialog", "Dialog"),
    ),
    align_map={
        "MIN": "start",
        "CENTER": "center",
        "MAX": "end",
        "SPACE_BETWEEN": "stretch",
        "BASELINE": "start",
    },
    justify_map={
        "MIN": "start",
        "CENTER": "center",
        "MAX": "end",
        "SPACE_BETWEEN": "space-between",
        "SPACE_AROUND": "space-around",
        "SPACE_EVENLY": "space-evenly",
    },
)
