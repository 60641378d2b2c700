"""Figma design tree → Salt component tree mapping."""

from .catalog import SALT_CATALOG, CatalogEntry, ComponentCatalog
from .classifier import classify_node, match_component_name, match_instance_name
from .mapper import (
    build_component,
    collect_component_types,
    count_components,
    map_design_tree,
    optimize_component_tree,
    resolve_design_root,
)
from .models import DesignDataError, DesignNode, Fill, LayoutMode, LayoutSpec, MappedComponent, NodeKind
from .props import extract_props, spacing_bucket

__all__ = [
    "SALT_CATALOG",
    "CatalogEntry",
    "ComponentCatalog",
    "DesignDataError",
    "DesignNode",
    "Fill",
    "LayoutMode",
    "LayoutSpec",
    "MappedComponent",
    "NodeKind",
    "build_component",
    "classify_node",
    "collect_component_types",
    "count_components",
    "extract_props",
    "map_design_tree",
    "match_component_name",
    "match_instance_name",
    "optimize_component_tree",
    "resolve_design_root",
    "spacing_bucket",
]
