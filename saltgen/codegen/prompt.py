"""Code Generation Prompt Templates

Renders the mapped Salt component tree into LLM context (import list +
nested tag hierarchy) and assembles the final code generation prompt from
raw design data, that context, fetched usage examples and extra
requirements.

Output is deterministic for a given input; section order is fixed.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence

from saltgen.mapping.models import MappedComponent, PropValue

from .response_parser import package_name

COMPONENT_CONTEXT_TEMPLATE = """\

Salt Design System Component Structure:

Imports needed:
{imports}

Component hierarchy:
{hierarchy}

Additional context:
- Use Salt's design tokens for consistent styling
- Wrap everything in SaltProvider
- Use proper spacing props (1-6 scale)
- Follow Salt's accessibility guidelines
"""

BASE_REQUIREMENTS = (
    "Use Salt Design System components exclusively",
    "Follow React best practices and hooks patterns",
    "Make the component fully responsive",
    "Include proper TypeScript types",
    "Add accessibility attributes (aria-labels, roles)",
    "Use Salt's design tokens for styling",
    "Implement any interactive behaviors detected in the design",
)

CODEGEN_USER_PROMPT = """\
You are an expert React developer specializing in the Salt Design System.
Generate production-ready React code based on the following Figma design.

FIGMA DESIGN DATA:
{figma_data_json}

COMPONENT MAPPING:
{component_context}

RELEVANT SALT EXAMPLES:
{examples}

REQUIREMENTS:
{requirements}

IMPORTANT RULES:
- Import components from @salt-ds/core
- Wrap the main component in SaltProvider
- Use Salt's spacing scale (1-6) for gaps and padding
- Name the component based on the Figma frame name
- Export as default
- Include error boundaries for robustness
- Add comments explaining complex logic

Generate the complete React component file with all imports and types."""


def _format_props(props: Dict[str, PropValue]) -> str:
    parts = []
    for key, value in props.items():
        if isinstance(value, bool):
            value = str(value).lower()
        parts.append(f'{key}="{value}"')
    return " ".join(parts)


def render_component_tree(components: Sequence[MappedComponent], level: int = 0) -> List[str]:
    """Nested tag view of the component tree, two spaces per depth level."""
    lines: List[str] = []
    for component in components:
        indent = "  " * level
        props_str = _format_props(component.props)
        open_tag = f"<{component.type} {props_str}>" if props_str else f"<{component.type}>"
        lines.append(f"{indent}{open_tag}")
        if component.content:
            lines.append(f"{indent}  {component.content}")
        if component.children:
            lines.extend(render_component_tree(component.children, level + 1))
        lines.append(f"{indent}</{component.type}>")
    return lines


def _collect_import_paths(components: Sequence[MappedComponent], paths: List[str]) -> None:
    for component in components:
        if component.import_path not in paths:
            paths.append(component.import_path)
        _collect_import_paths(component.children, paths)


def render_import_lines(components: Sequence[MappedComponent]) -> List[str]:
    """One import line per package, grouping every symbol imported from it.

    '@salt-ds/core/StackLayout' contributes symbol 'StackLayout' to package
    '@salt-ds/core'; a path with nothing after the package imports its own
    last segment.
    """
    paths: List[str] = []
    _collect_import_paths(components, paths)

    grouped: Dict[str, List[str]] = {}
    for path in paths:
        package = package_name(path)
        rest = path[len(package):].strip("/")
        symbol = rest.split("/")[0] if rest else package.split("/")[-1]
        symbols = grouped.setdefault(package, [])
        if symbol not in symbols:
            symbols.append(symbol)

    return [
        f"import {{ {', '.join(symbols)} }} from '{package}';"
        for package, symbols in grouped.items()
    ]


def generate_component_context(components: Sequence[MappedComponent]) -> str:
    """Render the mapped tree as the COMPONENT MAPPING prompt section."""
    return COMPONENT_CONTEXT_TEMPLATE.format(
        imports="\n".join(render_import_lines(components)),
        hierarchy="\n".join(render_component_tree(components)),
    )


def format_requirements(requirements: Sequence[str]) -> str:
    """Fixed requirements numbered 1..7, extra requirements continue from 8."""
    all_requirements = list(BASE_REQUIREMENTS) + [r for r in requirements if r]
    return "\n".join(f"{i}. {req}" for i, req in enumerate(all_requirements, start=1))


def build_prompt(
    figma_data: Dict[str, Any],
    component_context: str,
    examples: Sequence[str],
    requirements: Sequence[str] = (),
) -> str:
    """Assemble the user prompt for the completion call."""
    return CODEGEN_USER_PROMPT.format(
        figma_data_json=json.dumps(figma_data, indent=2, ensure_ascii=False),
        component_context=component_context,
        examples="\n\n".join(examples),
        requirements=format_requirements(requirements),
    )
