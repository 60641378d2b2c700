"""Tests for saltgen.codegen.prompt (component context + prompt assembly)."""

import json

from saltgen.codegen.prompt import (
    BASE_REQUIREMENTS,
    build_prompt,
    format_requirements,
    generate_component_context,
    render_component_tree,
    render_import_lines,
)
from saltgen.mapping.models import MappedComponent


def _tree():
    return [
        MappedComponent(
            type="Stack",
            import_path="@salt-ds/core/StackLayout",
            props={"gap": 3, "align": "center"},
            children=[
                MappedComponent(
                    type="Text", import_path="@salt-ds/core/Text",
                    props={"styleAs": "h2"}, content="Sign in",
                ),
                MappedComponent(
                    type="Button", import_path="@salt-ds/core/Button",
                    props={"variant": "primary", "disabled": True},
                ),
                MappedComponent(type="Box", import_path="Box"),
            ],
        )
    ]


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestRenderComponentTree:

    def test_nested_tags(self):
        assert render_component_tree(_tree()) == [
            '<Stack gap="3" align="center">',
            '  <Text styleAs="h2">',
            "    Sign in",
            "  </Text>",
            '  <Button variant="primary" disabled="true">',
            "  </Button>",
            "  <Box>",
            "  </Box>",
            "</Stack>",
        ]

    def test_level_offsets_indent(self):
        lines = render_component_tree(_tree()[0].children[:1], level=2)
        assert lines[0] == '    <Text styleAs="h2">'


# ---------------------------------------------------------------------------
# Imports
# ---------------------------------------------------------------------------


class TestRenderImportLines:

    def test_groups_by_package(self):
        assert render_import_lines(_tree()) == [
            "import { StackLayout, Text, Button } from '@salt-ds/core';",
            "import { Box } from 'Box';",
        ]

    def test_repeated_types_listed_once(self):
        button = MappedComponent(type="Button", import_path="@salt-ds/core/Button")
        tree = [MappedComponent(
            type="Flex", import_path="@salt-ds/core/FlexLayout",
            children=[button, button],
        )]
        assert render_import_lines(tree) == [
            "import { FlexLayout, Button } from '@salt-ds/core';",
        ]


# ---------------------------------------------------------------------------
# Context + prompt
# ---------------------------------------------------------------------------


class TestGenerateComponentContext:

    def test_sections(self):
        context = generate_component_context(_tree())
        assert "Salt Design System Component Structure:" in context
        assert "Imports needed:\nimport { StackLayout, Text, Button } from '@salt-ds/core';" in context
        assert 'Component hierarchy:\n<Stack gap="3" align="center">' in context
        assert "- Wrap everything in SaltProvider" in context


class TestFormatRequirements:

    def test_base_only(self):
        text = format_requirements([])
        assert text.splitlines()[0] == "1. Use Salt Design System components exclusively"
        assert len(text.splitlines()) == len(BASE_REQUIREMENTS)

    def test_extra_numbered_from_eight(self):
        lines = format_requirements(["Support dark mode", "", "Use a grid"]).splitlines()
        assert lines[7] == "8. Support dark mode"
        assert lines[8] == "9. Use a grid"
        assert len(lines) == 9


class TestBuildPrompt:

    def test_inlines_all_inputs_in_order(self):
        figma_data = {"name": "Login", "nodes": ["ü"]}
        prompt = build_prompt(
            figma_data=figma_data,
            component_context="CONTEXT-MARKER",
            examples=["EXAMPLE-A", "EXAMPLE-B"],
            requirements=["Support dark mode"],
        )
        assert json.dumps(figma_data, indent=2, ensure_ascii=False) in prompt
        assert "EXAMPLE-A\n\nEXAMPLE-B" in prompt
        assert "8. Support dark mode" in prompt

        order = [
            prompt.index("FIGMA DESIGN DATA:"),
            prompt.index("COMPONENT MAPPING:\nCONTEXT-MARKER"),
            prompt.index("RELEVANT SALT EXAMPLES:"),
            prompt.index("REQUIREMENTS:"),
            prompt.index("IMPORTANT RULES:"),
        ]
        assert order == sorted(order)

    def test_deterministic(self):
        kwargs = dict(figma_data={"a": 1}, component_context="c", examples=[], requirements=[])
        assert build_prompt(**kwargs) == build_prompt(**kwargs)
