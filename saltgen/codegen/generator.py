"""Figma → Salt React code generator.

Pipeline per request:
1. Map the design tree to Salt components (+ optional Stack collapse)
2. Render the component context (imports + hierarchy)
3. Fetch usage examples per component type (cached per generator)
4. Build the prompt and call the completion endpoint
5. Parse the fenced code block, imports, dependencies, warnings

A request either returns a full GeneratedCode or raises; there is no
partial result.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from saltgen import settings
from saltgen.integrations.llm_client import LLMClient
from saltgen.mapping.catalog import SALT_CATALOG, ComponentCatalog
from saltgen.mapping.mapper import (
    collect_component_types,
    count_components,
    map_design_tree,
    optimize_component_tree,
    resolve_design_root,
)
from saltgen.mapping.models import DesignDataError, DesignNode, MappedComponent

from .examples import ExampleFetcher
from .prompt import build_prompt, generate_component_context
from .response_parser import (
    CodeGenerationError,
    GeneratedCode,
    NoCodeBlockError,
    parse_and_validate_code,
)

logger = logging.getLogger("saltgen.codegen")


@dataclass
class CodeGenerationRequest:
    """Input of one generation call.

    ``examples`` are caller-supplied usage examples placed ahead of the
    ones fetched from the Q&A endpoint.
    """
    figma_data: Dict[str, Any]
    requirements: List[str] = field(default_factory=list)
    examples: Optional[List[str]] = None


@dataclass
class ComponentMapping:
    """Mapped tree + rendered context for one design payload."""
    components: List[MappedComponent]
    component_types: List[str]
    context: str


def map_figma_data(
    figma_data: Dict[str, Any],
    catalog: ComponentCatalog = SALT_CATALOG,
    optimize_tree: bool = settings.CODEGEN_OPTIMIZE_TREE,
) -> ComponentMapping:
    """Map design data to Salt components and render their context (no LLM call)."""
    root = DesignNode.from_dict(resolve_design_root(figma_data))
    components = map_design_tree(root, catalog)
    if optimize_tree:
        components = optimize_component_tree(components)
    return ComponentMapping(
        components=components,
        component_types=collect_component_types(components),
        context=generate_component_context(components),
    )


class CodeGenerator:
    """Generate Salt React components from Figma design data.

    Args:
        client: LLMClient for completion + Q&A calls.
        catalog: Component catalog for mapping (defaults to Salt).
        example_fetcher: Override the per-instance example fetcher.
        optimize_tree: Collapse Stack → Stack nesting before prompting.
    """

    def __init__(
        self,
        client: LLMClient,
        catalog: ComponentCatalog = SALT_CATALOG,
        example_fetcher: Optional[ExampleFetcher] = None,
        optimize_tree: bool = settings.CODEGEN_OPTIMIZE_TREE,
    ):
        self._client = client
        self._catalog = catalog
        self._optimize_tree = optimize_tree
        self._examples = example_fetcher or ExampleFetcher(
            client, capacity=len(catalog.component_types()),
        )

    @property
    def example_fetcher(self) -> ExampleFetcher:
        return self._examples

    def map_components(self, figma_data: Dict[str, Any]) -> ComponentMapping:
        return map_figma_data(figma_data, self._catalog, self._optimize_tree)

    async def generate_react_code(self, request: CodeGenerationRequest) -> GeneratedCode:
        """Run the full generation pipeline for one request.

        Raises:
            DesignDataError: the design payload is nested too deeply.
            NoCodeBlockError: the completion had no fenced code block.
            CodeGenerationError: any other failure (mapping, completion call).
        """
        start = time.monotonic()
        try:
            mapping = self.map_components(request.figma_data)
            logger.info(
                "generate: mapped %d components, types=%s",
                count_components(mapping.components), mapping.component_types,
            )

            fetched = await self._examples.fetch_examples(mapping.component_types)
            examples = list(request.examples or []) + fetched

            prompt = build_prompt(
                figma_data=request.figma_data,
                component_context=mapping.context,
                examples=examples,
                requirements=request.requirements,
            )
            response = await self._client.complete(prompt)
            result = parse_and_validate_code(response)
        except (NoCodeBlockError, DesignDataError):
            raise
        except Exception as e:
            logger.error("Code generation failed: %s", e)
            raise CodeGenerationError(f"Failed to generate code: {e}") from e

        logger.info(
            "generate: done in %dms, imports=%d, dependencies=%s, warnings=%d",
            int((time.monotonic() - start) * 1000),
            len(result.imports), result.dependencies, len(result.warnings),
        )
        return result
