"""Prompt rendering, example lookup, LLM response parsing and validation."""

from .examples import ExampleFetcher
from .generator import CodeGenerationRequest, CodeGenerator, ComponentMapping, map_figma_data
from .response_parser import (
    CodeGenerationError,
    GeneratedCode,
    NoCodeBlockError,
    parse_and_validate_code,
)
from .validator import CodeValidator, ValidationResult

__all__ = [
    "CodeGenerationError",
    "CodeGenerationRequest",
    "CodeGenerator",
    "CodeValidator",
    "ComponentMapping",
    "ExampleFetcher",
    "GeneratedCode",
    "NoCodeBlockError",
    "ValidationResult",
    "map_figma_data",
    "parse_and_validate_code",
]
