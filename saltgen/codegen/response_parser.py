"""LLM response parsing: fenced code extraction, imports, dependencies, lint warnings.

Pattern-based: the regexes below define what counts as a code
block and an import statement. They do not parse TypeScript and will miss
multi-line default+named imports or side-effect imports (``import 'x'``).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

logger = logging.getLogger("saltgen.codegen.parser")

# First ```ts / ```tsx / ```js / ```jsx fenced block
CODE_BLOCK_RE = re.compile(r"```(?:tsx?|jsx?)\n([\s\S]*?)\n```")

# import { A, B } from 'x' | import * as X from 'x' | import X from 'x'
IMPORT_RE = re.compile(
    r"""import\s+(?:\{[^}]+\}|\*\s+as\s+\w+|\w+)\s+from\s+['"]([^'"]+)['"]"""
)
FROM_MODULE_RE = re.compile(r"""from\s+['"]([^'"]+)['"]""")

# (check passes if any marker is present, warning when none is)
GENERATED_CODE_CHECKS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("SaltProvider",), "Component should be wrapped in SaltProvider"),
    ((": FC", "React.FC"), "Consider adding TypeScript types for the component"),
    (("aria-", "role="), "Consider adding accessibility attributes"),
    (("ErrorBoundary", "try", "catch"), "Consider adding error handling"),
)


class CodeGenerationError(Exception):
    """Raised when code generation fails (wraps completion-call failures)."""


class NoCodeBlockError(CodeGenerationError):
    """Raised when the LLM response contains no fenced source block."""


@dataclass
class GeneratedCode:
    """Result of a successful generation."""
    code: str
    imports: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "imports": list(self.imports),
            "dependencies": list(self.dependencies),
            "warnings": list(self.warnings),
        }


def extract_code_block(llm_response: str) -> str:
    """Return the body of the first ts/tsx/js/jsx fenced block."""
    match = CODE_BLOCK_RE.search(llm_response or "")
    if not match:
        logger.error("No code block found, raw[:500]: %s", (llm_response or "")[:500])
        raise NoCodeBlockError("No code block found in LLM response")
    return match.group(1)


def extract_imports(code: str) -> List[str]:
    """Every import statement as written, in textual order (duplicates kept)."""
    return [m.group(0) for m in IMPORT_RE.finditer(code)]


def package_name(module: str) -> str:
    """'@scope/pkg/sub' → '@scope/pkg'; 'pkg/sub' → 'pkg'."""
    parts = module.split("/")
    if module.startswith("@"):
        return "/".join(parts[:2])
    return parts[0]


def extract_dependencies(imports: List[str]) -> List[str]:
    """External package names referenced by import statements (deduplicated)."""
    deps: List[str] = []
    for statement in imports:
        match = FROM_MODULE_RE.search(statement)
        if not match:
            continue
        module = match.group(1)
        if module.startswith(".") or module.startswith("/"):
            continue
        name = package_name(module)
        if name not in deps:
            deps.append(name)
    return deps


def validate_generated_code(code: str) -> List[str]:
    """Advisory checks on generated code; returns warnings in fixed check order."""
    warnings = []
    for markers, message in GENERATED_CODE_CHECKS:
        if not any(marker in code for marker in markers):
            warnings.append(message)
    return warnings


def parse_and_validate_code(llm_response: str) -> GeneratedCode:
    """Turn a raw completion into a GeneratedCode result.

    Raises NoCodeBlockError if the response has no fenced code block.
    """
    code = extract_code_block(llm_response)
    imports = extract_imports(code)
    return GeneratedCode(
        code=code,
        imports=imports,
        dependencies=extract_dependencies(imports),
        warnings=validate_generated_code(code),
    )
