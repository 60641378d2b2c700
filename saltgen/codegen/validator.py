"""Salt React code validation rules (pure Python, zero LLM cost).

Checks arbitrary component source for:
- Salt import presence (error)
- Export statement (error)
- Salt components used as JSX tags without a matching Salt import (error)
- Raw className styling, missing list keys (suggestions)

Results are returned as data; nothing here raises on bad code.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

logger = logging.getLogger("saltgen.codegen.validator")

SALT_PACKAGE = "@salt-ds/core"

# Salt components whose usage must be backed by a Salt import
CHECKED_COMPONENTS = ("Button", "Input", "Card", "Stack", "Flex")


@dataclass
class ValidationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "suggestions": list(self.suggestions),
        }


def _uses_tag(code: str, component: str) -> bool:
    """``<Button`` followed by a non-identifier char (so ``<ButtonBar`` does not count)."""
    return re.search(rf"<{re.escape(component)}(?![\w$])", code) is not None


def _imports_from_salt(code: str, component: str) -> bool:
    pattern = (
        rf"""import\s[^;'"]*?\b{re.escape(component)}\b[^;'"]*?from\s+['"]@salt-ds/"""
    )
    return re.search(pattern, code) is not None


class CodeValidator:
    """Validate React component source against Salt usage rules.

    Args:
        checked_components: Component names whose JSX usage requires a Salt import.
    """

    def __init__(self, checked_components: Sequence[str] = CHECKED_COMPONENTS):
        self._checked_components = tuple(checked_components)

    def validate_react_code(self, code: str) -> ValidationResult:
        errors: List[str] = []
        suggestions: List[str] = []

        if SALT_PACKAGE not in code:
            errors.append("Missing Salt Design System imports")

        if "export default" not in code and "export {" not in code:
            errors.append("Component must be exported")

        if "className=" in code and "styles." not in code:
            suggestions.append("Consider using CSS modules or styled-components for styling")

        if "key=" not in code and ".map(" in code:
            suggestions.append("Add key props to mapped elements")

        for component in self._checked_components:
            if _uses_tag(code, component) and not _imports_from_salt(code, component):
                errors.append(f"{component} component used but not imported from Salt")

        result = ValidationResult(valid=not errors, errors=errors, suggestions=suggestions)
        logger.debug(
            "validate_react_code: valid=%s, errors=%d, suggestions=%d",
            result.valid, len(errors), len(suggestions),
        )
        return result
