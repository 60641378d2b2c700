"""Tests for saltgen.codegen.response_parser."""

import pytest

from saltgen.codegen.response_parser import (
    CodeGenerationError,
    NoCodeBlockError,
    extract_code_block,
    extract_dependencies,
    extract_imports,
    package_name,
    parse_and_validate_code,
    validate_generated_code,
)


# ---------------------------------------------------------------------------
# Code block extraction
# ---------------------------------------------------------------------------


class TestExtractCodeBlock:

    @pytest.mark.parametrize("lang", ["ts", "tsx", "js", "jsx"])
    def test_language_tags(self, lang):
        text = f"intro\n```{lang}\nconst a = 1;\n```\noutro"
        assert extract_code_block(text) == "const a = 1;"

    def test_first_block_wins(self):
        text = "```tsx\nfirst\n```\n\n```tsx\nsecond\n```"
        assert extract_code_block(text) == "first"

    def test_untagged_block_ignored(self):
        text = "```\nplain\n```\n```jsx\ntagged\n```"
        assert extract_code_block(text) == "tagged"

    def test_missing_block_raises(self):
        with pytest.raises(NoCodeBlockError, match="No code block found in LLM response"):
            extract_code_block("Sorry, I cannot help with that.")

    def test_no_code_block_is_generation_error(self):
        assert issubclass(NoCodeBlockError, CodeGenerationError)


# ---------------------------------------------------------------------------
# Imports + dependencies
# ---------------------------------------------------------------------------


class TestExtractImports:

    def test_order_and_duplicates_kept(self):
        code = (
            "import React from 'react';\n"
            'import { Button } from "@salt-ds/core";\n'
            "import * as styles from './Login.module.css';\n"
            "import React from 'react';\n"
            "\nconst x = 1;\n"
        )
        assert extract_imports(code) == [
            "import React from 'react'",
            'import { Button } from "@salt-ds/core"',
            "import * as styles from './Login.module.css'",
            "import React from 'react'",
        ]

    def test_multiline_named_import(self):
        code = "import {\n  Button,\n  Text,\n} from '@salt-ds/core';"
        assert extract_imports(code) == ["import {\n  Button,\n  Text,\n} from '@salt-ds/core'"]

    def test_side_effect_import_not_matched(self):
        assert extract_imports("import './global.css';") == []


class TestDependencies:

    @pytest.mark.parametrize("module,expected", [
        ("@scope/pkg/sub", "@scope/pkg"),
        ("@salt-ds/core", "@salt-ds/core"),
        ("pkg/sub", "pkg"),
        ("react", "react"),
    ])
    def test_package_name(self, module, expected):
        assert package_name(module) == expected

    def test_extract_dependencies(self):
        imports = [
            "import { X } from '@scope/pkg/sub'",
            "import { Y } from 'pkg/sub'",
            "import { Z } from './local'",
            "import W from '/abs/path'",
            "import { V } from '@scope/pkg'",
        ]
        assert extract_dependencies(imports) == ["@scope/pkg", "pkg"]


# ---------------------------------------------------------------------------
# Advisory checks
# ---------------------------------------------------------------------------


class TestValidateGeneratedCode:

    def test_all_warnings_in_fixed_order(self):
        assert validate_generated_code("const x = 1;") == [
            "Component should be wrapped in SaltProvider",
            "Consider adding TypeScript types for the component",
            "Consider adding accessibility attributes",
            "Consider adding error handling",
        ]

    def test_checks_are_independent(self):
        code = "<SaltProvider><div role=\"main\" /></SaltProvider>"
        assert validate_generated_code(code) == [
            "Consider adding TypeScript types for the component",
            "Consider adding error handling",
        ]

    def test_clean_code(self):
        code = (
            "const App: FC = () => <ErrorBoundary><SaltProvider>"
            "<main aria-label=\"x\" /></SaltProvider></ErrorBoundary>;"
        )
        assert validate_generated_code(code) == []


class TestParseAndValidateCode:

    def test_full_result(self):
        response = (
            "```tsx\n"
            "import React from 'react';\n"
            "import { SaltProvider } from '@salt-ds/core';\n"
            "export default function App() { return <SaltProvider />; }\n"
            "```"
        )
        result = parse_and_validate_code(response)
        assert result.code.startswith("import React")
        assert result.imports == [
            "import React from 'react'",
            "import { SaltProvider } from '@salt-ds/core'",
        ]
        assert result.dependencies == ["react", "@salt-ds/core"]
        assert "Component should be wrapped in SaltProvider" not in result.warnings
        assert result.to_dict()["dependencies"] == ["react", "@salt-ds/core"]

    def test_no_block(self):
        with pytest.raises(NoCodeBlockError):
            parse_and_validate_code("just prose")
