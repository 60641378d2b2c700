"""Root conftest for mapping, codegen and API tests.

Provides:
- Design tree payloads in both input shapes (export + raw Figma REST)
- A fake LLM client (AsyncMock complete / ask_qna)
- FastAPI AsyncClient with a test CodeGenerator on app.state
"""

from __future__ import annotations

from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from saltgen.codegen.generator import CodeGenerator
from saltgen.integrations.llm_client import LLMClient


# ---------------------------------------------------------------------------
# Design payloads
# ---------------------------------------------------------------------------

@pytest.fixture
def simple_vertical_frame() -> dict:
    """Vertical frame with a text line and a submit rectangle."""
    return {
        "type": "FRAME",
        "layoutMode": "VERTICAL",
        "children": [
            {"type": "TEXT", "text": "Hello"},
            {"type": "RECTANGLE", "name": "Submit Button"},
        ],
    }


@pytest.fixture
def login_form_export() -> dict:
    """Simplified design export of a small login form."""
    return {
        "fileName": "Login",
        "structure": {
            "id": "1:1",
            "name": "Login Form",
            "type": "FRAME",
            "layout": {"mode": "VERTICAL", "gap": 16, "align": "center"},
            "children": [
                {
                    "id": "1:2",
                    "name": "Title",
                    "type": "TEXT",
                    "text": "Sign in",
                    "style": {"fontSize": 24, "fontWeight": 700, "textAlign": "CENTER"},
                },
                {
                    "id": "1:3",
                    "name": "Group 12",
                    "type": "GROUP",
                    "children": [
                        {"id": "1:4", "name": "Email Input", "type": "FRAME"},
                    ],
                },
                {
                    "id": "1:5",
                    "name": "Primary Button",
                    "type": "RECTANGLE",
                    "height": 40,
                    "fills": [{"type": "SOLID", "color": "#0066CC"}],
                },
            ],
        },
    }


@pytest.fixture
def figma_rest_node() -> dict:
    """Raw Figma REST API node (document subtree)."""
    return {
        "id": "10:1",
        "name": "Toolbar",
        "type": "FRAME",
        "layoutMode": "HORIZONTAL",
        "itemSpacing": 8,
        "paddingTop": 12,
        "paddingRight": 16,
        "paddingBottom": 12,
        "paddingLeft": 16,
        "primaryAxisAlignItems": "SPACE_BETWEEN",
        "counterAxisAlignItems": "CENTER",
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 640, "height": 48},
        "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}, "opacity": 0.5}],
        "children": [
            {
                "id": "10:2",
                "name": "Label",
                "type": "TEXT",
                "characters": "Filters",
                "style": {"fontSize": 14, "textAlignHorizontal": "LEFT"},
            },
            {
                "id": "10:3",
                "name": "Vector",
                "type": "VECTOR",
                "visible": False,
            },
        ],
    }


# ---------------------------------------------------------------------------
# LLM client mock
# ---------------------------------------------------------------------------

GENERATED_TSX = """\
Here is the component:

```tsx
import React from 'react';
import { SaltProvider, StackLayout, Button } from '@salt-ds/core';

const LoginForm: React.FC = () => (
  <SaltProvider>
    <StackLayout role="form" aria-label="Login">
      <Button variant="primary">Sign in</Button>
    </StackLayout>
  </SaltProvider>
);

export default LoginForm;
```
"""


@pytest.fixture
def mock_llm_client():
    """LLMClient double: completion returns GENERATED_TSX, Q&A returns a per-type example."""
    client = MagicMock(spec=LLMClient)
    client.complete = AsyncMock(return_value=GENERATED_TSX)

    async def _ask(question: str, context: str = "salt-design-system"):
        return f"example for: {question}"

    client.ask_qna = AsyncMock(side_effect=_ask)
    client.close = AsyncMock()
    return client


# ---------------------------------------------------------------------------
# FastAPI test client
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def client(mock_llm_client) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the codegen routes.

    The ASGI transport does not run the lifespan, so the generator is set
    on app.state directly.
    """
    from app.main import app

    original = getattr(app.state, "generator", None)
    app.state.generator = CodeGenerator(mock_llm_client)
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.state.generator = original
