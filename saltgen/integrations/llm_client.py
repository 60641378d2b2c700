"""HTTP client for the LLM completion and Q&A endpoints.

Both endpoints sit behind the same base URL and bearer token:
- ``POST <endpoint>``      chat completion, returns choices[0].message.content
- ``POST <endpoint>/qna``  usage-example lookup, returns ``answer`` (nullable)

Environment:
    LLM_ENDPOINT: completion endpoint URL (required)
    LLM_API_KEY : bearer token
    LLM_MODEL   : model name sent with completion requests

Usage:
    client = LLMClient()
    text = await client.complete(prompt)
    example = await client.ask_qna("Show me a Salt Button example")
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import httpx

from saltgen import config, settings

logger = logging.getLogger("saltgen.integrations.llm")

SYSTEM_PROMPT = (
    "You are a React/TypeScript expert specializing in Salt Design System. "
    "Generate clean, production-ready code."
)


class LLMClientError(Exception):
    """Raised when a completion or Q&A call fails."""


class LLMClient:
    """Async client for the completion + Q&A endpoints.

    Args:
        endpoint: Completion endpoint URL. Falls back to LLM_ENDPOINT env var.
        api_key: Bearer token. Falls back to LLM_API_KEY env var.
        model: Model name. Falls back to LLM_MODEL env var.
        timeout: HTTP request timeout in seconds.
        transport: Optional httpx transport (tests inject httpx.MockTransport).
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: float = settings.LLM_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._endpoint = (endpoint or config.LLM_ENDPOINT).rstrip("/")
        if not self._endpoint:
            raise LLMClientError(
                "LLM endpoint not configured. Set LLM_ENDPOINT environment variable "
                "or pass endpoint= to LLMClient()."
            )
        self._api_key = api_key if api_key is not None else config.LLM_API_KEY
        self._model = model or config.LLM_MODEL
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                timeout=self._timeout,
                limits=httpx.Limits(
                    max_connections=settings.LLM_HTTP_MAX_CONNECTIONS,
                    max_keepalive_connections=settings.LLM_HTTP_MAX_KEEPALIVE,
                ),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _post(self, url: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """POST a JSON body and return the decoded JSON response."""
        client = await self._get_client()
        try:
            resp = await client.post(url, json=body)
        except httpx.TimeoutException as e:
            raise LLMClientError(f"LLM endpoint timeout: {url}") from e
        except httpx.HTTPError as e:
            raise LLMClientError(f"LLM endpoint connection error: {url}: {e}") from e

        if resp.status_code in (401, 403):
            raise LLMClientError(
                f"LLM endpoint returned {resp.status_code}. Check that LLM_API_KEY is valid."
            )
        if resp.status_code == 429:
            raise LLMClientError("LLM endpoint rate limit exceeded. Retry later.")
        if resp.status_code >= 400:
            raise LLMClientError(
                f"LLM endpoint error {resp.status_code}: {resp.text[:200]}"
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMClientError(f"LLM endpoint returned non-JSON body: {url}") from e
        if not isinstance(data, dict):
            raise LLMClientError(f"LLM endpoint returned unexpected body type: {type(data).__name__}")
        return data

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def complete(self, prompt: str, system_prompt: str = SYSTEM_PROMPT) -> str:
        """Send a prompt to the completion endpoint and return the first choice's text."""
        body = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": settings.LLM_TEMPERATURE,
            "max_tokens": settings.LLM_MAX_TOKENS,
        }
        start = time.monotonic()
        data = await self._post(self._endpoint, body)

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise LLMClientError("LLM response missing choices[0].message.content") from e
        if not isinstance(content, str):
            raise LLMClientError("LLM response content is not a string")

        logger.info(
            "complete: model=%s, prompt_chars=%d, response_chars=%d, duration_ms=%d",
            self._model, len(prompt), len(content),
            int((time.monotonic() - start) * 1000),
        )
        return content

    async def ask_qna(
        self,
        question: str,
        context: str = settings.QNA_CONTEXT,
    ) -> Optional[str]:
        """Ask the Q&A endpoint; returns the answer text or None when it has none."""
        data = await self._post(
            f"{self._endpoint}/qna",
            {"question": question, "context": context},
        )
        answer = data.get("answer")
        if answer is not None and not isinstance(answer, str):
            raise LLMClientError("Q&A response answer is not a string")
        return answer or None
