"""Salt usage examples from the Q&A endpoint, cached per component type.

The cache lives as long as the fetcher (one per generator instance) and is
never invalidated. Only successful, non-empty answers are stored, so a
failed lookup is retried on the next request. Capacity is bounded by the
catalog size: at most one entry per component type.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from saltgen import settings
from saltgen.integrations.llm_client import LLMClient, LLMClientError

logger = logging.getLogger("saltgen.codegen.examples")

QNA_QUESTION_TEMPLATE = (
    "Show me a complete example of using Salt Design System {component_type} "
    "component with best practices"
)


class ExampleFetcher:
    """Fetch one usage example per component type, caching successes.

    Args:
        client: LLMClient used for ``ask_qna``.
        capacity: Max cached entries (normally the catalog's type count).
        concurrency: Max Q&A lookups in flight per ``fetch_examples`` call.
    """

    def __init__(
        self,
        client: LLMClient,
        capacity: int,
        concurrency: int = settings.EXAMPLE_FETCH_CONCURRENCY,
    ):
        self._client = client
        self._capacity = capacity
        self._concurrency = max(1, concurrency)
        self._cache: Dict[str, str] = {}
        self._lock = asyncio.Lock()

    @property
    def cached_types(self) -> List[str]:
        return list(self._cache)

    def get_cached(self, component_type: str) -> Optional[str]:
        return self._cache.get(component_type)

    async def _store(self, component_type: str, example: str) -> None:
        async with self._lock:
            if component_type not in self._cache and len(self._cache) >= self._capacity:
                logger.warning(
                    "Example cache full (%d entries), not caching %s",
                    self._capacity, component_type,
                )
                return
            self._cache[component_type] = example

    async def _lookup(self, component_type: str) -> Optional[str]:
        question = QNA_QUESTION_TEMPLATE.format(component_type=component_type)
        try:
            return await self._client.ask_qna(question)
        except LLMClientError as e:
            logger.debug("Example lookup failed for %s: %s", component_type, e)
            return None

    async def fetch_example(self, component_type: str) -> Optional[str]:
        """Cached example for a type, querying the Q&A endpoint on a miss."""
        cached = self._cache.get(component_type)
        if cached is not None:
            return cached
        example = await self._lookup(component_type)
        if example:
            await self._store(component_type, example)
            return example
        return None

    async def fetch_examples(self, component_types: Sequence[str]) -> List[str]:
        """Examples for each distinct type, in input order; misses are skipped."""
        unique_types = list(dict.fromkeys(component_types))
        semaphore = asyncio.Semaphore(self._concurrency)

        async def _bounded(component_type: str) -> Optional[str]:
            async with semaphore:
                return await self.fetch_example(component_type)

        results = await asyncio.gather(*(_bounded(t) for t in unique_types))
        examples = [r for r in results if r]
        logger.info(
            "fetch_examples: types=%d, examples=%d, cached=%d",
            len(unique_types), len(examples), len(self._cache),
        )
        return examples
