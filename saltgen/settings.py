"""Codegen runtime settings: tunable parameters for the generation pipeline.

All values read from environment variables with defaults matching the
behaviour the pipeline was designed around. Import from here instead of
hardcoding.

Infrastructure config (endpoint, API key, model, host/port) stays in
saltgen/config.py.
"""

from __future__ import annotations

import os


def _int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _str(key: str, default: str) -> str:
    return os.getenv(key, default)


def _bool(key: str, default: bool) -> bool:
    return os.getenv(key, str(default)).lower() in ("true", "1", "yes")


# =====================================================================
# Completion call
# =====================================================================

# Sampling parameters sent with every completion request
LLM_TEMPERATURE = _float("LLM_TEMPERATURE", 0.3)
LLM_MAX_TOKENS = _int("LLM_MAX_TOKENS", 4000)

# HTTP timeout for completion / Q&A calls (seconds)
LLM_REQUEST_TIMEOUT = _float("LLM_REQUEST_TIMEOUT", 120.0)
LLM_HTTP_MAX_CONNECTIONS = _int("LLM_HTTP_MAX_CONNECTIONS", 10)
LLM_HTTP_MAX_KEEPALIVE = _int("LLM_HTTP_MAX_KEEPALIVE", 5)


# =====================================================================
# Example lookup (Q&A endpoint)
# =====================================================================

# Max parallel Q&A lookups per generation request
EXAMPLE_FETCH_CONCURRENCY = _int("EXAMPLE_FETCH_CONCURRENCY", 4)

# Context tag sent with every Q&A question
QNA_CONTEXT = _str("QNA_CONTEXT", "salt-design-system")


# =====================================================================
# Mapping
# =====================================================================

# Collapse Stack → single Stack child chains before rendering the prompt
CODEGEN_OPTIMIZE_TREE = _bool("CODEGEN_OPTIMIZE_TREE", True)

# Deepest design tree accepted by DesignNode.from_dict; parsing, mapping and
# prompt rendering all recurse once per level.
MAX_DESIGN_DEPTH = _int("MAX_DESIGN_DEPTH", 200)


# =====================================================================
# Logging
# =====================================================================

# Level for the "saltgen" and "api" logger trees (file + console)
LOG_LEVEL = _str("LOG_LEVEL", "INFO").upper()
