"""Codegen configuration constants: single source of truth for infrastructure env vars."""

import os

# Server binding: used by entrypoint / uvicorn
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# LLM completion endpoint (OpenAI-style chat completions). The Q&A endpoint
# used for component examples lives at f"{LLM_ENDPOINT}/qna".
LLM_ENDPOINT = os.getenv("LLM_ENDPOINT", "")

# Bearer token sent to both the completion and the Q&A endpoint
LLM_API_KEY = os.getenv("LLM_API_KEY", "")

# Model name passed in the completion request body
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4")
