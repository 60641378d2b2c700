"""FastAPI Application Entry Point.

Configures the app and includes the codegen routes.
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from saltgen import config
from saltgen.codegen.generator import CodeGenerator
from saltgen.integrations.llm_client import LLMClient
from saltgen.logging_config import get_api_logger, get_codegen_logger

logger = get_api_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the process-wide CodeGenerator and close its LLM client on shutdown."""
    get_codegen_logger()

    client = None
    app.state.generator = None
    if config.LLM_ENDPOINT:
        client = LLMClient()
        app.state.generator = CodeGenerator(client)
        logger.info("Codegen enabled: endpoint=%s, model=%s", config.LLM_ENDPOINT, config.LLM_MODEL)
    else:
        logger.warning(
            "LLM_ENDPOINT not set; /api/v1/codegen/generate will be unavailable. "
            "Set LLM_ENDPOINT (and LLM_API_KEY) in the environment to enable it."
        )

    yield
    if client is not None:
        await client.close()


app = FastAPI(title="Salt Codegen API", version="1.0.0", lifespan=lifespan)

# CORS origins from CORS_ORIGINS env var (comma-separated)
_default_origins = "http://localhost:3000,http://127.0.0.1:3000"
CORS_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ORIGINS", _default_origins).split(",") if o.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
from .routes.codegen import router as codegen_router  # noqa: E402

app.include_router(codegen_router)


@app.get("/health")
async def health_check():
    """Health check endpoint for container orchestration."""
    return {"status": "ok"}


def main() -> None:
    """Run the API with uvicorn (``salt-codegen`` console script)."""
    import uvicorn

    uvicorn.run("app.main:app", host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
