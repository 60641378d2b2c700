"""Logging setup for the codegen service.

Two logger trees, each with its own file under LOG_DIR plus the console:
- ``saltgen``: library modules (``saltgen.mapping``, ``saltgen.codegen``...)
- ``api``: the FastAPI app and its routers (``api.codegen``)

Modules only call ``logging.getLogger("<tree>.<area>")``; the FastAPI
lifespan attaches the handlers once per process.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from saltgen import settings

# Log directory: configurable via LOG_DIR env var for Docker
LOG_DIR = Path(os.getenv("LOG_DIR", str(Path(__file__).parent.parent / "logs")))

FILE_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONSOLE_FORMAT = "%(asctime)s [%(name)s] %(message)s"

# Trees that already have handlers attached
_configured_loggers: set[str] = set()


def setup_logger(name: str, filename: str, level: str = settings.LOG_LEVEL) -> logging.Logger:
    """Attach file + console handlers to a logger tree (idempotent).

    Args:
        name: Tree root, e.g. 'saltgen' or 'api'
        filename: File under LOG_DIR, e.g. 'saltgen.log'
        level: Level name applied to the logger and both handlers
    """
    logger = logging.getLogger(name)
    if name in _configured_loggers:
        return logger

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logger.setLevel(level)
    # Children propagate up to this tree root only
    logger.propagate = False

    for handler, fmt in (
        (logging.FileHandler(LOG_DIR / filename, encoding="utf-8"), FILE_FORMAT),
        (logging.StreamHandler(), CONSOLE_FORMAT),
    ):
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)

    _configured_loggers.add(name)
    return logger


def get_codegen_logger() -> logging.Logger:
    """Root of the ``saltgen`` tree (mapping, LLM client, generator)."""
    return setup_logger("saltgen", "saltgen.log")


def get_api_logger() -> logging.Logger:
    """Root of the ``api`` tree (app lifespan, codegen routes)."""
    return setup_logger("api", "api.log")
