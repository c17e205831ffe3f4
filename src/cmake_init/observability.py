"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns a structlog logger bound with its component

The level comes from CMAKE_INIT_LOG (debug, info, warning, error) and
defaults to warning so that a normal run only shows the CLI's own output.
Renderer is selected by LOG_FORMAT (json|console). Logs go to stderr.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

LOG_LEVEL_ENV_VAR = "CMAKE_INIT_LOG"
_DEFAULT_LEVEL = logging.WARNING

_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.

    Args:
        level: Level name overriding the CMAKE_INIT_LOG environment variable.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    log_level = _resolve_level(level or os.environ.get(LOG_LEVEL_ENV_VAR, ""))
    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(log_level)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger pre-bound with component."""
    return structlog.get_logger(f"cmake_init.{component}", component=component)


def _resolve_level(name: str) -> int:
    """Map a level name to a logging level, falling back to warning."""
    if not name:
        return _DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def _select_renderer() -> Any:
    """Choose renderer based on LOG_FORMAT env."""
    if os.environ.get("LOG_FORMAT", "").lower() == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
