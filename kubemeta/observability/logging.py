"""structlog setup shared by the CLI and library callers.

Enrichment output goes to stdout, so every log line is written to stderr.
"""

from __future__ import annotations

import logging
import sys

import structlog


def build_processors(json_output: bool = True) -> list[structlog.types.Processor]:
    """Return the processor chain, ending in a JSON or console renderer."""
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
        renderer,
    ]


def setup_logging(level: str = "info", json_output: bool = True) -> None:
    """Configure structlog.

    Args:
        level: Minimum level name (debug, info, warning, error).
        json_output: Render JSON lines; ``False`` selects the console renderer.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=build_processors(json_output),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a logger bound to ``component``."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
