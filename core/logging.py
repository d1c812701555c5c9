"""structlog setup shared by scripts and embedding applications."""

from __future__ import annotations

import logging
from typing import TextIO

import structlog


def configure_logging(level: str = "INFO", *, json_output: bool = True, stream: TextIO | None = None) -> None:
    """Configure structlog once per process.

    JSON lines for deployments, key=value console output for local runs.
    Lines go to ``stream`` (stdout when None).
    """
    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )
