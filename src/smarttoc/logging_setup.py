"""structlog configuration shared by every entrypoint.

Output always goes to a text stream (stderr by default) because stdout carries
the transformed HTML when running as a filter.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

import structlog

if TYPE_CHECKING:
    from smarttoc.config import LoggingSettings, Settings


def build_processors(log_format: str) -> list[structlog.types.Processor]:
    """Return the processor chain for ``"json"`` or ``"text"`` output."""
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors += [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def setup_logging(settings: Settings | LoggingSettings, *, stream: TextIO | None = None) -> None:
    """Configure structlog from the ``logging`` section of the settings."""
    logging_settings = getattr(settings, "logging", settings)

    structlog.configure(
        processors=build_processors(logging_settings.format),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[logging_settings.level]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
