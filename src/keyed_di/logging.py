"""
Structured logging for the registry demo.

Events are rendered to stderr; stdout carries only the demo output.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping

import structlog

from keyed_di.config import Settings


def render_capabilities(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Show capability classes in events by name, e.g. capability=HolidaysProvider."""
    for field, value in event_dict.items():
        if isinstance(value, type):
            event_dict[field] = value.__qualname__
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Route structlog through stdlib logging at `settings.log_level`."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.log_level),
        force=True,
    )

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if settings.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            render_capabilities,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
