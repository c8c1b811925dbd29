"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

from flowtrack.config import get_settings

# Event keys that may carry raw health data and must never reach log output
HEALTH_PAYLOAD_FIELDS = (
    "raw_payload",
    "csv_text",
    "snapshots",
    "rows",
    "day_notes",
    "day_tags",
)


def _redact_health_payload_processor(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: structlog.typing.EventDict,
) -> structlog.typing.EventDict:
    """
    Redact raw health payloads from log events.

    Counts, dates and identifiers are allowed through; uploaded file
    contents and per-day metric payloads are replaced.
    """
    for field in HEALTH_PAYLOAD_FIELDS:
        if field in event_dict:
            value = event_dict[field]
            if isinstance(value, str) and len(value) > 0:
                event_dict[field] = "[REDACTED]"
            elif isinstance(value, (list, dict)):
                event_dict[field] = "[REDACTED]"

    return event_dict


def setup_logging() -> None:
    """Configure structured logging for the application."""
    settings = get_settings()

    if settings.is_production:
        # JSON output for log aggregation
        processors: list[structlog.typing.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _redact_health_payload_processor,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _redact_health_payload_processor,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Also configure standard logging (uvicorn, sqlalchemy)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.getLevelName(settings.log_level),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a logger instance with optional name binding."""
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger
