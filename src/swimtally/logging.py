"""Structured logging configuration for swimtally.

Usage:
    from swimtally.logging import get_logger, configure_logging

    # Call once at application startup
    configure_logging()

    # Get a logger in any module
    logger = get_logger(__name__)
    logger.info("session_parsed", lines=12, total_distance=3200)

Settings (see swimtally.config):
    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    LOG_FORMAT: json, console (default: console)
    ENVIRONMENT: local, development, production, test (default: local)
"""

import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from swimtally.config import Settings


def _add_environment(environment: str) -> structlog.typing.Processor:
    """Build a processor that adds the environment to all log entries."""

    def processor(
        logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict["environment"] = environment
        return event_dict

    return processor


def configure_logging(settings: "Settings | None" = None, stream: TextIO | None = None) -> None:
    """Configure structlog for the application.

    Call this once at application startup (e.g., in the CLI callback).
    Until then, library loggers go through standard logging and stay quiet
    below WARNING.

    Args:
        settings: Settings to read level and format from (default: cached settings)
        stream: Output stream (default: stdout)
    """
    from swimtally.config import LogFormat, get_settings

    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    # Shared processors for all formats
    shared_processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_environment(settings.environment.value),
    ]

    if settings.log_format == LogFormat.JSON:
        # Production: JSON output
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # Development: Pretty console output
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stdout,
        level=log_level,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name, typically __name__ from the calling module

    Returns:
        A structlog logger writing through the standard logging logger of
        the same name, so callers that never configure logging see nothing
        below WARNING
    """
    return structlog.wrap_logger(logging.getLogger(name))


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Example:
        bind_context(session_file="tuesday.txt")
        logger.info("processing")  # Will include session_file
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
