"""
Structured logging configuration using structlog.

One logging setup is shared by the catalog loader and the results engine.
It supports both development (colored console) and production (JSON) output.

Usage:
    from core.logging import configure_logging, get_logger

    # Configure once at startup
    configure_logging(json_logs=False)  # Development
    configure_logging(json_logs=True)   # Production

    # Get a logger
    logger = get_logger(__name__)

    # Log with context
    logger.info("Analyzing selections", total_selections=20)
    logger.warning("Design not found or has no tags", design_id="design_042")
"""

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import Processor


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        json_logs: If True, output JSON format (for production).
                   If False, output colored console format (for development).
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        include_timestamp: Whether to include timestamp in logs
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        shared_processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        shared_processors.append(structlog.processors.format_exc_info)
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        ))

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # force=True so a second call (e.g. from settings) replaces the handler
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper()),
        force=True,
    )


def configure_logging_from_settings(settings: Any) -> None:
    """
    Configure logging from a Settings instance.

    Args:
        settings: Object exposing ``json_logs`` and ``log_level``
    """
    configure_logging(json_logs=settings.json_logs, log_level=settings.log_level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__). If None, returns root logger.

    Returns:
        A structlog BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """
    Bind context variables to all subsequent logs in the current context.

    Useful for tagging every line of one analysis run, e.g. with a session id.

    Args:
        **kwargs: Key-value pairs to bind

    Usage:
        bind_context(session_id="abc")
        logger.info("Analyzing")  # Will include session_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """
    Clear all bound context variables.

    Call this at the end of an analysis run to avoid context leaking.
    """
    structlog.contextvars.clear_contextvars()


def unbind_context(*keys: str) -> None:
    """
    Unbind specific context variables.

    Args:
        *keys: Keys to unbind
    """
    structlog.contextvars.unbind_contextvars(*keys)


class LoggerMixin:
    """
    Mixin class that provides a logger property.

    Usage:
        class CatalogLoader(LoggerMixin):
            def load_designs(self):
                self.logger.info("Loading design data")
    """

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(self.__class__.__name__)
