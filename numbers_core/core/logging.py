"""
Standardized Logging Configuration

Routes structlog and stdlib logging through one handler. Supports JSON
logging for production and human-readable output for development.
"""

import logging
import os
import sys
from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

import structlog


# =============================================================================
# Configuration
# =============================================================================


class LogLevel(str, Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    PRETTY = "pretty"
    SIMPLE = "simple"


DEFAULT_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
DEFAULT_LOG_FORMAT = os.getenv("LOG_FORMAT", "json" if os.getenv("ENVIRONMENT") == "production" else "pretty")
SERVICE_NAME = os.getenv("SERVICE_NAME", "numbers-core")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")


def _add_service(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    event_dict.setdefault("environment", ENVIRONMENT)
    return event_dict


def _renderer(format: str) -> Any:
    if format == LogFormat.JSON:
        return structlog.processors.JSONRenderer()
    if format == LogFormat.PRETTY:
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.dev.ConsoleRenderer(colors=False)


# =============================================================================
# Logger Setup
# =============================================================================


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    format: str = DEFAULT_LOG_FORMAT,
    service_name: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Log format (json, pretty, simple)
        service_name: Service name for log entries
    """
    global SERVICE_NAME

    if service_name:
        SERVICE_NAME = service_name

    log_level = getattr(logging, LogLevel(level.upper()).value)
    log_format = LogFormat(format)

    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service,
    ]

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # Suppress noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    structlog.get_logger(__name__).debug(
        "logging_configured",
        level=log_level,
        format=log_format.value,
    )


def get_logger(name: str) -> Any:
    """
    Get a structured logger with the given name.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


# =============================================================================
# Context Logging
# =============================================================================


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """
    Bind values to every log entry emitted inside the block.

    Usage:
        with log_context(account_sid="AC..."):
            logger.info("listing_numbers")
    """
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


__all__ = [
    "LogLevel",
    "LogFormat",
    "setup_logging",
    "get_logger",
    "log_context",
]
