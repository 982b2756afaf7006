"""
Centralized logging configuration for the SLCSP resolver.

All components log through structlog on top of the standard library logging
module. Log output is written to stderr: stdout is reserved for the result
lines, so diagnostics must never mix with them.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        stream: Destination stream, stderr when omitted
    """
    log_level = getattr(logging, level.upper())
    stream = stream if stream is not None else sys.stderr

    # force=True so reconfiguration (tests, repeated runs) replaces the handler
    logging.basicConfig(
        level=log_level,
        stream=stream,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=_is_tty(stream)))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _is_tty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_resolution_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for per-ZIP resolution decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for resolution decisions
    """
    # Initial values keep the proxy lazy; bind() would resolve it against
    # whatever configuration is active at import time.
    return structlog.get_logger(
        name,
        subsystem="resolution",
        audit_trail=True
    )


def log_resolution(
    logger: FilteringBoundLogger,
    zip_code: str,
    outcome: str,
    rating_area: Optional[str] = None,
    rate: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of resolving one target ZIP.

    Args:
        logger: Structlog logger instance
        zip_code: Target ZIP code
        outcome: Resolution outcome name
        rating_area: Matched rating area, when unique
        rate: Formatted rate, when one was found
        context: Additional context data
    """
    bound_logger = logger.bind(
        zip_code=zip_code,
        outcome=outcome,
        rating_area=rating_area,
        rate=rate,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("ZIP resolved")
