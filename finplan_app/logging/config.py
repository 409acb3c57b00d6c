"""
Centralized logging configuration for the FinPlan core.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the system should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # structlog handles formatting
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"
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

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_fetch_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the price fetcher subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for provider calls
    """
    return get_logger(name).bind(subsystem="fetcher")


def log_fetch_outcome(
    logger: FilteringBoundLogger,
    symbol: str,
    succeeded: bool,
    point_count: int = 0,
    error: Optional[BaseException] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one provider fetch with standardized fields.

    Args:
        logger: Structlog logger instance
        symbol: Ticker symbol that was fetched
        succeeded: Whether a price series was produced
        point_count: Number of points in the series
        error: Exception raised by the fetch, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        outcome="OK" if succeeded else "FAILED",
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if succeeded:
        bound_logger.info("Price series fetched", point_count=point_count)
    else:
        bound_logger.warning(
            "Price series fetch failed",
            error_category=getattr(error, "category", type(error).__name__),
            error=str(error),
        )
