"""
Centralized logging configuration for the chart grid pipeline.

This module configures structlog for every component. Fetch workers,
the layout planner and the renderers all log through loggers obtained here
so that symbol, attempt and geometry context is emitted as structured
key/value pairs.
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

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
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
                       structlog.processors.CallsiteParameter.LINENO,
                       structlog.processors.CallsiteParameter.THREAD_NAME]
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
    Get a logger bound to the chart fetch subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for fetch workers and the scheduler
    """
    return structlog.get_logger(name, subsystem="fetch")


def get_render_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the layout and render subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for layout planning and rendering
    """
    return structlog.get_logger(name, subsystem="render")


def log_fetch_attempt(
    logger: FilteringBoundLogger,
    symbol: str,
    attempt: int,
    max_attempts: int,
    succeeded: bool,
    reason: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single chart fetch attempt.

    Args:
        logger: Structlog logger instance
        symbol: Stock symbol being fetched
        attempt: 1-indexed attempt number
        max_attempts: Total attempts allowed for this symbol
        succeeded: Whether this attempt produced an image
        reason: Failure description when the attempt failed
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        attempt=attempt,
        max_attempts=max_attempts,
        attempt_result="OK" if succeeded else "FAIL",
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if succeeded:
        bound_logger.debug("Fetch attempt succeeded")
    else:
        bound_logger.warning("Fetch attempt failed")


def log_layout_decision(
    logger: FilteringBoundLogger,
    rows: int,
    cols: int,
    cell_width: int,
    cell_height: int,
    canvas_width: int,
    canvas_height: int,
    verbose: bool = False
) -> None:
    """
    Log the grid layout chosen for a render pass.

    Args:
        logger: Structlog logger instance
        rows: Grid row count
        cols: Grid column count
        cell_width: Pixel width of every cell
        cell_height: Pixel height of every cell
        canvas_width: Canvas width the grid was planned for
        canvas_height: Canvas height the grid was planned for
        verbose: Emit at INFO instead of DEBUG (debug mode)
    """
    bound_logger = logger.bind(
        layout=f"{rows}x{cols}",
        cell_size=f"{cell_width}x{cell_height}",
        canvas_size=f"{canvas_width}x{canvas_height}",
    )

    if verbose:
        bound_logger.info("Grid layout planned")
    else:
        bound_logger.debug("Grid layout planned")
