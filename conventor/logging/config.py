"""
Centralized logging configuration for the Conventor compiler.

This module provides standardized logging configuration using structlog
for all components. Expansion, merging and pruning report through loggers
obtained here so that compile runs produce consistent structured output.
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
    # basicConfig leaves an already-configured root logger untouched
    logging.getLogger().setLevel(log_level)

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


def get_expansion_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for the expansion, merge and splicing stages.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the expansion subsystem
    """
    return get_logger(name).bind(subsystem="expansion")


def get_auction_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for auction legality checks and pruning decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the auction subsystem
    """
    return get_logger(name).bind(subsystem="auction")


def log_expansion_stage(
    logger: FilteringBoundLogger,
    stage: str,
    sequence: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the completion of an expansion stage with standardized format.

    Args:
        logger: Structlog logger instance
        stage: Stage name ("alternation", "wildcards", "steps")
        sequence: Auction of the node the stage ran on ("" for the root)
        context: Additional counts or details
    """
    bound_logger = logger.bind(
        stage=stage,
        sequence=sequence,
        event_type="expansion_stage"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Expansion stage complete")


def log_prune_decision(
    logger: FilteringBoundLogger,
    sequence: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the removal of a subtree with standardized format.

    Args:
        logger: Structlog logger instance
        sequence: Auction of the removed node
        reason: Why the node was removed ("illegal", "empty", "unexpanded", "unresolved")
        context: Additional context data
    """
    bound_logger = logger.bind(
        sequence=sequence,
        reason=reason,
        event_type="prune_decision"
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Pruned subtree")
