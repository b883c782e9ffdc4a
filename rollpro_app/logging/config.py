"""
Centralized logging configuration for the RollPro engine.

All components log through structlog so that resonance changes, crossover
signals and report deliveries share one structured format.
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


def get_analysis_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for market analysis events.

    Resonance changes and crossover signals are logged through this logger
    so they can be filtered as one audit stream.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for analysis events
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="analysis",
        audit_trail=True
    )


def log_resonance_change(
    logger: FilteringBoundLogger,
    symbol: str,
    previous: Optional[dict[str, Any]],
    current: dict[str, Any],
) -> None:
    """
    Log a resonance state change with standardized format.

    Args:
        logger: Structlog logger instance
        symbol: Symbol whose resonance was recomputed
        previous: Previous resonance state as a dict, None on first refresh
        current: New resonance state as a dict
    """
    bound_logger = logger.bind(
        symbol=symbol,
        from_state=previous,
        to_state=current,
    )

    if current.get("is_resonant"):
        bound_logger.warning("Resonance detected")
    else:
        bound_logger.info("Resonance state changed")


def log_signal(
    logger: FilteringBoundLogger,
    symbol: str,
    timeframe: str,
    signal: str,
    price: float,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a crossover signal on the latest candle of a series.

    Args:
        logger: Structlog logger instance
        symbol: Symbol the signal fired on
        timeframe: Timeframe label of the series
        signal: BUY or SELL
        price: Close price of the signal candle
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        timeframe=timeframe,
        signal=signal,
        price=price,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("Crossover signal")
