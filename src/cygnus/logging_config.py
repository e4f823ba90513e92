"""Structlog configuration for Cygnus."""

import logging
import sys

import structlog

LOG_FORMATS = ("console", "json")


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structlog and the standard library root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_format: "console" for human readable output, "json" for one JSON object per line

    Raises:
        ValueError: If the level or format is not recognised
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")

    if log_format not in LOG_FORMATS:
        raise ValueError(
            f"Unknown log format '{log_format}' (must be one of: {', '.join(LOG_FORMATS)})"
        )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        # JSON output needs tracebacks flattened to strings
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
