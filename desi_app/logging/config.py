"""
Centralized logging configuration for the desi_app utilities.

All modules log through structlog so that rejected inputs and computed
summaries show up as structured events with consistent keys.
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
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

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


def get_validation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for input validation events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger carrying the validation subsystem binding
    """
    # Initial values keep the logger lazy, so later configure_logging calls apply
    return structlog.get_logger(name, subsystem="validation")


def log_rejection(
    logger: FilteringBoundLogger,
    operation: str,
    reason: str,
    field: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a rejected input with standardized format.

    Args:
        logger: Structlog logger instance
        operation: Name of the public operation that rejected the input
        reason: Human readable rejection reason
        field: Offending field, if the rejection is tied to one
        context: Additional context data
    """
    bound_logger = logger.bind(
        operation=operation,
        reason=reason,
        field=field,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("input_rejected")


def configure_logging_from_settings(
    config_dir: Optional[str] = None,
    overrides: Optional[dict[str, Any]] = None
) -> dict[str, Any]:
    """
    Configure logging from defaults, settings.yaml and explicit overrides.

    Args:
        config_dir: Directory holding settings.yaml (package default if None)
        overrides: Highest-priority overrides, e.g. {"logging": {"level": "DEBUG"}}

    Returns:
        The effective logging parameters

    Raises:
        ValueError: If the merged logging settings are invalid
    """
    from ..config.loader import ConfigLoader
    from ..config.validation import ConfigValidator

    loader = ConfigLoader.create(config_dir)
    config = loader.merge_config(overrides)

    errors = ConfigValidator.validate_config(config)
    if errors:
        details = "; ".join(f"{err.field}: {err.message} (got: {err.value})" for err in errors)
        raise ValueError(f"Invalid logging settings: {details}")

    params = config["logging"]
    configure_logging(
        level=params["level"],
        format_json=params["format_json"],
        include_timestamp=params["include_timestamp"],
        include_caller=params["include_caller"],
    )
    return params
