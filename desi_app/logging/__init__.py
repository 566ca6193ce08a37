"""
Logging configuration and utilities for the desi_app utilities.
"""
from .config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    get_validation_logger,
    log_rejection,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "get_validation_logger",
    "log_rejection",
]
