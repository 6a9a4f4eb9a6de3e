"""Logging infrastructure for Signed Store.

Key components:
    get_store_logger: Factory function for creating package loggers
    setup_logging: Initialize logging configuration from YAML
    LoggingConfig: Configuration class for logging settings

Example:
    >>> from signed_store.logging import get_store_logger
    >>>
    >>> logger = get_store_logger(__name__)
    >>> logger.info("Store opened")
"""

from .logging_config import LoggingConfig, get_store_logger, setup_logging

__all__ = [
    "LoggingConfig",
    "setup_logging",
    "get_store_logger",
]
