"""Centralized logging configuration for the search-trees project."""

import logging
import sys
from typing import Optional

PROJECT_LOGGER = "search_trees"


def _has_own_handler(logger: logging.Logger) -> bool:
    """True if logger carries a handler added by this module.

    Test runners attach subclasses of these handler types, so exact types
    are compared.
    """
    return any(type(h) in (logging.StreamHandler, logging.NullHandler) for h in logger.handlers)


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler_type: str = "stream"
) -> logging.Logger:
    """
    Set up centralized logging configuration for the project.

    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        handler_type: Type of handler - "stream" or "none"

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    logger = logging.getLogger(PROJECT_LOGGER)

    # Avoid duplicate configuration
    if _has_own_handler(logger):
        return logger

    formatter = logging.Formatter(format_string)

    if handler_type == "stream":
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)
    else:
        logger.addHandler(logging.NullHandler())

    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not _has_own_handler(logging.getLogger(PROJECT_LOGGER)):
        setup_logging()

    if name == PROJECT_LOGGER or name.startswith(PROJECT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PROJECT_LOGGER}.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger for tests with appropriate configuration.

    Args:
        name: Test module name

    Returns:
        Logger instance for tests
    """
    logger = logging.getLogger(f"Tests.{name}")

    if not _has_own_handler(logger):
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger
