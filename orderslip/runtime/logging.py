"""Logging setup for the orderslip namespace.

Usage:
    from orderslip.runtime import get_logger
    logger = get_logger(__name__)

    logger.debug("Section RECIPIENT -> SENDER")
    logger.warning("Unknown keyword rung")

Environment variables:
    ORDERSLIP_LOG_LEVEL: DEBUG, INFO, WARNING or ERROR. Default: INFO

Records still propagate to the root logger, so an application that configures
logging itself (or pytest's caplog) sees parser traces as well.
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

LOGGER_NAMESPACE = "orderslip"
LOG_LEVEL_ENV_VAR = "ORDERSLIP_LOG_LEVEL"

_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def level_from_env() -> int:
    """Read the orderslip log level from the environment; unknown names fall back to INFO."""
    return _LEVEL_NAMES.get(os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper(), DEFAULT_LOG_LEVEL)


def _formatter_for(level: int) -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT)


def configure_logging(level: int | None = None) -> None:
    """Attach the orderslip stderr handler once.

    Args:
        level: Log level to use. If None, reads ORDERSLIP_LOG_LEVEL.
    """
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    if namespace_logger.handlers:
        return

    if level is None:
        level = level_from_env()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter_for(level))
    namespace_logger.setLevel(level)
    namespace_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Module names already under the package (``orderslip.slip...``) are used
    as-is; anything else is nested under the orderslip namespace.

    Args:
        name: Module name, typically __name__

    Returns:
        Configured logger instance
    """
    configure_logging()

    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the orderslip log level at runtime.

    Args:
        level: New log level (e.g., logging.DEBUG)
    """
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(level)

    for handler in namespace_logger.handlers:
        handler.setFormatter(_formatter_for(level))
