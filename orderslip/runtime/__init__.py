"""Runtime infrastructure for orderslip.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Flower keyword rule loading via load_flower_keyword_rules()

Usage:
    from orderslip.runtime import get_logger, load_flower_keyword_rules

    logger = get_logger(__name__)
    rules = load_flower_keyword_rules(("config/flower_keywords.toml",))
"""

from orderslip.runtime.flower_rules import load_flower_keyword_rules
from orderslip.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Rules
    "load_flower_keyword_rules",
]
