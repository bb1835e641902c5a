"""Logging setup for applications embedding graphpath.

The library only creates module loggers; nothing is configured on
import. Call configure_logging() to attach a console handler to the
``graphpath`` logger using ObservabilityConfig.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

PACKAGE_LOGGER = "graphpath"
_HANDLER_NAME = "graphpath-console"


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Configure the package logger.

    Calling it again replaces the handler installed by a previous call.

    Args:
        config: Logging settings; defaults to get_config().observability.

    Returns:
        The configured ``graphpath`` logger.

    Raises:
        ConfigurationError: If the configured level is unknown.
    """
    config = config or get_config().observability

    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            setting_name="level",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
