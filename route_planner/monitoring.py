from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

logger = logging.getLogger("route_planner")

_HANDLER_NAME = "route_planner.stderr"


def resolve_level(name: str) -> int:
    """Map a level name such as "info" to its logging constant."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level {name!r}",
            setting_name="RP_LOG_LEVEL",
            expected_type="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )
    return level


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Logs go to stderr so that the interactive menu on stdout stays
    readable. Calling this twice replaces the handler instead of
    stacking a second one.
    """
    config = config or get_config().observability
    level = resolve_level(config.level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(config.format))
    logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug("Logging configured", extra={"level": config.level})
    return logger
