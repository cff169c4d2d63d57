"""Library-side logging for timestep: namespaced loggers, no root handlers."""

from __future__ import annotations

import logging
from typing import Mapping

from timestep.runtime.config import resolve_log_level_name

ROOT_LOGGER_NAME = "timestep"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_timestep_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under ``timestep``."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_timestep_logging(*, env: Mapping[str, str] | None = None) -> logging.Logger:
    """Attach a ``NullHandler`` once and apply the resolved level to ``timestep``.

    Output routing stays with the host application; only the package logger
    is touched.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(handler, logging.NullHandler) for handler in logger.handlers):
        logger.addHandler(logging.NullHandler())
    level_name = resolve_log_level_name(default="WARNING", env=env)
    logger.setLevel(logging.getLevelNamesMapping().get(level_name, logging.WARNING))
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_timestep_logger", "setup_timestep_logging"]
