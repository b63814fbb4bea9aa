"""Logging helpers shared by the CLI and the HTTP API."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure the root logger once; later calls only adjust the level."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def log_event(message: str, **extra: object) -> None:
    """Log an event with a structured payload attached."""

    logger.info(message, extra={"payload": dict(extra)})


__all__ = ["LOG_FORMAT", "configure_logging", "log_event"]
