"""Environment-driven settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from . import __version__

DEFAULT_SYSTEMS: Tuple[str, ...] = ("si", "temperature", "imperial", "us_volume")


def _parse_systems(raw: str | None) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_SYSTEMS
    systems = tuple(name.strip() for name in raw.split(",") if name.strip())
    return systems or DEFAULT_SYSTEMS


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    systems: Tuple[str, ...] = DEFAULT_SYSTEMS
    engine_version: str = __version__


def load_settings() -> Settings:
    """Read settings from ``UNITALGEBRA_*`` environment variables."""

    return Settings(
        log_level=os.getenv("UNITALGEBRA_LOG_LEVEL", "WARNING").upper(),
        systems=_parse_systems(os.getenv("UNITALGEBRA_SYSTEMS")),
        engine_version=os.getenv("UNITALGEBRA_ENGINE_VERSION", __version__),
    )


__all__ = ["DEFAULT_SYSTEMS", "Settings", "load_settings"]
