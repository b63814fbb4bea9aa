"""Named unit catalogues built on the core algebra."""

from .catalogue import (
    SYSTEMS,
    UnitCatalogue,
    UnknownUnitError,
    build_catalogue,
    default_catalogue,
)

__all__ = [
    "SYSTEMS",
    "UnitCatalogue",
    "UnknownUnitError",
    "build_catalogue",
    "default_catalogue",
]
