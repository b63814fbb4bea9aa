"""Name lookup for catalogue units.

Names are exact keys. There is no expression grammar here: ``"foot"`` and
``"ft"`` resolve, ``"ft/s^2"`` only resolves if it was registered verbatim.
"""

from __future__ import annotations

import difflib
import logging
from functools import lru_cache
from types import ModuleType
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from ..config import load_settings
from ..core.unit import Unit
from . import imperial, si, temperature, us_volume

logger = logging.getLogger(__name__)

SYSTEMS: Dict[str, ModuleType] = {
    "si": si,
    "temperature": temperature,
    "imperial": imperial,
    "us_volume": us_volume,
}


class UnknownUnitError(KeyError):
    """Raised when a unit name is not registered."""

    def __init__(self, name: str, suggestions: Sequence[str] = ()) -> None:
        message = f"Unknown unit '{name}'"
        if suggestions:
            message += f" (did you mean: {', '.join(suggestions)}?)"
        super().__init__(message)
        self.name = name
        self.suggestions = list(suggestions)

    def __str__(self) -> str:
        return str(self.args[0])


class UnitCatalogue:
    """Registry of named units and their aliases."""

    def __init__(self) -> None:
        self._units: Dict[str, Unit] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, name: str, unit: Unit) -> None:
        existing = self._units.get(name)
        if existing is not None and existing != unit:
            raise ValueError(f"Unit '{name}' is already registered with a different value")
        self._units[name] = unit

    def alias(self, alias: str, name: str) -> None:
        if name not in self._units:
            raise KeyError(f"Cannot alias '{alias}' to unregistered unit '{name}'")
        current = self._aliases.get(alias)
        if current is not None and self._units[current] != self._units[name]:
            raise ValueError(f"Alias '{alias}' already refers to '{current}'")
        self._aliases[alias] = name

    def resolve(self, name: str) -> str:
        """Return the canonical name for ``name`` or raise :class:`UnknownUnitError`."""
        key = name.strip()
        if key in self._units:
            return key
        if key in self._aliases:
            return self._aliases[key]
        pool = list(self._units) + list(self._aliases)
        raise UnknownUnitError(name, difflib.get_close_matches(key, pool, n=3))

    def get(self, name: str) -> Unit:
        return self._units[self.resolve(name)]

    def names(self) -> List[str]:
        return sorted(self._units)

    def items(self) -> Iterator[Tuple[str, Unit]]:
        for name in self.names():
            yield name, self._units[name]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and (name in self._units or name in self._aliases)

    def __len__(self) -> int:
        return len(self._units)


def build_catalogue(systems: Iterable[str]) -> UnitCatalogue:
    """Assemble a catalogue from the named unit systems."""

    catalogue = UnitCatalogue()
    for system in systems:
        module = SYSTEMS.get(system)
        if module is None:
            raise ValueError(
                f"Unknown unit system '{system}'; expected one of {', '.join(sorted(SYSTEMS))}"
            )
        for name, unit in module.UNITS.items():
            catalogue.register(name, unit)
        for alias, name in module.ALIASES.items():
            catalogue.alias(alias, name)
        logger.debug("Loaded %d units from system %s", len(module.UNITS), system)
    return catalogue


@lru_cache(maxsize=1)
def default_catalogue() -> UnitCatalogue:
    """Return the catalogue for the configured systems, built once."""

    return build_catalogue(load_settings().systems)


__all__ = [
    "SYSTEMS",
    "UnitCatalogue",
    "UnknownUnitError",
    "build_catalogue",
    "default_catalogue",
]
