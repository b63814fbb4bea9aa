"""Temperature scales.

Celsius and Fahrenheit are affine: their numeric zero sits above absolute
zero, so conversions shift as well as scale. Réaumur is built from Celsius
and inherits its offset through :func:`scale`.
"""

from __future__ import annotations

from typing import Dict

from ..core.unit import Unit, affine_unit, base_temperature, scale

kelvin = base_temperature
rankine = scale(5 / 9, kelvin)
celsius = affine_unit(273.15, kelvin)
fahrenheit = affine_unit(255.372, rankine)
reaumur = scale(100 / 80, celsius)

UNITS: Dict[str, Unit] = {
    "kelvin": kelvin,
    "rankine": rankine,
    "celsius": celsius,
    "fahrenheit": fahrenheit,
    "reaumur": reaumur,
}

ALIASES: Dict[str, str] = {
    "K": "kelvin",
    "degR": "rankine",
    "degC": "celsius",
    "°C": "celsius",
    "degF": "fahrenheit",
    "°F": "fahrenheit",
    "degRe": "reaumur",
}
