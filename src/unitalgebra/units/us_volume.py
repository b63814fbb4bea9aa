"""US customary liquid volume and fuel economy."""

from __future__ import annotations

from typing import Dict

from ..core.unit import Unit, base_length, per, power, scale
from .imperial import mile

gallon = scale(0.00378541178, power(base_length, 3))
quart = scale(0.25, gallon)
pint = scale(0.5, quart)
cup = scale(0.5, pint)
fluid_ounce = scale(0.125, cup)
tablespoon = scale(0.5, fluid_ounce)
teaspoon = scale(1 / 3, tablespoon)

miles_per_gallon = per(mile, gallon)
kilometres_per_litre = per(scale(1000.0, base_length), scale(0.001, power(base_length, 3)))

UNITS: Dict[str, Unit] = {
    "gallon": gallon,
    "quart": quart,
    "pint": pint,
    "cup": cup,
    "fluid_ounce": fluid_ounce,
    "tablespoon": tablespoon,
    "teaspoon": teaspoon,
    "miles_per_gallon": miles_per_gallon,
    "kilometres_per_litre": kilometres_per_litre,
}

ALIASES: Dict[str, str] = {
    "gal": "gallon",
    "qt": "quart",
    "pt": "pint",
    "fl_oz": "fluid_ounce",
    "tbsp": "tablespoon",
    "tsp": "teaspoon",
    "mpg": "miles_per_gallon",
    "kmpl": "kilometres_per_litre",
    "km/L": "kilometres_per_litre",
}
