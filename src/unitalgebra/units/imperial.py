"""Imperial length units and the speeds built on them."""

from __future__ import annotations

from typing import Dict

from ..core.unit import Unit, base_length, per, scale
from .si import hour, second

inch = scale(0.0254, base_length)
foot = scale(0.3048, base_length)
yard = scale(0.9144, base_length)
mile = scale(1609.34, base_length)
nautical_mile = scale(1852.0, base_length)

foot_per_second = per(foot, second)
mile_per_hour = per(mile, hour)
knot = per(nautical_mile, hour)

UNITS: Dict[str, Unit] = {
    "inch": inch,
    "foot": foot,
    "yard": yard,
    "mile": mile,
    "nautical_mile": nautical_mile,
    "foot_per_second": foot_per_second,
    "mile_per_hour": mile_per_hour,
    "knot": knot,
}

ALIASES: Dict[str, str] = {
    "in": "inch",
    "ft": "foot",
    "feet": "foot",
    "yd": "yard",
    "mi": "mile",
    "nmi": "nautical_mile",
    "ft/s": "foot_per_second",
    "mph": "mile_per_hour",
    "kn": "knot",
}
