"""Core primitives for unit-algebra."""

from .convert import compatible, convert, convert_strict
from .dimensions import (
    DIMENSIONLESS,
    Dimension,
    DimensionalError,
    IncompatibleUnitsError,
)
from .rational import ExactRational, as_rational, from_int, over, to_float
from .unit import (
    Unit,
    affine_unit,
    base_amount,
    base_current,
    base_length,
    base_luminous_intensity,
    base_mass,
    base_temperature,
    base_time,
    inv,
    mul,
    per,
    power,
    scale,
    unity,
)

__all__ = [
    "DIMENSIONLESS",
    "Dimension",
    "DimensionalError",
    "IncompatibleUnitsError",
    "ExactRational",
    "as_rational",
    "from_int",
    "over",
    "to_float",
    "Unit",
    "unity",
    "base_length",
    "base_time",
    "base_mass",
    "base_temperature",
    "base_amount",
    "base_current",
    "base_luminous_intensity",
    "scale",
    "mul",
    "inv",
    "per",
    "power",
    "affine_unit",
    "compatible",
    "convert",
    "convert_strict",
]
