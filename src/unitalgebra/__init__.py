"""Dimensional analysis with exact unit algebra and affine-aware conversion."""

__version__ = "0.1.0"

from .core import (
    DIMENSIONLESS,
    Dimension,
    DimensionalError,
    ExactRational,
    IncompatibleUnitsError,
    Unit,
    affine_unit,
    base_amount,
    base_current,
    base_length,
    base_luminous_intensity,
    base_mass,
    base_temperature,
    base_time,
    compatible,
    convert,
    convert_strict,
    from_int,
    inv,
    mul,
    over,
    per,
    power,
    scale,
    unity,
)

__all__ = [
    "__version__",
    "DIMENSIONLESS",
    "Dimension",
    "DimensionalError",
    "ExactRational",
    "IncompatibleUnitsError",
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
    "from_int",
    "over",
]
