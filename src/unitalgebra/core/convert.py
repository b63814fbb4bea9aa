"""Conversion of quantities between compatible units."""

from __future__ import annotations

import logging
from numbers import Real
from typing import Optional

import numpy as np

from .dimensions import IncompatibleUnitsError
from .unit import Unit

logger = logging.getLogger(__name__)


def compatible(a: Unit, b: Unit) -> bool:
    """Return ``True`` when ``a`` and ``b`` share exactly the same dimension."""

    return a.dimension == b.dimension


def _transform(quantity: float, from_unit: Unit, to_unit: Unit) -> float:
    # Map into the absolute base magnitude, then back out into the target numbering.
    with np.errstate(all="ignore"):
        absolute = np.float64(quantity) * from_unit._prefix + from_unit._zero
        return float((absolute - to_unit._zero) / np.float64(to_unit._prefix))


def convert(quantity: float, from_unit: Unit, to_unit: Unit) -> Optional[float]:
    """Convert ``quantity`` expressed in ``from_unit`` into ``to_unit``.

    Returns ``None`` when the units are not dimensionally compatible. No
    rounding or tolerance is applied; degenerate scales propagate ``inf`` or
    ``nan``.
    """

    if isinstance(quantity, bool) or not isinstance(quantity, Real):
        raise TypeError(f"quantity must be a real number, got {type(quantity).__name__}")
    if not compatible(from_unit, to_unit):
        logger.debug(
            "Incompatible conversion requested: %s -> %s",
            from_unit.dimension,
            to_unit.dimension,
        )
        return None
    if from_unit == to_unit:
        return float(quantity)
    return _transform(float(quantity), from_unit, to_unit)


def convert_strict(quantity: float, from_unit: Unit, to_unit: Unit) -> float:
    """Like :func:`convert`, but raise :class:`IncompatibleUnitsError` on a dimension mismatch."""

    result = convert(quantity, from_unit, to_unit)
    if result is None:
        raise IncompatibleUnitsError(from_unit.dimension, to_unit.dimension)
    return result


__all__ = ["compatible", "convert", "convert_strict"]
