"""The :class:`Unit` value type and its algebra.

A unit is a dimension vector together with a linear scale (``prefix``)
relative to the SI base combination of that dimension, and an affine offset
(``zero``) for scales whose numeric zero is not the physical zero, such as
degrees Celsius. Units are immutable; every operation returns a new value.

The fields are private. Units are built from :data:`unity` and the seven base
constructors through :func:`scale`, :func:`mul`, :func:`inv`, :func:`per`,
:func:`power` and :func:`affine_unit` only.

Float arithmetic follows IEEE semantics: a zero scale inverts to ``inf`` and a
negative base under a fractional power gives ``nan``. Nothing here raises for
degenerate magnitudes.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

import numpy as np

from .dimensions import (
    AMOUNT,
    CURRENT,
    DIMENSIONLESS,
    LENGTH,
    LUMINOSITY,
    MASS,
    TEMPERATURE,
    TIME,
    Dimension,
)
from .rational import RationalLike, as_rational, to_float


def _ieee_divide(numerator: float, denominator: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def _ieee_power(base: float, exponent: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.power(np.float64(base), np.float64(exponent)))


def _require_real(value: object, role: str) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{role} must be a real number, got {type(value).__name__}")
    return float(value)


def _require_unit(value: object) -> "Unit":
    if not isinstance(value, Unit):
        raise TypeError(f"Expected a Unit, got {type(value).__name__}")
    return value


@dataclass(frozen=True, init=False)
class Unit:
    """An immutable physical unit.

    Units cannot be constructed directly; start from :data:`unity` or a base
    unit and apply the algebra. Compare units for conversion eligibility with
    :func:`unitalgebra.core.convert.compatible`; ``==`` is full value
    equality including the scale and the offset.
    """

    _dimension: Dimension
    _prefix: float
    _zero: float

    def __init__(self, *args: object, **kwargs: object) -> None:
        raise TypeError(
            "Unit values are built from unity and the base units through the algebra operations"
        )

    @classmethod
    def _build(cls, dimension: Dimension, prefix: float = 1.0, zero: float = 0.0) -> Unit:
        unit = object.__new__(cls)
        object.__setattr__(unit, "_dimension", dimension)
        object.__setattr__(unit, "_prefix", prefix)
        object.__setattr__(unit, "_zero", zero)
        return unit

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    def is_affine(self) -> bool:
        """Return ``True`` when the unit's numeric zero is offset from physical zero."""
        return self._zero != 0

    # -- Operator sugar ---------------------------------------------------
    def __mul__(self, other: object) -> Unit:
        if isinstance(other, Unit):
            return mul(self, other)
        if isinstance(other, Real) and not isinstance(other, bool):
            return scale(other, self)
        return NotImplemented

    def __rmul__(self, other: object) -> Unit:
        if isinstance(other, Real) and not isinstance(other, bool):
            return scale(other, self)
        return NotImplemented

    def __truediv__(self, other: object) -> Unit:
        if isinstance(other, Unit):
            return per(self, other)
        return NotImplemented

    def __pow__(self, exponent: RationalLike) -> Unit:
        return power(self, exponent)

    def __repr__(self) -> str:
        text = f"Unit({self._dimension}, prefix={self._prefix!r}"
        if self._zero:
            text += f", zero={self._zero!r}"
        return text + ")"


unity = Unit._build(DIMENSIONLESS)
base_length = Unit._build(LENGTH)
base_time = Unit._build(TIME)
base_mass = Unit._build(MASS)
base_temperature = Unit._build(TEMPERATURE)
base_amount = Unit._build(AMOUNT)
base_current = Unit._build(CURRENT)
base_luminous_intensity = Unit._build(LUMINOSITY)


def scale(factor: float, unit: Unit) -> Unit:
    """Return ``unit`` with its linear scale multiplied by ``factor``.

    The dimension and the affine offset are unchanged. A zero factor is
    accepted; conversions into such a unit divide by zero.
    """

    unit = _require_unit(unit)
    return Unit._build(unit._dimension, unit._prefix * _require_real(factor, "factor"), unit._zero)


def mul(x: Unit, y: Unit) -> Unit:
    """Product of two units. The result is always linear."""

    x = _require_unit(x)
    y = _require_unit(y)
    return Unit._build(x._dimension * y._dimension, x._prefix * y._prefix, 0.0)


def inv(unit: Unit) -> Unit:
    """Reciprocal of ``unit``. The result is always linear."""

    unit = _require_unit(unit)
    return Unit._build(unit._dimension.invert(), _ieee_divide(1.0, unit._prefix), 0.0)


def per(numerator: Unit, denominator: Unit) -> Unit:
    return mul(numerator, inv(denominator))


def power(unit: Unit, exponent: RationalLike) -> Unit:
    """Raise ``unit`` to an exact rational ``exponent``.

    Exponents are scaled exactly; the linear scale is raised through a float
    power. The offset is raised through the same float power, always. This
    keeps the historical numeric behaviour but has no physical meaning for
    most exponents: ``power(u, 0)`` gets an offset of 1 (``0.0 ** 0``) and a
    negative power of a linear unit gets an infinite offset.
    """

    unit = _require_unit(unit)
    exact = as_rational(exponent)
    real = to_float(exact)
    return Unit._build(
        unit._dimension**exact,
        _ieee_power(unit._prefix, real),
        _ieee_power(unit._zero, real),
    )


def affine_unit(zero_offset: float, unit: Unit) -> Unit:
    """Return ``unit`` with its numeric zero placed ``zero_offset`` base units above physical zero."""

    unit = _require_unit(unit)
    return Unit._build(unit._dimension, unit._prefix, _require_real(zero_offset, "zero_offset"))


__all__ = [
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
]
