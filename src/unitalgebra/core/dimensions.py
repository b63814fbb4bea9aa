"""Dimension vectors for the unit algebra.

A physical dimension is modelled as a vector of exact rational exponents over
the seven SI base quantities, in the order (length, time, mass, temperature,
amount of substance, electric current, luminous intensity). The
:class:`Dimension` type is closed under multiplication, division and rational
exponentiation, which mirror the group algebra of dimensional analysis.
Compatibility of two units is decided by exact equality of their dimensions.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple

from .rational import RationalLike, as_rational, format_rational


class DimensionalError(Exception):
    """Raised when a dimensional operation is invalid."""


class IncompatibleUnitsError(DimensionalError):
    """Raised when a strict conversion is asked to cross dimensions."""

    def __init__(self, source: "Dimension", target: "Dimension") -> None:
        super().__init__(f"Cannot convert between dimensions {source} and {target}")
        self.source = source
        self.target = target


_BASE_FIELDS: Tuple[str, ...] = (
    "length",
    "time",
    "mass",
    "temperature",
    "amount",
    "current",
    "luminosity",
)

_SYMBOLS: Tuple[str, ...] = ("L", "T", "M", "Θ", "N", "I", "J")


@dataclass(frozen=True)
class Dimension:
    """Representation of physical dimensions using exact rational exponents.

    Exponents are normalised to :class:`fractions.Fraction` on construction,
    so ``Dimension(length=1)`` and ``Dimension(length=Fraction(2, 2))`` are the
    same value. Floats are rejected.
    """

    length: Fraction = Fraction(0)
    time: Fraction = Fraction(0)
    mass: Fraction = Fraction(0)
    temperature: Fraction = Fraction(0)
    amount: Fraction = Fraction(0)
    current: Fraction = Fraction(0)
    luminosity: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        """Normalise every exponent to an exact rational."""
        for field in _BASE_FIELDS:
            value = getattr(self, field)
            if isinstance(value, float):
                raise ValueError(
                    f"Dimension exponent {field} must be exact, got float {value!r}"
                )
            object.__setattr__(self, field, as_rational(value))

    # -- Core algebra -----------------------------------------------------
    def __mul__(self, other: Dimension) -> Dimension:
        """Multiply two dimensions by adding their exponent vectors."""
        if not isinstance(other, Dimension):
            return NotImplemented

        return Dimension(*[a + b for a, b in zip(self.as_tuple(), other.as_tuple())])

    def __truediv__(self, other: Dimension) -> Dimension:
        """Divide two dimensions by subtracting exponent vectors."""
        if not isinstance(other, Dimension):
            return NotImplemented

        return Dimension(*[a - b for a, b in zip(self.as_tuple(), other.as_tuple())])

    def __pow__(self, exponent: RationalLike) -> Dimension:
        """Raise the dimension to an exact rational power."""
        factor = as_rational(exponent)
        return Dimension(*[value * factor for value in self.as_tuple()])

    def invert(self) -> Dimension:
        return Dimension(*[-value for value in self.as_tuple()])

    # -- Helpers ----------------------------------------------------------
    def as_tuple(self) -> Tuple[Fraction, ...]:
        return tuple(getattr(self, field) for field in _BASE_FIELDS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dimension):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:  # pragma: no cover - trivial
        return hash(self.as_tuple())

    def is_dimensionless(self) -> bool:
        """Return ``True`` when all exponents are zero."""
        return all(value == 0 for value in self.as_tuple())

    @classmethod
    def dimensionless(cls) -> Dimension:
        """Construct the dimensionless vector."""
        return cls()

    def __str__(self) -> str:
        if self.is_dimensionless():
            return "dimensionless"

        parts = []
        for symbol, power in zip(_SYMBOLS, self.as_tuple()):
            if power == 0:
                continue
            if power == 1:
                parts.append(symbol)
            else:
                parts.append(f"{symbol}^{format_rational(power)}")

        return " ".join(parts)


DIMENSIONLESS = Dimension.dimensionless()
LENGTH = Dimension(length=1)
TIME = Dimension(time=1)
MASS = Dimension(mass=1)
TEMPERATURE = Dimension(temperature=1)
AMOUNT = Dimension(amount=1)
CURRENT = Dimension(current=1)
LUMINOSITY = Dimension(luminosity=1)

AREA = LENGTH**2
VOLUME = LENGTH**3
VELOCITY = LENGTH / TIME
ACCELERATION = LENGTH / (TIME**2)
FORCE = MASS * ACCELERATION
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
PRESSURE = FORCE / AREA


__all__ = [
    "Dimension",
    "DimensionalError",
    "IncompatibleUnitsError",
    "DIMENSIONLESS",
    "LENGTH",
    "TIME",
    "MASS",
    "TEMPERATURE",
    "AMOUNT",
    "CURRENT",
    "LUMINOSITY",
    "AREA",
    "VOLUME",
    "VELOCITY",
    "ACCELERATION",
    "FORCE",
    "ENERGY",
    "POWER",
    "PRESSURE",
]
