"""Exact rational exponents for the unit algebra.

Dimension exponents are kept as :class:`fractions.Fraction` values so that
taking roots of a unit and multiplying back reproduces the original exponents
exactly. ``Fraction`` already stores its value in lowest terms with a positive
denominator, so equality of two exponents is plain structural equality.

Floating point only enters through :func:`to_float`, which feeds the real
valued power computation on a unit's linear scale.
"""

from __future__ import annotations

from fractions import Fraction
from numbers import Integral
from typing import Union

ExactRational = Fraction

RationalLike = Union[Fraction, int, str]


def _require_integer(value: object, role: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{role} must be an integer, got {type(value).__name__}")
    return int(value)


def from_int(n: int) -> ExactRational:
    """Return the rational ``n/1``."""

    return Fraction(_require_integer(n, "value"), 1)


def over(numerator: int, denominator: int) -> ExactRational:
    """Return ``numerator/denominator`` reduced to lowest terms.

    A zero denominator is a malformed literal and raises
    :class:`ZeroDivisionError` immediately.
    """

    num = _require_integer(numerator, "numerator")
    den = _require_integer(denominator, "denominator")
    if den == 0:
        raise ZeroDivisionError(f"rational {num}/0 has a zero denominator")
    return Fraction(num, den)


def add(a: ExactRational, b: ExactRational) -> ExactRational:
    return a + b


def negate(a: ExactRational) -> ExactRational:
    return -a


def multiply(a: ExactRational, b: ExactRational) -> ExactRational:
    return a * b


def to_float(a: ExactRational) -> float:
    return float(a)


def as_rational(value: RationalLike) -> ExactRational:
    """Coerce ``value`` into an exact rational.

    Accepts fractions, integers and numeric strings such as ``"1/2"`` or
    ``"-3"``. Floats are refused: an exponent that has already been through
    binary floating point is no longer exact.
    """

    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a valid exponent")
    if isinstance(value, Integral):
        return Fraction(int(value), 1)
    if isinstance(value, str):
        text = value.strip()
        if "." in text or "e" in text.lower():
            raise ValueError(f"Exponent '{value}' is not an exact rational literal")
        return Fraction(text)
    raise TypeError(
        f"Exponent must be an int, Fraction or rational string, got {type(value).__name__}"
    )


def format_rational(value: ExactRational) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


__all__ = [
    "ExactRational",
    "RationalLike",
    "from_int",
    "over",
    "add",
    "negate",
    "multiply",
    "to_float",
    "as_rational",
    "format_rational",
]
