"""Algebraic laws of the unit type."""

import dataclasses
import math
from fractions import Fraction

import hypothesis.strategies as st
import pytest
from hypothesis import given

from unitalgebra.core.dimensions import DIMENSIONLESS, LENGTH, VOLUME, Dimension
from unitalgebra.core.rational import from_int, over
from unitalgebra.core.unit import (
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

BASES = (
    base_length,
    base_time,
    base_mass,
    base_temperature,
    base_amount,
    base_current,
    base_luminous_intensity,
)

exponents = st.fractions(min_value=-4, max_value=4, max_denominator=6)
nonzero_exponents = exponents.filter(lambda value: value != 0)
prefixes = st.floats(min_value=1e-3, max_value=1e3)


@st.composite
def linear_units(draw):
    unit = unity
    for base in BASES:
        unit = mul(unit, power(base, draw(exponents)))
    return scale(draw(prefixes), unit)


def test_unity_is_dimensionless_and_linear():
    assert unity.dimension == DIMENSIONLESS
    assert unity._prefix == 1.0
    assert not unity.is_affine()


def test_each_base_sets_exactly_one_exponent():
    for index, base in enumerate(BASES):
        exps = base.dimension.as_tuple()
        assert exps[index] == 1
        assert sum(1 for value in exps if value != 0) == 1
        assert base._prefix == 1.0
    assert len({base.dimension for base in BASES}) == 7


def test_scale_keeps_dimension_and_offset():
    celsius = affine_unit(273.15, base_temperature)
    scaled = scale(1.25, celsius)
    assert scaled.dimension == celsius.dimension
    assert scaled._prefix == 1.25
    assert scaled._zero == 273.15


def test_scale_by_zero_is_permitted():
    degenerate = scale(0, base_length)
    assert degenerate._prefix == 0.0
    assert math.isinf(inv(degenerate)._prefix)


def test_mul_and_inv_reset_offset():
    celsius = affine_unit(273.15, base_temperature)
    assert not mul(celsius, unity).is_affine()
    assert not mul(celsius, celsius).is_affine()
    assert not inv(celsius).is_affine()
    assert not per(celsius, base_time).is_affine()


def test_affine_unit_replaces_offset_only():
    rankine = scale(5 / 9, base_temperature)
    fahrenheit = affine_unit(255.372, rankine)
    assert fahrenheit.dimension == rankine.dimension
    assert fahrenheit._prefix == rankine._prefix
    assert fahrenheit._zero == 255.372
    assert affine_unit(0.0, fahrenheit) == rankine


def test_per_is_mul_by_inverse():
    speed = per(scale(1000, base_length), scale(3600, base_time))
    assert speed == mul(scale(1000, base_length), inv(scale(3600, base_time)))
    assert speed.dimension == Dimension(length=1, time=-1)


def test_power_scales_prefix_through_float():
    cubic_cm = power(scale(0.01, base_length), 3)
    assert cubic_cm.dimension == VOLUME
    assert cubic_cm._prefix == pytest.approx(1e-6)


def test_power_of_negative_prefix_root_is_nan():
    odd = power(scale(-4, base_length), over(1, 2))
    assert math.isnan(odd._prefix)


def test_negative_power_raises_zero_offset_to_infinity():
    per_metre = power(base_length, -1)
    assert per_metre.dimension == inv(base_length).dimension
    assert per_metre._prefix == inv(base_length)._prefix
    assert math.isinf(per_metre._zero)


def test_zeroth_power_sets_offset_to_one():
    dimensionless = power(base_length, from_int(0))
    assert dimensionless.dimension == DIMENSIONLESS
    assert dimensionless._prefix == 1.0
    assert dimensionless._zero == 1.0


def test_power_carries_affine_offset():
    celsius = affine_unit(273.15, base_temperature)
    assert power(celsius, 1) == celsius
    assert power(celsius, 2)._zero == pytest.approx(273.15**2)


def test_power_rejects_float_exponent():
    with pytest.raises(TypeError):
        power(base_length, 0.5)  # type: ignore[arg-type]


def test_operator_sugar_matches_functions():
    metre = base_length
    second = base_time
    assert metre * second == mul(metre, second)
    assert metre / second == per(metre, second)
    assert metre**3 == power(metre, 3)
    assert 0.3048 * metre == scale(0.3048, metre)
    assert metre * 2 == scale(2, metre)


def test_operations_reject_non_units():
    with pytest.raises(TypeError):
        mul(base_length, 2)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        scale("2", base_length)  # type: ignore[arg-type]


def test_units_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        base_length._prefix = 2.0  # type: ignore[misc]


def test_units_cannot_be_constructed_directly():
    with pytest.raises(TypeError):
        Unit(LENGTH, 0.3048, 0.0)  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        Unit(LENGTH)  # type: ignore[call-arg]


def test_repr_shows_offset_only_when_affine():
    assert "zero" not in repr(base_length)
    assert "zero=273.15" in repr(affine_unit(273.15, base_temperature))


@given(linear_units())
def test_unity_is_two_sided_identity(unit):
    assert mul(unit, unity) == unit
    assert mul(unity, unit) == unit


@given(linear_units())
def test_inverse_cancels_dimension_and_prefix(unit):
    for product in (mul(unit, inv(unit)), mul(inv(unit), unit)):
        assert product.dimension.is_dimensionless()
        assert math.isclose(product._prefix, 1.0, rel_tol=1e-12)


@given(linear_units(), linear_units(), linear_units())
def test_mul_is_associative_on_dimensions(a, b, c):
    assert mul(mul(a, b), c).dimension == mul(a, mul(b, c)).dimension
    assert math.isclose(mul(mul(a, b), c)._prefix, mul(a, mul(b, c))._prefix, rel_tol=1e-12)


@given(linear_units(), linear_units())
def test_mul_is_commutative(a, b):
    assert mul(a, b) == mul(b, a)


@given(linear_units())
def test_power_identity_and_zero(unit):
    assert power(unit, from_int(1)) == unit
    zeroth = power(unit, from_int(0))
    assert zeroth.dimension == unity.dimension
    assert zeroth._prefix == 1.0
    assert zeroth._zero == 1.0


@given(linear_units(), exponents)
def test_power_scales_dimension_exactly(unit, exponent):
    assert power(unit, exponent).dimension == unit.dimension**exponent


@given(linear_units(), nonzero_exponents)
def test_power_round_trip_has_no_drift(unit, exponent):
    there = power(unit, exponent)
    back = power(there, 1 / exponent)
    assert back.dimension == unit.dimension
    assert mul(there, power(unit, -exponent)).dimension.is_dimensionless()


def test_cube_and_cube_root_cancel_exactly():
    metre = base_length
    litre = scale(0.001, metre**3)
    side = power(litre, over(1, 3))
    assert side.dimension == LENGTH
    assert (side**3).dimension == litre.dimension
    assert (litre / litre).dimension.is_dimensionless()
    assert isinstance(side.dimension.length, Fraction)
