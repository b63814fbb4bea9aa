"""SI base and derived units, with the metric prefixes."""

from __future__ import annotations

from typing import Dict

from ..core.unit import (
    Unit,
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


def _prefixer(factor: float):
    def apply(unit: Unit) -> Unit:
        return scale(factor, unit)

    return apply


yotta = _prefixer(1e24)
zetta = _prefixer(1e21)
exa = _prefixer(1e18)
peta = _prefixer(1e15)
tera = _prefixer(1e12)
giga = _prefixer(1e9)
mega = _prefixer(1e6)
kilo = _prefixer(1e3)
hecto = _prefixer(1e2)
deca = _prefixer(1e1)
deci = _prefixer(1e-1)
centi = _prefixer(1e-2)
milli = _prefixer(1e-3)
micro = _prefixer(1e-6)
nano = _prefixer(1e-9)
pico = _prefixer(1e-12)
femto = _prefixer(1e-15)
atto = _prefixer(1e-18)
zepto = _prefixer(1e-21)
yocto = _prefixer(1e-24)

# Base units
metre = base_length
second = base_time
kilogram = base_mass
kelvin = base_temperature
mole = base_amount
ampere = base_current
candela = base_luminous_intensity

gram = milli(kilogram)
tonne = scale(1000.0, kilogram)

kilometre = kilo(metre)
centimetre = centi(metre)
millimetre = milli(metre)
micrometre = micro(metre)

minute = scale(60.0, second)
hour = scale(3600.0, second)
day = scale(86400.0, second)

square_metre = power(metre, 2)
cubic_metre = power(metre, 3)
litre = scale(0.001, cubic_metre)
millilitre = milli(litre)

# Derived units
hertz = inv(second)
metre_per_second = per(metre, second)
kilometre_per_hour = per(kilometre, hour)
newton = per(mul(kilogram, metre), power(second, 2))
pascal = per(newton, square_metre)
joule = mul(newton, metre)
watt = per(joule, second)
coulomb = mul(ampere, second)
volt = per(watt, ampere)
ohm = per(volt, ampere)
kilowatt_hour = mul(kilo(watt), hour)

radian = unity
percent = scale(0.01, unity)

UNITS: Dict[str, Unit] = {
    "metre": metre,
    "kilometre": kilometre,
    "centimetre": centimetre,
    "millimetre": millimetre,
    "micrometre": micrometre,
    "second": second,
    "minute": minute,
    "hour": hour,
    "day": day,
    "kilogram": kilogram,
    "gram": gram,
    "tonne": tonne,
    "kelvin": kelvin,
    "mole": mole,
    "ampere": ampere,
    "candela": candela,
    "square_metre": square_metre,
    "cubic_metre": cubic_metre,
    "litre": litre,
    "millilitre": millilitre,
    "hertz": hertz,
    "metre_per_second": metre_per_second,
    "kilometre_per_hour": kilometre_per_hour,
    "newton": newton,
    "pascal": pascal,
    "joule": joule,
    "watt": watt,
    "coulomb": coulomb,
    "volt": volt,
    "ohm": ohm,
    "kilowatt_hour": kilowatt_hour,
    "radian": radian,
    "percent": percent,
}

ALIASES: Dict[str, str] = {
    "m": "metre",
    "meter": "metre",
    "km": "kilometre",
    "kilometer": "kilometre",
    "cm": "centimetre",
    "centimeter": "centimetre",
    "mm": "millimetre",
    "millimeter": "millimetre",
    "s": "second",
    "min": "minute",
    "h": "hour",
    "kg": "kilogram",
    "g": "gram",
    "t": "tonne",
    "K": "kelvin",
    "mol": "mole",
    "A": "ampere",
    "cd": "candela",
    "m^2": "square_metre",
    "m^3": "cubic_metre",
    "L": "litre",
    "liter": "litre",
    "mL": "millilitre",
    "Hz": "hertz",
    "m/s": "metre_per_second",
    "km/h": "kilometre_per_hour",
    "N": "newton",
    "Pa": "pascal",
    "J": "joule",
    "W": "watt",
    "C": "coulomb",
    "V": "volt",
    "Ω": "ohm",
    "kWh": "kilowatt_hour",
    "rad": "radian",
    "%": "percent",
}
