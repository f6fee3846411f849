"""gridunits.unit

Основные и производные единицы, выраженные в SI.

Принцип: внутреннее представление *всегда* SI (meter = second = kilogram = 1).
Каждая производная единица получается произведением/частным уже
определённых констант, строго в порядке объявления ниже: пересчёт «по
учебнику» может дать другое округление в последнем бите.
"""

from __future__ import annotations

from ..core.types import Quantity, as_quantity
from ..prefix import centi, deci
from . import convert

__all__ = [
    "square",
    "cubic",
    "convert",
    # length
    "meter",
    "inch",
    "feet",
    # time
    "second",
    "minute",
    "hour",
    "day",
    "year",
    # mass
    "kilogram",
    "pound",
    # standardised constants
    "gravity",
    # force
    "Newton",
    "lbf",
    # pressure
    "Pascal",
    "barsa",
    "atm",
    "psia",
    # viscosity
    "Pas",
    "Poise",
    # permeability
    "darcy",
]


# Common powers
def square(v: Quantity) -> Quantity:
    """v * v, поэлементно для последовательностей."""

    v = as_quantity(v)
    return v * v


def cubic(v: Quantity) -> Quantity:
    """v * v * v, поэлементно для последовательностей."""

    v = as_quantity(v)
    return v * v * v


# Length
meter: float = 1.0
inch: float = 2.54 * centi * meter
feet: float = 12 * inch

# Time
second: float = 1.0
minute: float = 60 * second
hour: float = 60 * minute
day: float = 24 * hour
year: float = 365 * day

# Mass
kilogram: float = 1.0
pound: float = 0.45359237 * kilogram  # avoirdupois pound

# Standardised constants
gravity: float = 9.80665 * meter / square(second)

# Force
Newton: float = kilogram * meter / square(second)  # == 1
lbf: float = pound * gravity  # pound-force

# Pressure
Pascal: float = Newton / square(meter)  # == 1
barsa: float = 100000 * Pascal
atm: float = 101325 * Pascal
psia: float = lbf / square(inch)

# Viscosity
Pas: float = Pascal * second  # == 1
Poise: float = deci * Pas

# Permeability.
#
# Пористая среда с проницаемостью 1 darcy пропускает поток 1 см³/с жидкости
# вязкостью 1 сП при градиенте давления 1 atm/см через площадь 1 см².
_p_grad = atm / (centi * meter)
_area = square(centi * meter)
_flux = cubic(centi * meter) / second
_velocity = _flux / _area
_visc = centi * Poise

darcy: float = (_velocity * _visc) / _p_grad
# == 1e-7 [m^2] / 101325 == 9.869232667160130e-13 [m^2]
