"""Перевод величин между внешними единицами и внутренним SI.

Внутренние единицы *всегда* и исключительно SI.

Пример: массив проницаемостей kx в миллидарси -> м²::

    from gridunits.prefix import milli
    from gridunits.unit import convert, darcy

    kx_si = convert.from_(kx, milli * darcy)

Обратно, давление в Па -> psi::

    p_psi = convert.to(p, psia)

`from` в Python зарезервировано, поэтому функция называется `from_`.
"""

from __future__ import annotations

import numpy as np

from ..core.types import Quantity, as_quantity

__all__ = ["from_", "to"]


def from_(q: Quantity, unit: Quantity) -> Quantity:
    """Внешние единицы `unit` -> SI: q * unit."""

    return as_quantity(q) * as_quantity(unit)


def to(q: Quantity, unit: Quantity) -> Quantity:
    """SI -> внешние единицы `unit`: q / unit.

    Деление на ноль не проверяется отдельно: результат по IEEE 754
    (+inf, -inf или nan), без исключения.
    """

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.divide(as_quantity(q), as_quantity(unit))
