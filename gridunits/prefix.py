"""SI-приставки (безразмерные множители).

Пример: 5 * milli * unit.darcy -> 5 мД в м².
"""

from __future__ import annotations

__all__ = ["micro", "milli", "centi", "deci", "kilo", "mega", "giga"]

micro: float = 1.0e-6
milli: float = 1.0e-3
centi: float = 1.0e-2
deci: float = 1.0e-1
kilo: float = 1.0e3
mega: float = 1.0e6
giga: float = 1.0e9
