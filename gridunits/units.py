"""gridunits.units

Отдельная «историческая» таблица, которой пользуются расчёты скважин.

Значения заданы литералами и НЕ выводятся из `gridunits.unit`; они немного
отличаются от соответствующих констант там (например, FEET != unit.feet).
Таблицы не взаимозаменяемы, не объединять.
"""

from __future__ import annotations

__all__ = [
    "MILLIDARCY",
    "VISCOSITY_UNIT",
    "DAYS2SECONDS",
    "FEET",
    "WELL_INDEX_UNIT",
]

MILLIDARCY: float = 9.86923e-16
VISCOSITY_UNIT: float = 1e-3
DAYS2SECONDS: float = 86400.0
FEET: float = 0.30479999798832
WELL_INDEX_UNIT: float = VISCOSITY_UNIT / (DAYS2SECONDS * 1e5)
