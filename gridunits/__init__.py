"""gridunits package.

Таблица единиц измерения: все числа внутри расчёта хранятся в SI,
а на границе (ввод/вывод) переводятся через `gridunits.unit.convert`.

Пакет не должен иметь побочных эффектов при импорте, поэтому здесь нет
eager-import'ов (в частности pandas из `gridunits.table`).

Импортируй нужное напрямую:
- from gridunits import prefix
- from gridunits import unit
- from gridunits.unit import convert
"""

from __future__ import annotations

__all__: list[str] = []
