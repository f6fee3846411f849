"""Табличное представление всех констант (pandas).

Нужно для сверки с внешними источниками и для выгрузки в CSV;
сами расчёты используют модули `prefix`/`unit`/`units` напрямую.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterable, Optional

import pandas as pd

from . import prefix, unit, units
from .config import DEFAULT_TABLE_CONFIG, NAMESPACES, TableConfig
from .core.validation import ensure_finite, ensure_positive

logger = logging.getLogger(__name__)

_MODULES: Dict[str, ModuleType] = {
    "prefix": prefix,
    "unit": unit,
    "units": units,
}

COLUMNS = ["namespace", "name", "value"]


def constants(namespaces: Optional[Iterable[str]] = None) -> Dict[str, Dict[str, float]]:
    """Публичные числовые константы по пространствам имён, в порядке `__all__`."""

    namespaces = NAMESPACES if namespaces is None else tuple(namespaces)
    if not namespaces:
        raise ValueError("namespaces must not be empty")

    out: Dict[str, Dict[str, float]] = {}
    for ns in namespaces:
        if ns not in _MODULES:
            raise ValueError(f"Unknown namespace: {ns}")
        module = _MODULES[ns]
        values: Dict[str, float] = {}
        for name in module.__all__:
            value = getattr(module, name)
            # функции (square/cubic) и подмодуль convert в таблицу не попадают
            if isinstance(value, (int, float)):
                values[name] = float(value)
        out[ns] = values
    return out


def unit_table(cfg: TableConfig | None = None) -> pd.DataFrame:
    cfg = cfg or DEFAULT_TABLE_CONFIG

    rows = [
        {"namespace": ns, "name": name, "value": value}
        for ns, values in constants(cfg.namespaces).items()
        for name, value in values.items()
    ]
    df = pd.DataFrame(rows, columns=COLUMNS)
    logger.debug("Built unit table: %d constants from %s", len(df), ", ".join(cfg.namespaces))
    return df


def audit_table(df: pd.DataFrame) -> None:
    """Каждая константа должна быть конечной и строго положительной."""

    for row in df.itertuples(index=False):
        name = f"{row.namespace}.{row.name}"
        ensure_finite(row.value, name)
        ensure_positive(row.value, name)


def write_table(path: str | Path, cfg: TableConfig | None = None) -> Path:
    cfg = cfg or DEFAULT_TABLE_CONFIG
    path = Path(path)

    df = unit_table(cfg)
    audit_table(df)

    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, float_format=cfg.float_format)
    logger.info("Wrote %d constants to %s", len(df), path)
    return path
