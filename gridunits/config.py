"""Конфиг табличного представления констант (`gridunits.table`)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


NAMESPACES: Tuple[str, ...] = ("prefix", "unit", "units")


@dataclass(frozen=True)
class TableConfig:
    namespaces: Tuple[str, ...] = NAMESPACES
    float_format: str = "%.17g"  # 17 значащих цифр: float64 читается обратно без потерь

    def __post_init__(self) -> None:
        if not self.namespaces:
            raise ValueError("namespaces must not be empty")
        unknown = [ns for ns in self.namespaces if ns not in NAMESPACES]
        if unknown:
            raise ValueError(f"Unknown namespaces: {unknown}; expected a subset of {list(NAMESPACES)}")


DEFAULT_TABLE_CONFIG = TableConfig()
