"""gridunits.core.validation

Базовые проверки, чтобы ловить невозможные значения констант как можно раньше.
"""

from __future__ import annotations

import math


def ensure_finite(value: float, name: str) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def ensure_positive(value: float, name: str) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")
