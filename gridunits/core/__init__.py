"""Core utilities: types, validation."""

from __future__ import annotations

__all__ = [
    "types",
    "validation",
]
