"""gridunits.core.types

Типы величин, с которыми работают `square`/`cubic` и `convert`.

Скаляр (любой числовой тип), numpy-массив или pandas-объект проходят как есть (у них уже есть
поэлементное умножение). list/tuple приводятся к numpy-массиву, иначе
`[1, 2] * 2` означало бы повтор списка, а не умножение.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

import numpy as np
from numpy.typing import NDArray


Quantity = Union[int, float, complex, NDArray[Any], Sequence[Any]]


def as_quantity(q):
    """Привести list/tuple к numpy-массиву (dtype выбирает numpy); остальное вернуть как есть."""

    if isinstance(q, (list, tuple)):
        return np.asarray(q)
    return q
