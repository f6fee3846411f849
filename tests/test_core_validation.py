import math
from fractions import Fraction

import numpy as np
import pytest

from gridunits.core.types import as_quantity
from gridunits.core.validation import ensure_finite, ensure_positive


def test_ensure_positive_ok():
    ensure_positive(1.0, "x")


def test_ensure_positive_raises():
    with pytest.raises(ValueError):
        ensure_positive(0.0, "x")


def test_ensure_finite_raises_on_inf_and_nan():
    with pytest.raises(ValueError, match="x must be finite"):
        ensure_finite(math.inf, "x")
    with pytest.raises(ValueError):
        ensure_finite(float("nan"), "x")


def test_as_quantity_converts_sequences_only():
    arr = as_quantity([1, 2, 3])
    assert isinstance(arr, np.ndarray)
    assert arr.dtype.kind == "i"

    assert isinstance(as_quantity((1.0, 2.0)), np.ndarray)
    assert as_quantity(2.5) == 2.5

    a = np.array([1.0, 2.0])
    assert as_quantity(a) is a


def test_as_quantity_keeps_complex_and_exact_types():
    assert as_quantity([1j, 2]).dtype.kind == "c"
    assert as_quantity([Fraction(1, 3)])[0] == Fraction(1, 3)
