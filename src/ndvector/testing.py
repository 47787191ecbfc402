"""
Tolerance-based comparison for vectors.

Vector equality is exact. Floating-point results are compared here instead,
with tolerances taken from the 'comparison' config section unless given.
"""

from typing import Optional

import numpy as np

from ndvector.config import get_setting
from ndvector.vector import Vector, VectorLike


def _as_vector(value: VectorLike) -> Vector:
    if isinstance(value, Vector):
        return value
    return Vector.from_iterable(value)


def _tolerances(rtol: Optional[float], atol: Optional[float]):
    if rtol is None:
        rtol = get_setting('comparison.rtol', 0.0)
    if atol is None:
        atol = get_setting('comparison.atol', 1e-15)
    return rtol, atol


def isclose(
    a: VectorLike,
    b: VectorLike,
    rtol: Optional[float] = None,
    atol: Optional[float] = None,
) -> bool:
    """True if a and b share a dimension and every component is within tolerance."""
    a, b = _as_vector(a), _as_vector(b)
    if len(a) != len(b):
        return False
    rtol, atol = _tolerances(rtol, atol)
    return bool(np.allclose(a.components, b.components, rtol=rtol, atol=atol))


def assert_vector_close(
    actual: VectorLike,
    expected: VectorLike,
    rtol: Optional[float] = None,
    atol: Optional[float] = None,
) -> None:
    """Raise AssertionError unless actual is close to expected."""
    actual, expected = _as_vector(actual), _as_vector(expected)
    rtol, atol = _tolerances(rtol, atol)
    if not isclose(actual, expected, rtol=rtol, atol=atol):
        raise AssertionError(
            f"{actual!r} != {expected!r} (rtol={rtol}, atol={atol})"
        )
