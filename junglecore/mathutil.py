"""Scalar math helpers and numeric constants used across the engine core."""

from __future__ import annotations

import math
from typing import Any

PI = 3.1415926535897932
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4


def clamp(x: Any, min_value: Any, max_value: Any) -> Any:
    """Clamp ``x`` into the range ``[min_value, max_value]``."""
    return max(min(x, max_value), min_value)


def lerp(a: Any, b: Any, alpha: float) -> Any:
    """Linearly interpolate between ``a`` and ``b`` by ``alpha``."""
    return a * (1.0 - alpha) + b * alpha


def radians_to_degrees(rad_val: float) -> float:
    """Convert an angle in radians to degrees."""
    return rad_val * (180.0 / PI)


def degrees_to_radians(deg_val: float) -> float:
    """Convert an angle in degrees to radians."""
    return deg_val * (PI / 180.0)


def unwind_degrees(a: float) -> float:
    """Bring an angle in degrees into the range [-180, 180]."""
    while a > 180.0:
        a -= 360.0
    while a < -180.0:
        a += 360.0
    return a


def ceil_to_int(value: float) -> int:
    """Round ``value`` up to the nearest integer."""
    return int(math.ceil(value))


def square(value: Any) -> Any:
    """Return ``value`` multiplied by itself."""
    return value * value


def inv_sqrt(a: float) -> float:
    """Return the reciprocal square root of ``a`` (infinity for zero)."""
    root = math.sqrt(a)
    if root == 0.0:
        return math.inf
    return 1.0 / root