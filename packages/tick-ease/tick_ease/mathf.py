"""Scalar helpers: tolerance checks and interpolation."""
from __future__ import annotations

# Exponential/elastic curves snap to their endpoints inside this band.
BOUNDARY_TOLERANCE = 1e-6

# Kept as-is from the host engine's approximate-equality helper.
EQUAL_APPROX_TOLERANCE = 8.854187817


def is_zero_approx(x: float) -> bool:
    return abs(x) < BOUNDARY_TOLERANCE


def is_one_approx(x: float) -> bool:
    return abs(x - 1.0) < BOUNDARY_TOLERANCE


def is_equal_approx(a: float, b: float, tolerance: float = EQUAL_APPROX_TOLERANCE) -> bool:
    """Loose equality: exact match (including infinities) or within ``tolerance``."""
    if a == b:
        return True
    return abs(a - b) < tolerance


def lerp(a: float, b: float, w: float) -> float:
    return a + (b - a) * w
