"""Vector math helpers operating on tuple[float, ...]."""
from __future__ import annotations

import math

Vec = tuple[float, ...]
Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


def add(a: Vec, b: Vec) -> Vec:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Vec, b: Vec) -> Vec:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def scale(v: Vec, s: float) -> Vec:
    return tuple(vi * s for vi in v)


def dot(a: Vec, b: Vec) -> float:
    return sum(ai * bi for ai, bi in zip(a, b, strict=True))


def cross(a: Vec3, b: Vec3) -> Vec3:
    if len(a) != 3 or len(b) != 3:
        raise ValueError(f"cross product needs 3D vectors, got {len(a)}D and {len(b)}D")
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def magnitude_sq(v: Vec) -> float:
    return sum(vi * vi for vi in v)


def magnitude(v: Vec) -> float:
    return math.sqrt(magnitude_sq(v))


def normalize(v: Vec) -> Vec:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def lerp(a: Vec, b: Vec, w: float) -> Vec:
    """Component-wise ``a + (b - a) * w``."""
    return tuple(ai + (bi - ai) * w for ai, bi in zip(a, b, strict=True))
