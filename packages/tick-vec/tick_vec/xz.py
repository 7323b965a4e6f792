"""Ground-plane helpers for Y-up 3D vectors.

These treat a ``(x, y, z)`` vector as a point on the XZ plane, ignoring or
preserving its height.
"""
from __future__ import annotations

import math

from tick_ease import lerp as lerpf

from tick_vec.vec import Vec2, Vec3


def as_vec2(v: Vec3) -> Vec2:
    return (v[0], v[2])


def magnitude_sq(v: Vec3) -> float:
    return v[0] * v[0] + v[2] * v[2]


def magnitude(v: Vec3) -> float:
    return math.sqrt(magnitude_sq(v))


def scale(v: Vec3, amount: float) -> Vec3:
    """Scale X and Z by ``amount``; Y is untouched."""
    return (v[0] * amount, v[1], v[2] * amount)


def lerp(v: Vec3, o: Vec3, w: float) -> Vec3:
    """Move ``v`` towards ``o`` on the ground plane, keeping ``v``'s height."""
    return (lerpf(v[0], o[0], w), v[1], lerpf(v[2], o[2], w))
