"""tick-vec - Tuple vector math, XZ-plane helpers and 3D transforms."""
from __future__ import annotations

from tick_vec import vec, xz
from tick_vec.basis import UP, Basis, Quat, Transform3D, set_forward, slerp

__all__ = [
    "UP",
    "Basis",
    "Quat",
    "Transform3D",
    "set_forward",
    "slerp",
    "vec",
    "xz",
]
