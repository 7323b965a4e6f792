"""3D basis, quaternion and transform helpers.

A ``Basis`` stores its three axis vectors as columns ``x``, ``y`` and ``z``.
Quaternions are plain ``(x, y, z, w)`` tuples.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from tick_vec import vec
from tick_vec.vec import Vec3

Quat = tuple[float, float, float, float]

UP: Vec3 = (0.0, 1.0, 0.0)
QUAT_IDENTITY: Quat = (0.0, 0.0, 0.0, 1.0)

# Below this angular gap slerp falls back to a straight lerp.
SLERP_EPSILON = 1e-6


def quat_normalize(q: Quat) -> Quat:
    return vec.normalize(q)  # type: ignore[return-value]


def slerp(a: Quat, b: Quat, w: float) -> Quat:
    """Spherical interpolation along the shortest arc from ``a`` to ``b``."""
    cosom = vec.dot(a, b)
    if cosom < 0.0:
        cosom = -cosom
        b = vec.scale(b, -1.0)  # type: ignore[assignment]

    if 1.0 - cosom > SLERP_EPSILON:
        omega = math.acos(min(cosom, 1.0))
        sinom = math.sin(omega)
        s0 = math.sin((1.0 - w) * omega) / sinom
        s1 = math.sin(w * omega) / sinom
    else:
        s0 = 1.0 - w
        s1 = w
    return vec.add(vec.scale(a, s0), vec.scale(b, s1))  # type: ignore[return-value]


@dataclass(frozen=True)
class Basis:
    x: Vec3 = (1.0, 0.0, 0.0)
    y: Vec3 = (0.0, 1.0, 0.0)
    z: Vec3 = (0.0, 0.0, 1.0)

    def determinant(self) -> float:
        return vec.dot(self.x, vec.cross(self.y, self.z))

    def orthonormalized(self) -> Basis:
        """Gram-Schmidt, keeping the direction of ``x`` first, then ``y``."""
        x = vec.normalize(self.x)
        y = vec.normalize(vec.sub(self.y, vec.scale(x, vec.dot(x, self.y))))
        z = vec.sub(self.z, vec.scale(x, vec.dot(x, self.z)))
        z = vec.normalize(vec.sub(z, vec.scale(y, vec.dot(y, self.z))))
        return Basis(x, y, z)  # type: ignore[arg-type]

    def get_scale(self) -> Vec3:
        sign = -1.0 if self.determinant() < 0.0 else 1.0
        return (
            sign * vec.magnitude(self.x),
            sign * vec.magnitude(self.y),
            sign * vec.magnitude(self.z),
        )

    def get_rotation_quat(self) -> Quat:
        m = self.orthonormalized()
        if m.determinant() < 0.0:
            m = Basis(vec.scale(m.x, -1.0), vec.scale(m.y, -1.0), vec.scale(m.z, -1.0))  # type: ignore[arg-type]
        return quat_from_basis(m)

    @classmethod
    def from_quat_scale(cls, q: Quat, s: Vec3 = (1.0, 1.0, 1.0)) -> Basis:
        qx, qy, qz, qw = q
        x = (1.0 - 2.0 * (qy * qy + qz * qz), 2.0 * (qx * qy + qz * qw), 2.0 * (qx * qz - qy * qw))
        y = (2.0 * (qx * qy - qz * qw), 1.0 - 2.0 * (qx * qx + qz * qz), 2.0 * (qy * qz + qx * qw))
        z = (2.0 * (qx * qz + qy * qw), 2.0 * (qy * qz - qx * qw), 1.0 - 2.0 * (qx * qx + qy * qy))
        return cls(vec.scale(x, s[0]), vec.scale(y, s[1]), vec.scale(z, s[2]))  # type: ignore[arg-type]


def quat_from_basis(b: Basis) -> Quat:
    """Rotation quaternion of an orthonormal, right-handed basis."""
    m00, m10, m20 = b.x
    m01, m11, m21 = b.y
    m02, m12, m22 = b.z
    trace = m00 + m11 + m22

    if trace > 0.0:
        s = 0.5 / math.sqrt(trace + 1.0)
        q = ((m21 - m12) * s, (m02 - m20) * s, (m10 - m01) * s, 0.25 / s)
    elif m00 > m11 and m00 > m22:
        s = 2.0 * math.sqrt(1.0 + m00 - m11 - m22)
        q = (0.25 * s, (m01 + m10) / s, (m02 + m20) / s, (m21 - m12) / s)
    elif m11 > m22:
        s = 2.0 * math.sqrt(1.0 + m11 - m00 - m22)
        q = ((m01 + m10) / s, 0.25 * s, (m12 + m21) / s, (m02 - m20) / s)
    else:
        s = 2.0 * math.sqrt(1.0 + m22 - m00 - m11)
        q = ((m02 + m20) / s, (m12 + m21) / s, 0.25 * s, (m10 - m01) / s)
    return quat_normalize(q)


@dataclass(frozen=True)
class Transform3D:
    basis: Basis = Basis()
    origin: Vec3 = (0.0, 0.0, 0.0)

    def interpolate_with(self, other: Transform3D, w: float) -> Transform3D:
        """Slerp rotation, lerp scale and origin."""
        rot = quat_normalize(
            slerp(self.basis.get_rotation_quat(), other.basis.get_rotation_quat(), w)
        )
        scl = vec.lerp(self.basis.get_scale(), other.basis.get_scale(), w)
        return Transform3D(
            Basis.from_quat_scale(rot, scl),  # type: ignore[arg-type]
            vec.lerp(self.origin, other.origin, w),  # type: ignore[arg-type]
        )


def set_forward(t: Transform3D, w: float, forward: Vec3, up: Vec3 | None = None) -> Transform3D:
    """Turn ``t`` a fraction ``w`` of the way towards facing ``forward``.

    The target basis has Z along ``forward``, Y along ``up`` (world up by
    default) and X = up x forward, orthonormalized. ``forward`` must not be
    parallel to ``up``.
    """
    if up is None:
        up = UP
    target = Basis(vec.cross(up, forward), up, forward).orthonormalized()
    return t.interpolate_with(Transform3D(target, t.origin), w)
