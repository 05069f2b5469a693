"""
Сферическая кривая Лиссажу в 3D.

    position(t) = r * (sin(at) cos(bt), sin(at) sin(bt), cos(at))

Кривая лежит на сфере радиуса r. Вдоль неё строится трёхгранник
(касательная d1, нормаль d2, бинормаль d3), в который переносится
сечение туннеля.
"""

from __future__ import annotations

import math
from enum import Enum

import numpy as np

from lissatunnel.errors import InvalidArgument, require_finite, require_positive
from lissatunnel.geombase import Vec3, frame_matrix


class NormalPolicy(Enum):
    """How d2 (the frame normal) is derived from position and tangent."""

    RADIAL = "radial"
    """Radial direction with its tangential component removed."""

    CROSS = "cross"
    """normalize(position x tangent)."""


class Lissajous3D:
    """
    Spherical Lissajous curve with a sweep frame.

    Parameters:
        a, b: frequencies of the polar and azimuthal angles
        r: sphere radius
        normal_policy: fixed for the lifetime of the curve
    """

    __slots__ = ("_a", "_b", "_r", "_normal_policy")

    def __init__(self, a: float, b: float, r: float, normal_policy: NormalPolicy = NormalPolicy.RADIAL):
        require_finite("Lissajous3D", a=a, b=b)
        require_positive("Lissajous3D", r=r)
        self._a = float(a)
        self._b = float(b)
        self._r = float(r)
        self._normal_policy = NormalPolicy(normal_policy)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def r(self) -> float:
        return self._r

    @property
    def normal_policy(self) -> NormalPolicy:
        return self._normal_policy

    def __repr__(self) -> str:
        return f"Lissajous3D(a={self._a}, b={self._b}, r={self._r}, normal_policy={self._normal_policy.value})"

    def position(self, t: float) -> Vec3:
        at = self._a * t
        bt = self._b * t
        sa = math.sin(at)
        return Vec3(
            self._r * sa * math.cos(bt),
            self._r * sa * math.sin(bt),
            self._r * math.cos(at),
        )

    def d1(self, t: float) -> Vec3:
        """Unit tangent. r only scales the derivative, so it is left out."""
        a = self._a
        b = self._b
        sa, ca = math.sin(a * t), math.cos(a * t)
        sb, cb = math.sin(b * t), math.cos(b * t)
        return Vec3(
            a * ca * cb - b * sa * sb,
            a * ca * sb + b * sa * cb,
            -a * sa,
        ).normalize()

    def d2(self, t: float) -> Vec3:
        """Unit normal of the sweep frame, orthogonal to d1."""
        p = self.position(t)
        tangent = self.d1(t)

        if self._normal_policy is NormalPolicy.CROSS:
            return p.cross(tangent).normalize()

        radial = p.normalize()
        return (radial - tangent * radial.dot(tangent)).normalize()

    def d3(self, t: float) -> Vec3:
        """Binormal, completes the right-handed trihedron (d2, d3, d1)."""
        return self.d1(t).cross(self.d2(t))

    def transform_matrix(self, t: float) -> np.ndarray:
        """
        4x4 sweep frame at t with columns (d2, d3, d1, position).

        The local X/Y plane of a cross-section maps onto the normal/binormal
        plane, local Z onto the tangent.
        """
        tangent = self.d1(t)
        normal = self.d2(t)
        binormal = tangent.cross(normal)
        return frame_matrix(normal, binormal, tangent, self.position(t))

    def sample(self, num_points: int) -> np.ndarray:
        """Positions at t = 2*pi*i/num_points, shape (num_points, 3)."""
        if num_points < 1:
            raise InvalidArgument(f"Lissajous3D: num_points must be >= 1, got {num_points!r}")
        t = np.arange(num_points, dtype=np.float64) * (2.0 * np.pi / num_points)
        sa = np.sin(self._a * t)
        return self._r * np.stack(
            [sa * np.cos(self._b * t), sa * np.sin(self._b * t), np.cos(self._a * t)],
            axis=1,
        )
