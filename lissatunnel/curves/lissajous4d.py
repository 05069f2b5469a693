"""
Кривая Лиссажу на трёхмерной сфере в R^4.

    position(t) = r * (sin(at) cos(bt) sin(ct),
                       sin(at) sin(bt) sin(ct),
                       cos(at) sin(ct),
                       cos(ct))

Для просмотра в 3D точки проецируются стереографически (Vec4.project_to_3d).
"""

from __future__ import annotations

import math

import numpy as np

from lissatunnel.errors import InvalidArgument, require_finite, require_positive
from lissatunnel.geombase import Vec4

# Оси для достраивания базиса методом Грама-Шмидта
_AXES = (
    Vec4(1.0, 0.0, 0.0, 0.0),
    Vec4(0.0, 1.0, 0.0, 0.0),
    Vec4(0.0, 0.0, 1.0, 0.0),
    Vec4(0.0, 0.0, 0.0, 1.0),
)

_GS_EPS = 1e-9


class Lissajous4D:
    """Lissajous curve on the 3-sphere of radius r with frequencies a, b, c."""

    __slots__ = ("_a", "_b", "_c", "_r")

    def __init__(self, a: float, b: float, c: float, r: float):
        require_finite("Lissajous4D", a=a, b=b, c=c)
        require_positive("Lissajous4D", r=r)
        self._a = float(a)
        self._b = float(b)
        self._c = float(c)
        self._r = float(r)

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def c(self) -> float:
        return self._c

    @property
    def r(self) -> float:
        return self._r

    def __repr__(self) -> str:
        return f"Lissajous4D(a={self._a}, b={self._b}, c={self._c}, r={self._r})"

    def _trig(self, t: float):
        at = self._a * t
        bt = self._b * t
        ct = self._c * t
        return (
            math.sin(at), math.cos(at),
            math.sin(bt), math.cos(bt),
            math.sin(ct), math.cos(ct),
        )

    def position(self, t: float) -> Vec4:
        sa, ca, sb, cb, sc, cc = self._trig(t)
        r = self._r
        return Vec4(r * sa * cb * sc, r * sa * sb * sc, r * ca * sc, r * cc)

    def d1(self, t: float) -> Vec4:
        """Unit first derivative."""
        a, b, c = self._a, self._b, self._c
        sa, ca, sb, cb, sc, cc = self._trig(t)
        return Vec4(
            a * ca * cb * sc - b * sa * sb * sc + c * sa * cb * cc,
            a * ca * sb * sc + b * sa * cb * sc + c * sa * sb * cc,
            -a * sa * sc + c * ca * cc,
            -c * sc,
        ).normalize()

    def d2(self, t: float) -> Vec4:
        """
        Unit second derivative.

        This is not orthogonal to d1 in general: the curve is not
        arc-length parametrized. Use frame() for an orthonormal basis.
        """
        a, b, c = self._a, self._b, self._c
        sa, ca, sb, cb, sc, cc = self._trig(t)
        return Vec4(
            -a * a * sa * cb * sc - 2.0 * a * b * ca * sb * sc - b * b * sa * cb * sc
            + 2.0 * a * c * ca * cb * cc - 2.0 * b * c * sa * sb * cc - c * c * sa * cb * sc,
            -a * a * sa * sb * sc + 2.0 * a * b * ca * cb * sc - b * b * sa * sb * sc
            + 2.0 * a * c * ca * sb * cc + 2.0 * b * c * sa * cb * cc - c * c * sa * sb * sc,
            -a * a * ca * sc - 2.0 * a * c * sa * cc - c * c * ca * sc,
            -c * c * cc,
        ).normalize()

    def frame(self, t: float) -> tuple[Vec4, Vec4, Vec4, Vec4]:
        """
        Orthonormal basis (e1, e2, e3, e4) of R^4 attached to the curve at t.

        e1 is the tangent, e2 is the second derivative made orthogonal to it,
        e3 and e4 are completed from the coordinate axes by Gram-Schmidt.
        """
        basis: list[Vec4] = []
        for candidate in (self.d1(t), self.d2(t)) + _AXES:
            v = candidate
            for e in basis:
                v = v - e * v.dot(e)
            if v.magnitude() > _GS_EPS:
                basis.append(v.normalize())
            if len(basis) == 4:
                break
        return basis[0], basis[1], basis[2], basis[3]

    def sample(self, num_points: int) -> np.ndarray:
        """Positions at t = 2*pi*i/num_points, shape (num_points, 4)."""
        if num_points < 1:
            raise InvalidArgument(f"Lissajous4D: num_points must be >= 1, got {num_points!r}")
        t = np.arange(num_points, dtype=np.float64) * (2.0 * np.pi / num_points)
        sa, ca = np.sin(self._a * t), np.cos(self._a * t)
        sb, cb = np.sin(self._b * t), np.cos(self._b * t)
        sc, cc = np.sin(self._c * t), np.cos(self._c * t)
        return self._r * np.stack([sa * cb * sc, sa * sb * sc, ca * sc, cc], axis=1)
