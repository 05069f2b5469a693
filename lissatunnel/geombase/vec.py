"""Immutable 3D and 4D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, slots=True)
class Vec3:
    x: float
    y: float
    z: float

    @staticmethod
    def zero() -> "Vec3":
        return Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def from_array(arr) -> "Vec3":
        return Vec3(float(arr[0]), float(arr[1]), float(arr[2]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> "Vec3":
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vec3":
        return Vec3(self.x / k, self.y / k, self.z / k)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Vec3":
        """Unit vector in the same direction. A zero vector is returned as is."""
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return Vec3(self.x / mag, self.y / mag, self.z / mag)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def transform(self, matrix) -> "Vec3":
        """
        Apply a 4x4 affine matrix to this vector treated as a point.

        w = 1 is implied and there is no perspective divide, so the last
        row of the matrix is ignored.
        """
        m = matrix
        return Vec3(
            m[0][0] * self.x + m[0][1] * self.y + m[0][2] * self.z + m[0][3],
            m[1][0] * self.x + m[1][1] * self.y + m[1][2] * self.z + m[1][3],
            m[2][0] * self.x + m[2][1] * self.y + m[2][2] * self.z + m[2][3],
        )


@dataclass(frozen=True, slots=True)
class Vec4:
    x: float
    y: float
    z: float
    w: float

    @staticmethod
    def zero() -> "Vec4":
        return Vec4(0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def from_array(arr) -> "Vec4":
        return Vec4(float(arr[0]), float(arr[1]), float(arr[2]), float(arr[3]))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: "Vec4") -> "Vec4":
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vec4") -> "Vec4":
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, k: float) -> "Vec4":
        return Vec4(self.x * k, self.y * k, self.z * k, self.w * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vec4":
        return Vec4(self.x / k, self.y / k, self.z / k, self.w / k)

    def __neg__(self) -> "Vec4":
        return Vec4(-self.x, -self.y, -self.z, -self.w)

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Vec4":
        mag = self.magnitude()
        if mag == 0.0:
            return self
        return Vec4(self.x / mag, self.y / mag, self.z / mag, self.w / mag)

    def dot(self, other: "Vec4") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def project_to_3d(self) -> Vec3:
        """
        Stereographic projection from the pole w = 1.

        At w == 1 the result is non-finite (inf, or nan for zero components)
        rather than an exception. Callers keep w away from the pole.
        """
        with np.errstate(divide="ignore", invalid="ignore"):
            scale = np.float64(1.0) / np.float64(1.0 - self.w)
            return Vec3(float(self.x * scale), float(self.y * scale), float(self.z * scale))
