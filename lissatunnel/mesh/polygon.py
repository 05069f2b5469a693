"""Regular polygon used as the tunnel cross-section."""

from __future__ import annotations

import numpy as np

from lissatunnel.errors import InvalidArgument, require_positive
from lissatunnel.geombase import Vec3, transform_points


class RegularPolygon:
    """
    Правильный N-угольник в локальной плоскости XY.

    Вершины лежат на окружности радиуса radius под углами 2*pi*i/sides
    против часовой стрелки. После построения не изменяется.
    """

    __slots__ = ("_radius", "_sides", "_vertices", "_points")

    def __init__(self, radius: float, sides: int):
        if isinstance(sides, bool) or not isinstance(sides, (int, np.integer)):
            raise InvalidArgument(f"RegularPolygon: sides must be an integer, got {sides!r}")
        if sides < 3:
            raise InvalidArgument("RegularPolygon: sides must be >= 3")
        require_positive("RegularPolygon", radius=radius)

        self._radius = float(radius)
        self._sides = int(sides)

        angles = np.arange(self._sides, dtype=np.float64) * (2.0 * np.pi / self._sides)
        points = np.zeros((self._sides, 3), dtype=np.float64)
        points[:, 0] = self._radius * np.cos(angles)
        points[:, 1] = self._radius * np.sin(angles)
        points.flags.writeable = False

        self._points = points
        self._vertices = tuple(Vec3.from_array(p) for p in points)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def sides(self) -> int:
        return self._sides

    @property
    def vertices(self) -> tuple[Vec3, ...]:
        return self._vertices

    def __len__(self) -> int:
        return self._sides

    def __repr__(self) -> str:
        return f"RegularPolygon(radius={self._radius}, sides={self._sides})"

    def transform(self, matrix) -> list[Vec3]:
        """Vertices mapped through a 4x4 affine matrix, as a fresh list."""
        return [v.transform(matrix) for v in self._vertices]

    def transform_array(self, matrix) -> np.ndarray:
        """Vertices mapped through a 4x4 affine matrix, shape (sides, 3)."""
        return transform_points(self._points, matrix)

    def generate_line_vertices(self, matrix) -> np.ndarray:
        """
        Outline of the transformed polygon as line segments.

        Each edge contributes two points (6 floats); the closing edge runs
        from the last vertex back to vertex 0. Returns float32, length sides*6.
        """
        ring = self.transform_array(matrix)
        segments = np.empty((self._sides, 2, 3), dtype=np.float32)
        segments[:, 0] = ring
        segments[:, 1] = np.roll(ring, -1, axis=0)
        return segments.reshape(-1)
