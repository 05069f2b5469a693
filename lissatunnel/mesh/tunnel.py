"""
Построение туннеля: правильный многоугольник протягивается вдоль кривой.

Алгоритм:
1. Кривая сэмплируется в num_polygons + 1 точках t = 2*pi*i/num_polygons
   (последнее кольцо замыкает петлю, но остаётся отдельным набором вершин).
2. В каждой точке многоугольник переносится в трёхгранник кривой -> кольцо.
3. Из колец собираются треугольники стенок и линии долгот/широт,
   либо в индексном виде (TunnelMesh), либо плоскими буферами (TunnelBuffers).
"""

from __future__ import annotations

import math

import numpy as np

from lissatunnel.errors import InvalidArgument
from lissatunnel.mesh.mesh import TunnelBuffers, TunnelMesh, empty_buffer
from lissatunnel.mesh.polygon import RegularPolygon

DEFAULT_ALPHA = 0.5


def _check_num_polygons(num_polygons) -> int:
    if isinstance(num_polygons, bool) or not isinstance(num_polygons, (int, np.integer)):
        raise InvalidArgument(f"num_polygons must be an integer, got {num_polygons!r}")
    if num_polygons < 1:
        raise InvalidArgument("num_polygons must be >= 1")
    return int(num_polygons)


def ring_parameters(num_polygons: int) -> np.ndarray:
    """Curve parameters of all rings, the closing ring at t = 2*pi included."""
    num_polygons = _check_num_polygons(num_polygons)
    return np.array(
        [2.0 * math.pi * i / num_polygons for i in range(num_polygons + 1)],
        dtype=np.float64,
    )


def sample_rings(curve, polygon: RegularPolygon, num_polygons: int) -> tuple[np.ndarray, list[np.ndarray]]:
    """
    Transform the polygon into the curve frame at every ring parameter.

    Returns:
        rings: shape (num_polygons + 1, sides, 3), float64
        matrices: the 4x4 frame of each ring
    """
    matrices = [curve.transform_matrix(float(t)) for t in ring_parameters(num_polygons)]
    rings = np.stack([polygon.transform_array(m) for m in matrices])
    return rings, matrices


def ring_colors(num_polygons: int, alpha: float = DEFAULT_ALPHA) -> np.ndarray:
    """
    RGBA color of every ring, shape (num_polygons + 1, 4), float32.

    The closing ring copies the row of ring 0 instead of evaluating the
    formula at delta = 2*pi, so the loop has no color seam.
    """
    num_polygons = _check_num_polygons(num_polygons)
    if not 0.0 <= alpha <= 1.0:
        raise InvalidArgument(f"alpha must be in [0, 1], got {alpha!r}")

    colors = np.empty((num_polygons + 1, 4), dtype=np.float32)
    for i in range(num_polygons):
        delta = (i / num_polygons) * 2.0 * math.pi
        colors[i] = (
            0.5 + 0.5 * math.sin(delta),
            0.35 + 0.35 * math.cos(3.0 * delta),
            0.75 + 0.25 * math.sin(4.0 * delta),
            alpha,
        )
    colors[num_polygons] = colors[0]
    return colors


def generate_tunnel_mesh(
    curve,
    polygon_radius: float,
    polygon_sides: int,
    num_polygons: int,
    alpha: float = DEFAULT_ALPHA,
) -> TunnelMesh:
    """
    Indexed tunnel mesh with per-ring colors.

    Args:
        curve: anything with transform_matrix(t) -> 4x4 (Lissajous3D).
        polygon_radius: cross-section circumradius.
        polygon_sides: cross-section vertex count, >= 3.
        num_polygons: number of ring intervals along the loop, >= 1.
        alpha: wall opacity written into every vertex color.

    Returns:
        TunnelMesh with (num_polygons + 1) * polygon_sides vertices.
    """
    num_polygons = _check_num_polygons(num_polygons)
    polygon = RegularPolygon(polygon_radius, polygon_sides)
    sides = polygon.sides
    rings_count = num_polygons + 1

    rings, _ = sample_rings(curve, polygon, num_polygons)
    positions = rings.reshape(-1, 3).astype(np.float32)
    colors = np.repeat(ring_colors(num_polygons, alpha), sides, axis=0)

    triangles: list[list[int]] = []
    for i in range(num_polygons):
        for j in range(sides):
            next_j = (j + 1) % sides

            # Индексы четырёх вершин квада
            a = i * sides + j
            b = (i + 1) * sides + j
            c = i * sides + next_j
            d = (i + 1) * sides + next_j

            triangles.append([a, b, c])
            triangles.append([b, d, c])

    # Долготы - вдоль кривой
    long_lines: list[list[int]] = []
    for j in range(sides):
        for i in range(num_polygons):
            long_lines.append([i * sides + j, (i + 1) * sides + j])

    # Широты - вокруг каждого кольца, включая замыкающее
    lat_lines: list[list[int]] = []
    for i in range(rings_count):
        for j in range(sides):
            lat_lines.append([i * sides + j, i * sides + (j + 1) % sides])

    return TunnelMesh(
        positions=positions,
        colors=colors,
        triangles=np.asarray(triangles, dtype=np.uint32).reshape(-1, 3),
        long_lines=np.asarray(long_lines, dtype=np.uint32).reshape(-1, 2),
        lat_lines=np.asarray(lat_lines, dtype=np.uint32).reshape(-1, 2),
        rings=rings_count,
        sides=sides,
    )


def faces_outward(a, b, c, outward) -> np.ndarray:
    """
    True where the normal (b - a) x (c - a) points along outward.

    Broadcasts over leading axes, so one call tests a single triangle or a
    whole (rings, sides) grid of quads.
    """
    a = np.asarray(a, dtype=np.float64)
    normal = np.cross(np.asarray(b, dtype=np.float64) - a, np.asarray(c, dtype=np.float64) - a)
    return np.einsum("...k,...k->...", normal, np.asarray(outward, dtype=np.float64)) > 0.0


def orient_triangle(a, b, c, outward):
    """
    Order a triangle so that its normal (b - a) x (c - a) points along outward.

    Returns (a, b, c) when the normal already faces outward, (a, c, b)
    otherwise. Applying it to its own result changes nothing unless the
    triangle is degenerate or perpendicular to outward.
    """
    if faces_outward(a, b, c, outward):
        return a, b, c
    return a, c, b


def _oriented_walls(curve, rings: np.ndarray, ts: np.ndarray) -> np.ndarray:
    """Wall triangles of every quad, wound so that each faces away from the curve."""
    v0 = rings[:-1]
    v1 = rings[1:]
    v2 = np.roll(rings[:-1], -1, axis=1)
    v3 = np.roll(rings[1:], -1, axis=1)

    centers = np.array([curve.position(float(t)).as_array() for t in ts[:-1]])
    outward = (v0 + v1 + v2 + v3) * 0.25 - centers[:, None, :]
    keep = faces_outward(v0, v1, v2, outward)

    kept = np.stack([v0, v1, v2, v1, v3, v2], axis=2)
    flipped = np.stack([v0, v2, v1, v1, v2, v3], axis=2)
    return np.where(keep[:, :, None, None], kept, flipped)


def generate_tunnel_buffers(
    curve,
    polygon_radius: float,
    polygon_sides: int,
    num_polygons: int,
    compute_longitude: bool = True,
    compute_latitude: bool = True,
    compute_tunnel: bool = True,
) -> TunnelBuffers:
    """
    Non-indexed tunnel geometry as three flat float32 position streams.

    Longitude and latitude streams hold line segments with the same topology
    as generate_tunnel_mesh. The tunnel stream holds two triangles per quad,
    each wound to face away from the curve. Streams that are not requested
    come back empty.
    """
    num_polygons = _check_num_polygons(num_polygons)
    polygon = RegularPolygon(polygon_radius, polygon_sides)

    if not (compute_longitude or compute_latitude or compute_tunnel):
        return TunnelBuffers(empty_buffer(), empty_buffer(), empty_buffer())

    ts = ring_parameters(num_polygons)
    rings, matrices = sample_rings(curve, polygon, num_polygons)

    longitude = empty_buffer()
    if compute_longitude:
        # (rings-1, sides, 2, 3) -> side-major: all segments of side 0 first
        segments = np.stack([rings[:-1], rings[1:]], axis=2).transpose(1, 0, 2, 3)
        longitude = segments.reshape(-1).astype(np.float32)

    latitude = empty_buffer()
    if compute_latitude:
        latitude = np.concatenate([polygon.generate_line_vertices(m) for m in matrices])

    tunnel = empty_buffer()
    if compute_tunnel:
        tunnel = _oriented_walls(curve, rings, ts).reshape(-1).astype(np.float32)

    return TunnelBuffers(longitude, latitude, tunnel)
