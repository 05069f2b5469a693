"""Tunnel mesh containers and vertex layout definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np


class VertexAttribType(Enum):
    FLOAT32 = "float32"
    INT32 = "int32"
    UINT32 = "uint32"


class VertexAttribute:
    def __init__(self, name, size, vtype: VertexAttribType, offset):
        self.name = name
        self.size = size
        self.vtype = vtype
        self.offset = offset

    def __repr__(self):
        return f"VertexAttribute({self.name!r}, {self.size}, {self.vtype.value}, {self.offset})"


class VertexLayout:
    def __init__(self, stride, attributes):
        self.stride = stride    # размер одной вершины в байтах
        self.attributes = attributes  # список VertexAttribute

    def attribute(self, name: str) -> VertexAttribute:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        raise KeyError(name)


def tunnel_vertex_layout() -> VertexLayout:
    """Vertex layout for TunnelMesh: pos(3) + color(4)."""
    return VertexLayout(
        stride=7 * 4,
        attributes=[
            VertexAttribute("position", 3, VertexAttribType.FLOAT32, 0),
            VertexAttribute("color",    4, VertexAttribType.FLOAT32, 12),
        ]
    )


@dataclass(frozen=True)
class TunnelMesh:
    """
    Indexed tunnel mesh.

    One shared vertex buffer with three independent index buffers, so each
    overlay (walls, longitude lines, latitude lines) can be toggled without
    touching vertex data.
    """

    positions: np.ndarray
    """Vertex positions, shape (V, 3), float32."""

    colors: np.ndarray
    """Vertex colors RGBA, shape (V, 4), float32."""

    triangles: np.ndarray
    """Triangle indices, shape (T, 3), uint32."""

    long_lines: np.ndarray
    """Longitude line indices (along the curve), shape (L, 2), uint32."""

    lat_lines: np.ndarray
    """Latitude line indices (around each ring), shape (M, 2), uint32."""

    rings: int
    """Number of rings including the closing one."""

    sides: int
    """Vertices per ring."""

    @property
    def vertex_count(self) -> int:
        return self.positions.shape[0]

    def ring_slice(self, ring: int) -> slice:
        """Vertex range that belongs to ring number `ring`."""
        if not 0 <= ring < self.rings:
            raise IndexError(f"ring {ring} out of range [0, {self.rings})")
        return slice(ring * self.sides, (ring + 1) * self.sides)

    def interleaved_buffer(self) -> np.ndarray:
        """Positions and colors packed per vertex, shape (V, 7), float32."""
        return np.hstack([self.positions, self.colors]).astype(np.float32)

    def get_vertex_layout(self) -> VertexLayout:
        return tunnel_vertex_layout()


class TunnelBuffers(NamedTuple):
    """Three non-indexed float32 streams of packed (x, y, z) triples."""

    longitude: np.ndarray
    latitude: np.ndarray
    tunnel: np.ndarray


def empty_buffer() -> np.ndarray:
    return np.zeros(0, dtype=np.float32)
