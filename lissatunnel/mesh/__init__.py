"""Mesh module - RegularPolygon, TunnelMesh, TunnelBuffers and tunnel builders."""

from lissatunnel.mesh.polygon import RegularPolygon
from lissatunnel.mesh.mesh import (
    TunnelMesh,
    TunnelBuffers,
    VertexAttribType,
    VertexAttribute,
    VertexLayout,
    tunnel_vertex_layout,
)
from lissatunnel.mesh.tunnel import (
    generate_tunnel_mesh,
    generate_tunnel_buffers,
    ring_colors,
    ring_parameters,
    orient_triangle,
    faces_outward,
)

__all__ = [
    "RegularPolygon",
    "TunnelMesh",
    "TunnelBuffers",
    "VertexAttribType",
    "VertexAttribute",
    "VertexLayout",
    "tunnel_vertex_layout",
    "generate_tunnel_mesh",
    "generate_tunnel_buffers",
    "ring_colors",
    "ring_parameters",
    "orient_triangle",
    "faces_outward",
]
