"""
TunnelDriver - host-side state for an animated tunnel.

Holds the settings, rebuilds the mesh only when geometry parameters change,
and moves a camera parameter along the curve. Knows nothing about any
rendering API: a renderer pulls mesh() and camera_sample() every frame.

Usage:
    driver = TunnelDriver()
    driver.on_regenerated += upload_buffers

    # every frame:
    mesh = driver.mesh()
    cam = driver.camera_sample()
    driver.advance()
"""

from __future__ import annotations

from dataclasses import replace
from typing import NamedTuple

import numpy as np

from lissatunnel import log
from lissatunnel.core.event import Event
from lissatunnel.curves import Lissajous3D, NormalPolicy
from lissatunnel.geombase import Vec3
from lissatunnel.mesh import TunnelMesh, generate_tunnel_mesh
from lissatunnel.settings import MeshParams, TunnelSettings


class CameraSample(NamedTuple):
    """Curve data a renderer needs to place a first-person camera."""

    t: float
    position: Vec3
    forward: Vec3
    normal: Vec3


class TunnelDriver:
    def __init__(self, settings: TunnelSettings | None = None, normal_policy: NormalPolicy = NormalPolicy.RADIAL):
        self._settings = (settings or TunnelSettings()).clamped()
        self._normal_policy = NormalPolicy(normal_policy)
        self._curve = self._make_curve(self._settings)
        self._mesh: TunnelMesh | None = None
        self._mesh_params: MeshParams | None = None
        self._t = 0.0
        self.on_regenerated: Event[TunnelMesh] = Event()

    def _make_curve(self, settings: TunnelSettings) -> Lissajous3D:
        return Lissajous3D(settings.a, settings.b, settings.r, normal_policy=self._normal_policy)

    @property
    def settings(self) -> TunnelSettings:
        return self._settings

    @property
    def curve(self) -> Lissajous3D:
        return self._curve

    @property
    def t(self) -> float:
        return self._t

    # --- settings ---

    def apply(self, settings: TunnelSettings) -> None:
        """Replace all settings. Curve and mesh are rebuilt lazily if affected."""
        settings = settings.clamped()
        old = self._settings
        if (settings.a, settings.b, settings.r) != (old.a, old.b, old.r):
            self._curve = self._make_curve(settings)
        self._settings = settings

    def _update(self, **changes) -> None:
        self.apply(replace(self._settings, **changes))

    def set_speed(self, speed: float) -> None:
        self._update(speed=speed)

    def set_num_polygons(self, num: int) -> None:
        self._update(num_polygons=num)

    def set_show_longitude(self, show: bool) -> None:
        self._update(show_longitude=bool(show))

    def set_show_latitude(self, show: bool) -> None:
        self._update(show_latitude=bool(show))

    def set_show_tunnel(self, show: bool) -> None:
        self._update(show_tunnel=bool(show))

    def set_outside_view(self, outside: bool) -> None:
        self._update(outside_view=bool(outside))

    def set_wall_alpha(self, alpha: float) -> None:
        self._update(wall_alpha=alpha)

    # --- geometry ---

    def mesh(self) -> TunnelMesh:
        """Current mesh; regenerated only if geometry parameters changed since the last call."""
        params = self._settings.mesh_params()
        if self._mesh is not None and params == self._mesh_params:
            return self._mesh

        mesh = generate_tunnel_mesh(
            self._curve,
            params.polygon_radius,
            params.polygon_sides,
            params.num_polygons,
            alpha=params.wall_alpha,
        )
        self._mesh = mesh
        self._mesh_params = params
        log.debug(
            f"[TunnelDriver] Regenerated mesh: {mesh.vertex_count} vertices, "
            f"{len(mesh.triangles)} triangles ({params.num_polygons} polygons)"
        )
        self.on_regenerated.emit(mesh)
        return mesh

    def visible_index_buffers(self) -> dict[str, np.ndarray]:
        """Index buffers of the overlays that are switched on."""
        mesh = self.mesh()
        buffers: dict[str, np.ndarray] = {}
        if self._settings.show_tunnel:
            buffers["triangles"] = mesh.triangles
        if self._settings.show_longitude:
            buffers["long_lines"] = mesh.long_lines
        if self._settings.show_latitude:
            buffers["lat_lines"] = mesh.lat_lines
        return buffers

    # --- camera ---

    def advance(self, frames: int = 1) -> float:
        """Move the camera parameter by speed per frame; returns the new t."""
        self._t += self._settings.speed * frames
        return self._t

    def camera_sample(self) -> CameraSample:
        """Position at t; forward and normal from the curve frame at 2t."""
        t = self._t
        return CameraSample(
            t=t,
            position=self._curve.position(t),
            forward=self._curve.d1(2.0 * t),
            normal=self._curve.d2(2.0 * t),
        )
