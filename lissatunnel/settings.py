"""
Tunnel settings - the values a host passes into regeneration and camera queries.

Replaces process-wide toggles with one explicit in-memory struct.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, fields, replace
from typing import NamedTuple

from lissatunnel import log

SPEED_MIN = -0.5
SPEED_MAX = 0.5
NUM_POLYGONS_MIN = 10
NUM_POLYGONS_MAX = 1000
ALPHA_MIN = 0.0
ALPHA_MAX = 1.0


def _clamp(value, lo, hi):
    return max(lo, min(hi, value))


class MeshParams(NamedTuple):
    """Everything the tunnel geometry depends on."""

    a: float
    b: float
    r: float
    polygon_radius: float
    polygon_sides: int
    num_polygons: int
    wall_alpha: float


@dataclass
class TunnelSettings:
    """
    Curve, tunnel and display parameters.

    Defaults reproduce the stock scene: a (2, 7) Lissajous curve on a
    sphere of radius 5 with a heptagonal cross-section of radius 1.
    """

    a: float = 2.0
    b: float = 7.0
    r: float = 5.0

    polygon_radius: float = 1.0
    polygon_sides: int = 7
    num_polygons: int = 200
    """Ring count along the loop, kept in [NUM_POLYGONS_MIN, NUM_POLYGONS_MAX]."""

    speed: float = 0.1
    """Camera parameter increment per frame, kept in [SPEED_MIN, SPEED_MAX]."""

    show_longitude: bool = True
    show_latitude: bool = True
    show_tunnel: bool = True
    outside_view: bool = False

    wall_alpha: float = 0.5
    """Opacity of tunnel vertex colors."""

    def clamped(self) -> "TunnelSettings":
        """Copy with speed, polygon count and alpha moved into their ranges."""
        return replace(
            self,
            speed=_clamp(float(self.speed), SPEED_MIN, SPEED_MAX),
            num_polygons=_clamp(int(self.num_polygons), NUM_POLYGONS_MIN, NUM_POLYGONS_MAX),
            wall_alpha=_clamp(float(self.wall_alpha), ALPHA_MIN, ALPHA_MAX),
        )

    def mesh_params(self) -> MeshParams:
        return MeshParams(
            a=self.a,
            b=self.b,
            r=self.r,
            polygon_radius=self.polygon_radius,
            polygon_sides=self.polygon_sides,
            num_polygons=self.num_polygons,
            wall_alpha=self.wall_alpha,
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "TunnelSettings":
        """Deserialize from dictionary. Missing keys keep defaults, unknown keys are ignored."""
        known = {f.name for f in fields(TunnelSettings)}
        unknown = sorted(set(data) - known)
        if unknown:
            log.warn(f"[TunnelSettings] Ignoring unknown keys: {', '.join(unknown)}")
        return TunnelSettings(**{k: v for k, v in data.items() if k in known})

