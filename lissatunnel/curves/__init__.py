"""Parametric Lissajous curves with sweep frames."""

from lissatunnel.curves.lissajous3d import Lissajous3D, NormalPolicy
from lissatunnel.curves.lissajous4d import Lissajous4D

__all__ = [
    "Lissajous3D",
    "Lissajous4D",
    "NormalPolicy",
]
