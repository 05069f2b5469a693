"""
Lissatunnel - процедурная генерация туннеля вдоль кривой Лиссажу.

Основные модули:
- geombase - векторы Vec3/Vec4 и матрицы фреймов
- curves - кривые Лиссажу в 3D и 4D с трёхгранником
- mesh - правильный многоугольник и построение туннеля
- settings, driver - параметры и кеширующая регенерация для хоста
"""

from .errors import InvalidArgument
from .geombase import Vec3, Vec4
from .curves import Lissajous3D, Lissajous4D, NormalPolicy
from .mesh import RegularPolygon, TunnelMesh, TunnelBuffers, generate_tunnel_mesh, generate_tunnel_buffers

__version__ = '0.1.0'

__all__ = [
    'InvalidArgument',
    # Geombase
    'Vec3',
    'Vec4',
    # Curves
    'Lissajous3D',
    'Lissajous4D',
    'NormalPolicy',
    # Mesh
    'RegularPolygon',
    'TunnelMesh',
    'TunnelBuffers',
    'generate_tunnel_mesh',
    'generate_tunnel_buffers',
]
