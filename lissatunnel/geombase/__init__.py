"""
Базовая геометрия: векторы и матрицы фреймов.

- Vec3, Vec4 - неизменяемые векторы
- frame_matrix, transform_points - аффинные 4x4 преобразования
- frame_rotation_angle, max_frame_delta - контроль непрерывности фреймов
"""

from .vec import Vec3, Vec4
from .frame import frame_matrix, transform_points, frame_rotation_angle, max_frame_delta

__all__ = [
    'Vec3',
    'Vec4',
    'frame_matrix',
    'transform_points',
    'frame_rotation_angle',
    'max_frame_delta',
]
