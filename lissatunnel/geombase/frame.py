"""Helpers for 4x4 frame matrices built from curve trihedrons."""

from __future__ import annotations

import math

import numpy as np
from scipy.spatial.transform import Rotation

from .vec import Vec3


def frame_matrix(x_axis: Vec3, y_axis: Vec3, z_axis: Vec3, origin: Vec3) -> np.ndarray:
    """
    Build an affine 4x4 matrix whose columns are the given axes and origin.

    A point (px, py, pz) of the local frame maps to
    origin + px * x_axis + py * y_axis + pz * z_axis.
    """
    return np.array(
        [
            [x_axis.x, y_axis.x, z_axis.x, origin.x],
            [x_axis.y, y_axis.y, z_axis.y, origin.y],
            [x_axis.z, y_axis.z, z_axis.z, origin.z],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def transform_points(points: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """Apply an affine 4x4 matrix to an (N, 3) array of points (w = 1, no divide)."""
    matrix = np.asarray(matrix, dtype=np.float64)
    pts = np.asarray(points, dtype=np.float64)
    return pts @ matrix[:3, :3].T + matrix[:3, 3]


def frame_rotation_angle(m0: np.ndarray, m1: np.ndarray) -> float:
    """Angle (radians) of the rotation carrying frame m0 onto frame m1."""
    r0 = np.asarray(m0, dtype=np.float64)[:3, :3]
    r1 = np.asarray(m1, dtype=np.float64)[:3, :3]
    relative = r0.T @ r1
    return float(Rotation.from_matrix(relative).magnitude())


def max_frame_delta(curve, samples: int) -> float:
    """
    Largest rotation between frames at consecutive parameters along one loop.

    The curve is sampled at t = 2*pi*i/samples, i = 0..samples. A small
    value means the sweep has no sudden frame flips at this resolution.
    """
    prev = curve.transform_matrix(0.0)
    worst = 0.0
    for i in range(1, samples + 1):
        t = 2.0 * math.pi * i / samples
        cur = curve.transform_matrix(t)
        worst = max(worst, frame_rotation_angle(prev, cur))
        prev = cur
    return worst
