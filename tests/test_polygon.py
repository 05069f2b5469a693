"""Tests for RegularPolygon."""

import math

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from lissatunnel import InvalidArgument
from lissatunnel.curves import Lissajous3D
from lissatunnel.mesh import RegularPolygon


def random_affine(seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    m = np.eye(4)
    m[:3, :3] = Rotation.from_rotvec(rng.normal(size=3)).as_matrix() * rng.uniform(0.5, 2.0)
    m[:3, 3] = rng.normal(size=3) * 3.0
    return m


class TestConstruction:
    @pytest.mark.parametrize("sides", [0, 1, 2, -5])
    def test_rejects_too_few_sides(self, sides):
        with pytest.raises(InvalidArgument):
            RegularPolygon(1.0, sides)

    @pytest.mark.parametrize("sides", [3.0, "7", True])
    def test_rejects_non_integer_sides(self, sides):
        with pytest.raises(InvalidArgument):
            RegularPolygon(1.0, sides)

    @pytest.mark.parametrize("radius", [0.0, -1.0, math.inf, math.nan])
    def test_rejects_bad_radius(self, radius):
        with pytest.raises(InvalidArgument):
            RegularPolygon(radius, 5)

    def test_accepts_numpy_integer(self):
        assert RegularPolygon(1.0, np.int64(6)).sides == 6

    def test_vertices_on_circle_counter_clockwise(self):
        polygon = RegularPolygon(2.0, 6)
        assert len(polygon) == 6
        assert polygon.radius == 2.0
        for i, v in enumerate(polygon.vertices):
            angle = 2 * math.pi * i / 6
            assert v.x == pytest.approx(2.0 * math.cos(angle))
            assert v.y == pytest.approx(2.0 * math.sin(angle))
            assert v.z == 0.0
        # CCW: cross product of consecutive vertices points along +Z
        v0, v1 = polygon.vertices[0], polygon.vertices[1]
        assert v0.cross(v1).z > 0.0


class TestTransform:
    @pytest.mark.parametrize("sides", [3, 4, 7, 32])
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_length_matches_sides(self, sides, seed):
        polygon = RegularPolygon(1.5, sides)
        assert len(polygon.transform(random_affine(seed))) == sides

    def test_does_not_mutate_polygon(self):
        polygon = RegularPolygon(1.0, 5)
        before = polygon.vertices
        polygon.transform(random_affine(3))
        assert polygon.vertices == before

    def test_returns_fresh_list(self):
        polygon = RegularPolygon(1.0, 5)
        m = np.eye(4)
        first = polygon.transform(m)
        second = polygon.transform(m)
        assert first == second
        assert first is not second

    def test_array_form_matches_list_form(self):
        polygon = RegularPolygon(1.0, 7)
        m = random_affine(4)
        expected = np.array([v.as_array() for v in polygon.transform(m)])
        np.testing.assert_allclose(polygon.transform_array(m), expected, atol=1e-12)

    def test_ring_lies_in_normal_plane_of_curve(self):
        """A polygon swept into a curve frame is orthogonal to the tangent."""
        curve = Lissajous3D(2, 7, 5)
        polygon = RegularPolygon(1.0, 8)
        t = 0.9
        center = curve.position(t)
        tangent = curve.d1(t)
        for v in polygon.transform(curve.transform_matrix(t)):
            offset = v - center
            assert offset.magnitude() == pytest.approx(1.0)
            assert offset.dot(tangent) == pytest.approx(0.0, abs=1e-12)


class TestLineVertices:
    def test_layout(self):
        polygon = RegularPolygon(1.0, 5)
        m = random_affine(5)
        lines = polygon.generate_line_vertices(m)
        ring = polygon.transform_array(m).astype(np.float32)

        assert lines.dtype == np.float32
        assert lines.shape == (5 * 6,)

        segments = lines.reshape(5, 2, 3)
        for i in range(5):
            np.testing.assert_array_equal(segments[i, 0], ring[i])
            np.testing.assert_array_equal(segments[i, 1], ring[(i + 1) % 5])

    def test_closing_edge_wraps_to_first_vertex(self):
        polygon = RegularPolygon(1.0, 4)
        segments = polygon.generate_line_vertices(np.eye(4)).reshape(4, 2, 3)
        np.testing.assert_allclose(segments[-1, 1], [1.0, 0.0, 0.0], atol=1e-7)
