"""Tests for Lissajous3D: positions, derivatives and the sweep frame."""

import math

import numpy as np
import pytest

from lissatunnel import InvalidArgument
from lissatunnel.curves import Lissajous3D, NormalPolicy
from lissatunnel.geombase import Vec3, max_frame_delta

SAMPLE_TS = [0.0, 0.1, 0.7, 1.3, math.pi / 3, 2.9, 4.4, 6.0]


def frame_axes(curve, t):
    m = curve.transform_matrix(t)
    return m[:3, 0], m[:3, 1], m[:3, 2], m[:3, 3]


class TestPosition:
    def test_position_at_zero(self):
        """sin(0) = 0, cos(0) = 1 -> north pole of the sphere."""
        curve = Lissajous3D(a=3, b=2, r=5)
        assert curve.position(0) == Vec3(0.0, 0.0, 5.0)

    @pytest.mark.parametrize("t", [0.0, math.pi / 4, math.pi / 2, math.pi, 2 * math.pi])
    def test_lies_on_sphere(self, t):
        curve = Lissajous3D(a=3, b=2, r=5)
        assert curve.position(t).magnitude() == pytest.approx(5.0)

    def test_sample_matches_position(self):
        curve = Lissajous3D(2, 7, 5)
        points = curve.sample(16)
        assert points.shape == (16, 3)
        for i, p in enumerate(points):
            expected = curve.position(2 * math.pi * i / 16)
            np.testing.assert_allclose(p, expected.as_array(), atol=1e-12)

    def test_sample_rejects_zero_points(self):
        with pytest.raises(InvalidArgument):
            Lissajous3D(2, 7, 5).sample(0)


class TestValidation:
    @pytest.mark.parametrize(
        "args",
        [
            (math.nan, 1.0, 1.0),
            (1.0, math.inf, 1.0),
            (1.0, 1.0, 0.0),
            (1.0, 1.0, -2.0),
            (1.0, 1.0, math.nan),
        ],
    )
    def test_rejects_bad_parameters(self, args):
        with pytest.raises(InvalidArgument):
            Lissajous3D(*args)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            Lissajous3D(1.0, 1.0, 0.0)

    def test_properties(self):
        curve = Lissajous3D(2, 7, 5)
        assert (curve.a, curve.b, curve.r) == (2.0, 7.0, 5.0)
        assert curve.normal_policy is NormalPolicy.RADIAL


class TestDerivatives:
    @pytest.mark.parametrize("t", SAMPLE_TS)
    def test_d1_is_unit_tangent(self, t):
        curve = Lissajous3D(2, 7, 5)
        h = 1e-6
        numeric = (curve.position(t + h) - curve.position(t - h)).normalize()
        d1 = curve.d1(t)
        assert d1.magnitude() == pytest.approx(1.0)
        np.testing.assert_allclose(d1.as_array(), numeric.as_array(), atol=1e-6)

    @pytest.mark.parametrize("policy", list(NormalPolicy))
    @pytest.mark.parametrize("t", SAMPLE_TS)
    def test_trihedron_is_orthonormal(self, policy, t):
        curve = Lissajous3D(2, 7, 5, normal_policy=policy)
        d1, d2, d3 = curve.d1(t), curve.d2(t), curve.d3(t)
        for v in (d1, d2, d3):
            assert v.magnitude() == pytest.approx(1.0)
        assert d1.dot(d2) == pytest.approx(0.0, abs=1e-12)
        assert d1.dot(d3) == pytest.approx(0.0, abs=1e-12)
        assert d2.dot(d3) == pytest.approx(0.0, abs=1e-12)

    @pytest.mark.parametrize("t", SAMPLE_TS)
    def test_radial_normal_points_away_from_center(self, t):
        """On a sphere the tangent is orthogonal to the radius, so d2 is the radial direction."""
        curve = Lissajous3D(2, 7, 5)
        radial = curve.position(t).normalize()
        np.testing.assert_allclose(curve.d2(t).as_array(), radial.as_array(), atol=1e-12)

    @pytest.mark.parametrize("t", SAMPLE_TS)
    def test_cross_normal_is_negated_radial_binormal(self, t):
        radial = Lissajous3D(2, 7, 5, normal_policy=NormalPolicy.RADIAL)
        cross = Lissajous3D(2, 7, 5, normal_policy=NormalPolicy.CROSS)
        np.testing.assert_allclose(cross.d2(t).as_array(), (-radial.d3(t)).as_array(), atol=1e-12)

    def test_degenerate_tangent_does_not_produce_nan(self):
        """a = b = 0 makes the curve a single point; normalize keeps zeros."""
        curve = Lissajous3D(0, 0, 1)
        assert curve.d1(1.0) == Vec3(0.0, 0.0, 0.0)
        assert not np.isnan(curve.transform_matrix(1.0)).any()


class TestTransformMatrix:
    @pytest.mark.parametrize("t", SAMPLE_TS)
    def test_columns_are_d2_d3_d1_position(self, t):
        curve = Lissajous3D(3, 2, 4)
        x, y, z, origin = frame_axes(curve, t)
        np.testing.assert_allclose(x, curve.d2(t).as_array(), atol=1e-12)
        np.testing.assert_allclose(y, curve.d3(t).as_array(), atol=1e-12)
        np.testing.assert_allclose(z, curve.d1(t).as_array(), atol=1e-12)
        np.testing.assert_allclose(origin, curve.position(t).as_array(), atol=1e-12)

    @pytest.mark.parametrize("policy", list(NormalPolicy))
    def test_frame_is_right_handed(self, policy):
        curve = Lissajous3D(2, 7, 5, normal_policy=policy)
        for t in SAMPLE_TS:
            m = curve.transform_matrix(t)
            assert np.linalg.det(m[:3, :3]) == pytest.approx(1.0)
            np.testing.assert_array_equal(m[3], [0.0, 0.0, 0.0, 1.0])

    @pytest.mark.parametrize("policy", list(NormalPolicy))
    def test_frames_change_continuously(self, policy):
        """Consecutive frames at 1000 samples never jump."""
        curve = Lissajous3D(2, 7, 5, normal_policy=policy)
        assert max_frame_delta(curve, 1000) < 0.25

    def test_loop_is_closed(self):
        """Integer frequencies give the same frame at t = 0 and t = 2*pi."""
        curve = Lissajous3D(2, 7, 5)
        np.testing.assert_allclose(
            curve.transform_matrix(0.0), curve.transform_matrix(2 * math.pi), atol=1e-9
        )
