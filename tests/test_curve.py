"""Tests for the curve-parametrized easing family."""

import numpy as np
import pytest

from nova_easing import ease_in_curve, ease_out_curve, ease_in_out_curve
from nova_easing.numeric import Float32, Float64, f32x4, f32x8, f64x4


class TestLinearGuard:
    @pytest.mark.parametrize("curve", [0.0, 0.0005, -0.0009])
    @pytest.mark.parametrize("t", [0.0, 0.13, 0.5, 0.77, 1.0, 1.5])
    def test_small_curve_is_identity(self, t, curve):
        assert ease_in_curve(t, curve) == t

    def test_identity_for_float32(self):
        t = np.float32(0.37)
        assert ease_in_curve(t, 0.0) == t

    def test_threshold_is_exclusive(self):
        assert ease_in_curve(0.5, 0.001) != 0.5

    def test_vector_small_curve_is_identity(self):
        t = f32x4([0.1, 0.3, 0.6, 0.9])
        result = ease_in_curve(t, 0.0)
        np.testing.assert_array_equal(np.asarray(result), np.asarray(t))

    def test_per_lane_curve_guard(self):
        t = f64x4.splat(0.5)
        curve = f64x4([0.0, 1.0, 0.0005, -1.0])
        result = np.asarray(ease_in_curve(t, curve))
        assert result[0] == 0.5
        assert result[2] == 0.5
        np.testing.assert_allclose(result[1], 0.3775407, atol=1e-6)
        np.testing.assert_allclose(result[3], 1.0 - 0.3775407, atol=1e-6)


class TestCurveShape:
    def test_positive_curve_is_convex(self):
        assert ease_in_curve(0.5, 2.0) < 0.5

    def test_negative_curve_is_concave(self):
        assert ease_in_curve(0.5, -2.0) > 0.5

    def test_out_curve_mirrors_in_curve(self):
        for t in [0.1, 0.3, 0.7, 0.9]:
            np.testing.assert_allclose(ease_out_curve(t, 1.5), 1.0 - ease_in_curve(1.0 - t, 1.5), atol=1e-12)

    def test_in_out_curve_midpoint(self):
        np.testing.assert_allclose(ease_in_out_curve(0.5, 3.0), 0.5, atol=1e-12)

    def test_in_out_curve_halves(self):
        np.testing.assert_allclose(ease_in_out_curve(0.25, 1.0), ease_in_curve(0.5, 1.0) / 2, atol=1e-12)
        np.testing.assert_allclose(
            ease_in_out_curve(0.75, 1.0), 0.5 + ease_out_curve(0.5, 1.0) / 2, atol=1e-12
        )


class TestCurveCoercion:
    def test_scalar_curve_is_splatted(self):
        t = f32x4([0.2, 0.4, 0.6, 0.8])
        splatted = np.asarray(ease_in_curve(t, f32x4.splat(1.0)))
        broadcast = np.asarray(ease_in_curve(t, 1.0))
        np.testing.assert_array_equal(splatted, broadcast)

    def test_matching_scalar_representation_is_splatted(self):
        t = f32x4.splat(0.5)
        result = np.asarray(ease_in_curve(t, Float32(1.0)))
        np.testing.assert_allclose(result, [0.377541] * 4, atol=1e-6)

    def test_mismatched_lane_count(self):
        with pytest.raises(TypeError):
            ease_in_curve(f32x4.splat(0.5), f32x8.splat(1.0))

    def test_mismatched_float_kind(self):
        with pytest.raises(TypeError):
            ease_in_curve(f32x4.splat(0.5), f64x4.splat(1.0))
        with pytest.raises(TypeError):
            ease_in_curve(f32x4.splat(0.5), Float64(1.0))

    def test_vector_curve_for_scalar_argument(self):
        with pytest.raises(TypeError):
            ease_in_curve(0.5, f64x4.splat(1.0))

    @pytest.mark.parametrize("function", [ease_in_curve, ease_out_curve, ease_in_out_curve])
    def test_non_numeric_curve(self, function):
        with pytest.raises(TypeError):
            function(0.5, "steep")

    def test_result_keeps_argument_type(self):
        assert isinstance(ease_out_curve(f64x4.splat(0.5), 1.0), f64x4)
        assert isinstance(ease_in_out_curve(Float64(0.5), 1.0), Float64)
        assert type(ease_in_out_curve(0.5, 1.0)) is float
