"""Tests for curve sampling and representation comparison."""

import logging

import numpy as np
import pytest

from nova_easing import ease_in_quad, ease_out_sine
from nova_easing.config import EasingConfig, ToleranceSettings
from nova_easing.utils import sample_easing, compare_representations


class TestSampleEasing:
    def test_default_sampling(self):
        xs, ys = sample_easing('ease_in_quad')
        assert xs.shape == (512,)
        assert xs.dtype == np.float32
        assert ys.dtype == np.float32
        assert xs[0] == 0.0
        assert xs[-1] == 1.0
        np.testing.assert_allclose(ys, xs.astype(np.float64) ** 2, atol=1e-6)

    def test_points_are_evenly_spaced(self):
        xs, _ = sample_easing('ease_in_quad', num_points=5, representation='f64')
        np.testing.assert_array_equal(xs, [0.0, 0.25, 0.5, 0.75, 1.0])

    @pytest.mark.parametrize("representation", ['f32x4', 'f32x8', 'f64x16'])
    def test_vector_sampling_matches_scalar(self, representation):
        # 10 points leave a partial final chunk for every width
        dtype = np.float64 if representation.startswith('f64') else np.float32
        scalar_representation = 'f64' if dtype is np.float64 else 'f32'
        _, vector_ys = sample_easing('ease_out_bounce', num_points=10, representation=representation)
        _, scalar_ys = sample_easing('ease_out_bounce', num_points=10, representation=scalar_representation)
        assert vector_ys.shape == (10,)
        assert vector_ys.dtype == dtype
        np.testing.assert_allclose(vector_ys, scalar_ys, atol=1e-6)

    def test_callable_function(self):
        _, ys = sample_easing(ease_out_sine, num_points=3, representation='f64')
        np.testing.assert_allclose(ys, [0.0, np.sqrt(0.5), 1.0], atol=1e-12)

    def test_curve_function(self):
        xs, ys = sample_easing('ease_in_curve', num_points=9, representation='f64x4', curve=0.0)
        np.testing.assert_array_equal(ys, xs)

    def test_curve_required_for_curve_function(self):
        with pytest.raises(ValueError):
            sample_easing('ease_in_out_curve')

    def test_curve_rejected_for_plain_function(self):
        with pytest.raises(ValueError):
            sample_easing('ease_in_quad', curve=1.0)

    @pytest.mark.parametrize("num_points", [0, 1])
    def test_too_few_points(self, num_points):
        with pytest.raises(ValueError):
            sample_easing('ease_in_quad', num_points=num_points)

    def test_unknown_representation(self):
        with pytest.raises(ValueError):
            sample_easing('ease_in_quad', representation='f32x3')


class TestCompareRepresentations:
    @pytest.mark.parametrize("name", ['ease_in_out_back', 'ease_in_out_elastic', 'ease_out_bounce'])
    def test_within_tolerance(self, name, caplog):
        with caplog.at_level(logging.WARNING, logger='nova_easing.utils.sampling'):
            deviation = compare_representations(name)
        assert deviation <= 1e-6
        assert not caplog.records

    def test_curve_function_in_f64(self):
        deviation = compare_representations(
            'ease_in_out_curve', dtype=np.float64, lanes=8, curve=2.0
        )
        assert deviation <= 1e-7

    def test_warns_when_tolerance_exceeded(self, caplog):
        strict = EasingConfig(tolerances=ToleranceSettings(float32=-1.0, float64=-1.0))
        with caplog.at_level(logging.WARNING, logger='nova_easing.utils.sampling'):
            compare_representations(ease_in_quad, points=[0.5], config=strict)
        assert any("differ" in record.getMessage() for record in caplog.records)

    def test_nan_on_one_side_is_reported(self, caplog):
        def scalar_only_nan(t):
            return t * 0.0 + (np.nan if isinstance(t, np.floating) else 0.0)

        with caplog.at_level(logging.WARNING, logger='nova_easing.utils.sampling'):
            deviation = compare_representations(scalar_only_nan, points=[0.5])
        assert deviation == np.inf
        assert any("differ" in record.getMessage() for record in caplog.records)

    def test_nan_on_both_sides_matches(self, caplog):
        def always_nan(t):
            return t * np.nan

        with caplog.at_level(logging.WARNING, logger='nova_easing.utils.sampling'):
            deviation = compare_representations(always_nan, points=[0.25, 0.75])
        assert deviation == 0.0
        assert not caplog.records

    def test_matching_infinities(self):
        assert compare_representations(lambda t: t * np.inf, points=[1.0]) == 0.0
