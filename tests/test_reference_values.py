"""Regression tests against fixed expected outputs at 0.2, 0.4, 0.5, 0.6, 0.8."""

import numpy as np
import pytest

from nova_easing.easing.registry import get_easing_function
from nova_easing.numeric import f32x4, f64x2, Float32, Float64

from conftest import SAMPLE_POINTS

REFERENCE_VALUES = {
    # Power family
    'ease_in_quad': [0.04, 0.16, 0.25, 0.36, 0.64],
    'ease_out_quad': [0.36, 0.64, 0.75, 0.84, 0.96],
    'ease_in_out_quad': [0.08, 0.32, 0.5, 0.68, 0.92],
    'ease_in_cubic': [0.008, 0.064, 0.125, 0.216, 0.512],
    'ease_out_cubic': [0.488, 0.784, 0.875, 0.936, 0.992],
    'ease_in_out_cubic': [0.032, 0.256, 0.5, 0.744, 0.968],
    'ease_in_quart': [0.0016, 0.0256, 0.0625, 0.1296, 0.4096],
    'ease_out_quart': [0.5904, 0.8704, 0.9375, 0.9744, 0.9984],
    'ease_in_out_quart': [0.0128, 0.2048, 0.5, 0.7952, 0.9872],
    'ease_in_quint': [0.00032, 0.01024, 0.03125, 0.07776, 0.32768],
    'ease_out_quint': [0.67232, 0.92224, 0.96875, 0.98976, 0.99968],
    'ease_in_out_quint': [0.00512, 0.16384, 0.5, 0.83616, 0.99488],
    # Sine and circular
    'ease_in_sine': [0.04894348, 0.19098301, 0.29289322, 0.41221475, 0.69098301],
    'ease_out_sine': [0.30901699, 0.58778525, 0.70710678, 0.80901699, 0.95105652],
    'ease_in_out_sine': [0.0954915, 0.3454915, 0.5, 0.6545085, 0.9045085],
    'ease_in_circ': [0.0202041, 0.0834849, 0.1339746, 0.2, 0.4],
    'ease_out_circ': [0.6, 0.8, 0.8660254, 0.9165151, 0.9797959],
    'ease_in_out_circ': [0.0417424, 0.2, 0.5, 0.8, 0.9582576],
    # Back and bounce
    'ease_in_back': [-0.04645056, -0.09935168, -0.0876975, -0.02902752, 0.29419776],
    'ease_out_back': [0.70580224, 1.02902752, 1.0876975, 1.09935168, 1.04645056],
    'ease_in_out_back': [-0.09255566, 0.08992579, 0.5, 0.91007421, 1.09255566],
    'ease_in_bounce': [0.06, 0.2275, 0.234375, 0.09, 0.6975],
    'ease_out_bounce': [0.3025, 0.91, 0.765625, 0.7725, 0.94],
    'ease_in_out_bounce': [0.11375, 0.34875, 0.5, 0.65125, 0.88625],
    # Exponential and elastic
    'ease_in_expo': [0.00390625, 0.015625, 0.03125, 0.0625, 0.25],
    'ease_out_expo': [0.75, 0.9375, 0.96875, 0.984375, 0.99609375],
    'ease_in_out_expo': [0.0078125, 0.125, 0.5, 0.875, 0.9921875],
    'ease_in_elastic': [-0.001953125, 0.015625, -0.015625, -0.03125, -0.125],
    'ease_out_elastic': [1.125, 1.03125, 1.015625, 0.984375, 1.001953125],
    'ease_in_out_elastic': [-0.00390625, -0.11746158, 0.5, 1.11746158, 1.00390625],
}

# ease_in_curve with curve = 1.0
CURVE_REFERENCE = [0.1288513, 0.2862305, 0.3775407, 0.4784540, 0.7132363]


WRAPPERS = {
    'python_float': float,
    'numpy_f32': np.float32,
    'numpy_f64': np.float64,
    'Float32': Float32,
    'Float64': Float64,
    'f32x4': f32x4.splat,
    'f64x2': f64x2.splat,
}


def _as_float(value):
    if isinstance(value, (Float32, Float64)):
        return float(value)
    return value


@pytest.mark.parametrize("wrapper", list(WRAPPERS.keys()))
@pytest.mark.parametrize("name", list(REFERENCE_VALUES.keys()))
def test_reference_values(name, wrapper):
    function = get_easing_function(name)
    wrap = WRAPPERS[wrapper]
    actual = [_as_float(function(wrap(x))) for x in SAMPLE_POINTS]
    actual = [float(np.asarray(value).ravel()[0]) for value in actual]
    np.testing.assert_allclose(actual, REFERENCE_VALUES[name], rtol=0, atol=1e-6)


def test_in_out_expo_published_literals():
    function = get_easing_function('ease_in_out_expo')
    actual = [function(x) for x in SAMPLE_POINTS]
    np.testing.assert_allclose(actual, [0.007812, 0.125, 0.5, 0.875, 0.992188], rtol=0, atol=1e-6)


@pytest.mark.parametrize("wrapper", list(WRAPPERS.keys()))
def test_curve_reference_values(wrapper):
    function = get_easing_function('ease_in_curve')
    wrap = WRAPPERS[wrapper]
    actual = [_as_float(function(wrap(x), 1.0)) for x in SAMPLE_POINTS]
    actual = [float(np.asarray(value).ravel()[0]) for value in actual]
    np.testing.assert_allclose(actual, CURVE_REFERENCE, rtol=0, atol=1e-5)


def test_curve_midpoint_literal():
    function = get_easing_function('ease_in_curve')
    np.testing.assert_allclose(function(0.5, 1.0), 0.377541, rtol=0, atol=1e-6)
