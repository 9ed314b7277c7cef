"""Shared fixtures for the easing test suite."""

import numpy as np
import pytest

from nova_easing.easing.registry import EASING_FUNCTIONS, CURVE_EASING_FUNCTIONS

# Fixed inputs for the reference-value tables
SAMPLE_POINTS = [0.2, 0.4, 0.5, 0.6, 0.8]

# 0.0, 0.1, ..., 1.0
TENTH_POINTS = [i / 10.0 for i in range(11)]

EPSILON = {
    np.float32: 1e-6,
    np.float64: 1e-7,
}

ALL_NAMES = list(EASING_FUNCTIONS.keys()) + list(CURVE_EASING_FUNCTIONS.keys())


def call_easing(name, t, curve=1.0):
    """Call an easing function by name, passing a curve only where one is needed."""
    if name in CURVE_EASING_FUNCTIONS:
        return CURVE_EASING_FUNCTIONS[name](t, curve)
    return EASING_FUNCTIONS[name](t)


@pytest.fixture(params=[np.float32, np.float64], ids=['f32', 'f64'])
def float_dtype(request):
    return request.param


@pytest.fixture(params=['f32', 'f64', 'f32x4', 'f64x2', 'f32x8'])
def representation_name(request):
    return request.param


@pytest.fixture
def sample_points():
    return list(SAMPLE_POINTS)
