"""
Nova Easing - generic easing functions over scalars and fixed-width vectors.

Main components:
- easing: The named easing functions and their registry
- numeric: Float32/Float64 scalars and f32xN/f64xN vector representations
- config: YAML-backed presets, tolerances and sampling defaults
- utils: Curve sampling and cross-representation comparison
"""

from .easing import (
    ease_in_quad, ease_out_quad, ease_in_out_quad,
    ease_in_cubic, ease_out_cubic, ease_in_out_cubic,
    ease_in_quart, ease_out_quart, ease_in_out_quart,
    ease_in_quint, ease_out_quint, ease_in_out_quint,
    ease_in_sine, ease_out_sine, ease_in_out_sine,
    ease_in_circ, ease_out_circ, ease_in_out_circ,
    ease_in_back, ease_out_back, ease_in_out_back,
    ease_in_bounce, ease_out_bounce, ease_in_out_bounce,
    ease_in_expo, ease_out_expo, ease_in_out_expo,
    ease_in_elastic, ease_out_elastic, ease_in_out_elastic,
    ease_in_curve, ease_out_curve, ease_in_out_curve,
    get_easing_function,
    list_easing_functions,
)
from .numeric import (
    EasingValue,
    Float32,
    Float64,
    Simd,
    simd_type,
    f32x1, f32x2, f32x4, f32x8, f32x16, f32x32, f32x64,
    f64x1, f64x2, f64x4, f64x8, f64x16, f64x32, f64x64,
)
from .config import EasingConfig, EasingConfigManager
from .utils import sample_easing, compare_representations

__version__ = "0.1.0"

__all__ = [
    # Easing functions
    'ease_in_quad', 'ease_out_quad', 'ease_in_out_quad',
    'ease_in_cubic', 'ease_out_cubic', 'ease_in_out_cubic',
    'ease_in_quart', 'ease_out_quart', 'ease_in_out_quart',
    'ease_in_quint', 'ease_out_quint', 'ease_in_out_quint',
    'ease_in_sine', 'ease_out_sine', 'ease_in_out_sine',
    'ease_in_circ', 'ease_out_circ', 'ease_in_out_circ',
    'ease_in_back', 'ease_out_back', 'ease_in_out_back',
    'ease_in_bounce', 'ease_out_bounce', 'ease_in_out_bounce',
    'ease_in_expo', 'ease_out_expo', 'ease_in_out_expo',
    'ease_in_elastic', 'ease_out_elastic', 'ease_in_out_elastic',
    'ease_in_curve', 'ease_out_curve', 'ease_in_out_curve',
    'get_easing_function',
    'list_easing_functions',
    # Representations
    'EasingValue',
    'Float32',
    'Float64',
    'Simd',
    'simd_type',
    'f32x1', 'f32x2', 'f32x4', 'f32x8', 'f32x16', 'f32x32', 'f32x64',
    'f64x1', 'f64x2', 'f64x4', 'f64x8', 'f64x16', 'f64x32', 'f64x64',
    # Configuration and sampling
    'EasingConfig',
    'EasingConfigManager',
    'sample_easing',
    'compare_representations',
]
