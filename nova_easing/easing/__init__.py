"""
Public easing functions.

Main components:
- functions: One module-level function per named easing curve
- registry: Name-based lookup used by presets and sampling
"""

from .functions import (
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
)
from .registry import (
    EASING_FUNCTIONS,
    CURVE_EASING_FUNCTIONS,
    get_easing_function,
    is_curve_function,
    list_easing_functions,
)

__all__ = [
    # Power family
    'ease_in_quad', 'ease_out_quad', 'ease_in_out_quad',
    'ease_in_cubic', 'ease_out_cubic', 'ease_in_out_cubic',
    'ease_in_quart', 'ease_out_quart', 'ease_in_out_quart',
    'ease_in_quint', 'ease_out_quint', 'ease_in_out_quint',
    # Sine and circular
    'ease_in_sine', 'ease_out_sine', 'ease_in_out_sine',
    'ease_in_circ', 'ease_out_circ', 'ease_in_out_circ',
    # Back and bounce
    'ease_in_back', 'ease_out_back', 'ease_in_out_back',
    'ease_in_bounce', 'ease_out_bounce', 'ease_in_out_bounce',
    # Exponential and elastic
    'ease_in_expo', 'ease_out_expo', 'ease_in_out_expo',
    'ease_in_elastic', 'ease_out_elastic', 'ease_in_out_elastic',
    # Curve family
    'ease_in_curve', 'ease_out_curve', 'ease_in_out_curve',
    # Registry
    'EASING_FUNCTIONS',
    'CURVE_EASING_FUNCTIONS',
    'get_easing_function',
    'is_curve_function',
    'list_easing_functions',
]
