"""
Conversion between caller values and easing representations.

Provides:
- as_easing_value: Wrap a Python/NumPy scalar (or pass through an EasingValue)
- to_native: Unwrap a result back to the caller's original type
- REPRESENTATIONS: Name -> representation class mapping
- resolve_representation: Look up a representation by name
"""

from typing import Dict, Type

import numpy as np

from .base import EasingValue
from .scalar import Float32, Float64, ScalarValue
from .simd import (
    SUPPORTED_LANE_COUNTS,
    simd_type,
)

REPRESENTATIONS: Dict[str, Type[EasingValue]] = {
    'f32': Float32,
    'f64': Float64,
}
for _lanes in SUPPORTED_LANE_COUNTS:
    REPRESENTATIONS[f'f32x{_lanes}'] = simd_type(np.float32, _lanes)
    REPRESENTATIONS[f'f64x{_lanes}'] = simd_type(np.float64, _lanes)
del _lanes


def resolve_representation(name: str) -> Type[EasingValue]:
    """
    Get the representation class registered under a name.

    Args:
        name: Representation name such as 'f32', 'f64', 'f32x4' or 'f64x2'

    Returns:
        Representation class

    Raises:
        ValueError: If the name is not a supported representation
    """
    key = str(name).lower()
    if key not in REPRESENTATIONS:
        raise ValueError(
            f"Unknown representation '{name}'. Must be one of {list(REPRESENTATIONS.keys())}"
        )
    return REPRESENTATIONS[key]


def as_easing_value(value) -> EasingValue:
    """
    Wrap a caller value into its easing representation.

    Python floats and ints become Float64 so that out-of-domain inputs produce
    NaN instead of math-domain exceptions.

    Args:
        value: Python float/int, numpy.float32, numpy.float64 or an EasingValue

    Returns:
        EasingValue wrapping the input

    Raises:
        TypeError: If the value has no easing representation
    """
    if isinstance(value, EasingValue):
        return value
    if isinstance(value, np.float32):
        return Float32(value)
    if isinstance(value, np.float64):
        return Float64(value)
    if isinstance(value, (float, int)) and not isinstance(value, bool):
        return Float64(value)
    raise TypeError(f"Unsupported easing argument type: {type(value).__name__}")


def to_native(result: EasingValue, like):
    """
    Convert an easing result back to the type the caller passed in.

    Args:
        result: Computed EasingValue
        like: The caller's original argument

    Returns:
        Value of the same type as `like`
    """
    if isinstance(like, EasingValue):
        return result
    if isinstance(result, ScalarValue):
        if isinstance(like, np.floating):
            return result.value
        return float(result.value)
    return result
