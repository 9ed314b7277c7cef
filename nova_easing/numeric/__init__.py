"""
Numeric abstraction layer for easing computations.

Main components:
- EasingValue: Capability contract every representation implements
- Float32, Float64: Scalar representations
- Simd, simd_type, f32x4, ...: Fixed-width vector representations
- as_easing_value, to_native: Boundary conversions for caller values
"""

from .base import EasingValue
from .scalar import ScalarValue, Float32, Float64
from .simd import (
    Simd,
    simd_type,
    SUPPORTED_LANE_COUNTS,
    f32x1, f32x2, f32x4, f32x8, f32x16, f32x32, f32x64,
    f64x1, f64x2, f64x4, f64x8, f64x16, f64x32, f64x64,
)
from .conversion import (
    REPRESENTATIONS,
    as_easing_value,
    to_native,
    resolve_representation,
)

__all__ = [
    # Contract
    'EasingValue',
    # Scalars
    'ScalarValue',
    'Float32',
    'Float64',
    # Vectors
    'Simd',
    'simd_type',
    'SUPPORTED_LANE_COUNTS',
    'f32x1', 'f32x2', 'f32x4', 'f32x8', 'f32x16', 'f32x32', 'f32x64',
    'f64x1', 'f64x2', 'f64x4', 'f64x8', 'f64x16', 'f64x32', 'f64x64',
    # Conversion
    'REPRESENTATIONS',
    'as_easing_value',
    'to_native',
    'resolve_representation',
]
