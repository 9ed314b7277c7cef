"""
Fixed-width vector easing representations.

Every operation is applied lane-wise and must match, per lane, what the
scalar representation computes for that lane alone. Piecewise formulas never
branch on data: each branch is computed for all lanes, then lanes are picked
with a boolean mask.

Provides:
- Simd: Base class for fixed-width float vectors
- simd_type: Look up the vector type for a (dtype, lane count) pair
- SUPPORTED_LANE_COUNTS: Closed set of supported widths
- f32x1 ... f32x64, f64x1 ... f64x64: Concrete vector types
"""

import numbers
from typing import Dict, Iterator, Tuple, Type

import numpy as np
from numpy.typing import NDArray

from .base import (
    EasingValue,
    ieee_errstate,
    BACK_C2,
    BOUNCE_N1,
    BOUNCE_D1,
    ELASTIC_C4,
    ELASTIC_C5,
    CURVE_LINEAR_THRESHOLD,
)
from .scalar import ScalarValue

SUPPORTED_LANE_COUNTS: Tuple[int, ...] = (1, 2, 4, 8, 16, 32, 64)
SUPPORTED_DTYPES: Tuple[type, ...] = (np.float32, np.float64)

LN_2 = float(np.log(2.0))


class Simd(EasingValue):
    """
    Immutable vector of `lane_count` floats of a fixed dtype.

    Concrete types are created once per (dtype, lane count) pair; use the
    module-level aliases (f32x4, f64x2, ...) or simd_type().
    """

    __slots__ = ('_lanes',)

    dtype: Type[np.floating] = None
    lane_count: int = 0

    def __init__(self, values):
        if self.lane_count == 0:
            raise TypeError("Simd is abstract; use a concrete type such as f32x4")
        if isinstance(values, EasingValue):
            raise TypeError(f"Cannot build {type(self).__name__} from {type(values).__name__}")
        lanes = np.array(values, dtype=self.dtype)
        if lanes.ndim != 1 or lanes.shape[0] != self.lane_count:
            raise ValueError(
                f"{type(self).__name__} requires exactly {self.lane_count} lanes, "
                f"got shape {lanes.shape}"
            )
        lanes.setflags(write=False)
        self._lanes = lanes

    @classmethod
    def _from_array(cls, lanes: NDArray) -> 'Simd':
        result = object.__new__(cls)
        lanes = np.asarray(lanes, dtype=cls.dtype)
        lanes.setflags(write=False)
        result._lanes = lanes
        return result

    @classmethod
    def splat(cls, value) -> 'Simd':
        """
        Build a vector with every lane set to the same value.

        Args:
            value: Real scalar to broadcast

        Returns:
            Vector of this type
        """
        return cls._from_array(np.full(cls.lane_count, value, dtype=cls.dtype))

    @classmethod
    def from_f32(cls, value: float) -> 'Simd':
        return cls.splat(value)

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return self.lane_count

    def __getitem__(self, index):
        return self._lanes[index]

    def __iter__(self) -> Iterator[np.floating]:
        return iter(self._lanes)

    def to_numpy(self) -> NDArray:
        """Return a writable copy of the lanes."""
        return self._lanes.copy()

    def __array__(self, dtype=None, copy=None):
        # Lanes are read-only, so copy=None and copy=False share storage
        same_dtype = dtype is None or np.dtype(dtype) == self._lanes.dtype
        if copy:
            return self._lanes.astype(dtype if dtype is not None else self._lanes.dtype)
        if same_dtype:
            return self._lanes
        if copy is False:
            raise ValueError(
                f"Cannot view {type(self).__name__} as {np.dtype(dtype).name} without copying"
            )
        return self._lanes.astype(dtype)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._lanes, other._lanes))

    def __hash__(self):
        return hash((type(self), self._lanes.tobytes()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._lanes.tolist()!r})"

    # -------------------------------------------------------------------------
    # Masks
    # -------------------------------------------------------------------------

    def simd_lt(self, other) -> NDArray[np.bool_]:
        """Lane-wise self < other."""
        return self._lanes < self._operand(other)

    def simd_eq(self, other) -> NDArray[np.bool_]:
        """Lane-wise self == other."""
        return self._lanes == self._operand(other)

    @classmethod
    def select(cls, mask: NDArray[np.bool_], if_true: 'Simd', if_false: 'Simd') -> 'Simd':
        """
        Blend two vectors lane by lane.

        Args:
            mask: Boolean mask with one entry per lane
            if_true: Lanes taken where mask is True
            if_false: Lanes taken where mask is False

        Returns:
            Blended vector
        """
        return cls._from_array(np.where(mask, if_true._lanes, if_false._lanes))

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _operand(self, other):
        if type(other) is type(self):
            return other._lanes
        if isinstance(other, EasingValue):
            raise TypeError(
                f"Lane-wise operation between {type(self).__name__} and "
                f"{type(other).__name__} is not supported"
            )
        if isinstance(other, numbers.Real):
            return self.dtype(other)
        raise TypeError(
            f"Unsupported operand for {type(self).__name__}: {type(other).__name__}"
        )

    def _apply(self, func, *operands) -> 'Simd':
        with ieee_errstate():
            return self._from_array(func(self._lanes, *operands))

    def __add__(self, other):
        return self._apply(np.add, self._operand(other))

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        return self._apply(np.subtract, self._operand(other))

    def __rsub__(self, other):
        return self._apply(lambda lanes, o: o - lanes, self._operand(other))

    def __mul__(self, other):
        return self._apply(np.multiply, self._operand(other))

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        return self._apply(np.true_divide, self._operand(other))

    def __rtruediv__(self, other):
        return self._apply(lambda lanes, o: o / lanes, self._operand(other))

    def __neg__(self):
        return self._apply(np.negative)

    # -------------------------------------------------------------------------
    # Transcendental operations
    # -------------------------------------------------------------------------

    def sin(self):
        return self._apply(np.sin)

    def cos(self):
        return self._apply(np.cos)

    def powi(self, n: int):
        # Exponentiation by squaring; lanes have no integer-power primitive
        if n == 0:
            return self.from_f32(1.0)
        if n < 0:
            return self.from_f32(1.0) / self.powi(-n)
        if n == 1:
            return self
        if n % 2 == 0:
            half_power = self.powi(n // 2)
            return half_power * half_power
        return self * self.powi(n - 1)

    def powf(self, exponent):
        return (exponent * self.ln()).exp()

    def ln(self):
        return self._apply(np.log)

    def sqrt(self):
        return self._apply(np.sqrt)

    def exp(self):
        return self._apply(np.exp)

    def exp2(self):
        """2 raised to each lane, computed as exp(lane * ln 2)."""
        return (self * self.from_f32(LN_2)).exp()

    def abs(self):
        return self._apply(np.abs)

    def mul_add(self, a, b):
        # NumPy has no fused multiply-add ufunc; evaluated as multiply then add
        return self._apply(lambda lanes, x, y: lanes * x + y, self._operand(a), self._operand(b))

    def coerce_curve(self, curve):
        if type(curve) is type(self):
            return curve
        if isinstance(curve, ScalarValue):
            if curve.dtype is not self.dtype:
                raise TypeError(
                    f"Curve parameter of type {type(curve).__name__} cannot parametrize "
                    f"a {type(self).__name__} easing argument"
                )
            return self.splat(curve.value)
        if isinstance(curve, EasingValue):
            raise TypeError(
                f"Curve parameter of type {type(curve).__name__} cannot parametrize "
                f"a {type(self).__name__} easing argument"
            )
        if not isinstance(curve, numbers.Real):
            raise TypeError(f"Curve parameter must be a real number or vector, got {type(curve).__name__}")
        return self.splat(curve)

    # -------------------------------------------------------------------------
    # Piecewise formulas (mask-and-select)
    # -------------------------------------------------------------------------

    def ease_in_out_quad(self):
        half = self.from_f32(0.5)
        mask = self.simd_lt(half)
        lower_half = self.powi(2).double()
        upper_half = self.from_f32(1.0) - (self.double() - self.from_f32(2.0)).powi(2) * half
        return self.select(mask, lower_half, upper_half)

    def ease_in_out_cubic(self):
        half = self.from_f32(0.5)
        mask = self.simd_lt(half)
        doubled = self.powi(3).double()
        lower_half = doubled + doubled
        upper_half = self.from_f32(1.0) - (self.from_f32(2.0) - self.double()).powi(3) * half
        return self.select(mask, lower_half, upper_half)

    def ease_in_out_quart(self):
        half = self.from_f32(0.5)
        mask = self.simd_lt(half)
        lower_half = self.from_f32(8.0) * self.powi(4)
        upper_half = self.from_f32(1.0) - (self.from_f32(2.0) - self.double()).powi(4) * half
        return self.select(mask, lower_half, upper_half)

    def ease_in_out_quint(self):
        half = self.from_f32(0.5)
        mask = self.simd_lt(half)
        lower_half = self.from_f32(16.0) * self.powi(5)
        upper_half = self.from_f32(1.0) - (self.from_f32(2.0) - self.double()).powi(5) * half
        return self.select(mask, lower_half, upper_half)

    def ease_in_out_circ(self):
        half = self.from_f32(0.5)
        one = self.from_f32(1.0)
        two = self.from_f32(2.0)
        mask = self.simd_lt(half)
        doubled = self.double()
        lower_half = (one - (one - doubled.powi(2)).sqrt()) * half
        upper_half = ((one - (two - doubled).powi(2)).sqrt() + one) * half
        return self.select(mask, lower_half, upper_half)

    def ease_in_out_back(self):
        c2 = self.from_f32(BACK_C2)
        c2_plus_one = self.from_f32(BACK_C2 + 1.0)
        half = self.from_f32(0.5)
        two = self.from_f32(2.0)
        mask = self.simd_lt(half)
        two_x = self.double()
        lower_half = two_x.powi(2) * (c2_plus_one * two_x - c2) * half
        two_x_minus_two = two_x - two
        inner = c2_plus_one * two_x_minus_two + c2
        upper_half = (two_x_minus_two.powi(2) * inner + two) * half
        return self.select(mask, lower_half, upper_half)

    def ease_out_bounce(self):
        n1 = self.from_f32(BOUNCE_N1)
        mask1 = self.simd_lt(self.from_f32(1.0 / BOUNCE_D1))
        mask2 = self.simd_lt(self.from_f32(2.0 / BOUNCE_D1))
        mask3 = self.simd_lt(self.from_f32(2.5 / BOUNCE_D1))
        branch1 = n1 * self * self
        adjusted2 = self - self.from_f32(1.5 / BOUNCE_D1)
        branch2 = (n1 * adjusted2).mul_add(adjusted2, self.from_f32(0.75))
        adjusted3 = self - self.from_f32(2.25 / BOUNCE_D1)
        branch3 = (n1 * adjusted3).mul_add(adjusted3, self.from_f32(0.9375))
        adjusted4 = self - self.from_f32(2.625 / BOUNCE_D1)
        branch4 = (n1 * adjusted4).mul_add(adjusted4, self.from_f32(0.984375))
        return self.select(
            mask1, branch1,
            self.select(mask2, branch2, self.select(mask3, branch3, branch4))
        )

    def ease_in_out_bounce(self):
        half = self.from_f32(0.5)
        one = self.from_f32(1.0)
        mask = self.simd_lt(half)
        lower_half = (one - (one - self.double()).ease_out_bounce()) * half
        upper_half = (one + (self.double() - one).ease_out_bounce()) * half
        return self.select(mask, lower_half, upper_half)

    def ease_in_expo(self):
        zero = self.from_f32(0.0)
        ten = self.from_f32(10.0)
        normal = self.mul_add(ten, -ten).exp2()
        return self.select(self.simd_eq(zero), zero, normal)

    def ease_out_expo(self):
        one = self.from_f32(1.0)
        normal = one - (self * self.from_f32(-10.0)).exp2()
        return self.select(self.simd_eq(one), one, normal)

    def ease_in_out_expo(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        half = self.from_f32(0.5)
        two = self.from_f32(2.0)
        twenty = self.from_f32(20.0)
        ten = self.from_f32(10.0)
        branch_lower = self.mul_add(twenty, -ten).exp2() * half
        branch_upper = (two - self.mul_add(-twenty, ten).exp2()) * half
        result = self.select(self.simd_lt(half), branch_lower, branch_upper)
        result = self.select(self.simd_eq(one), one, result)
        return self.select(self.simd_eq(zero), zero, result)

    def ease_in_elastic(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        ten = self.from_f32(10.0)
        c4 = self.from_f32(ELASTIC_C4)
        angle = self.mul_add(ten, self.from_f32(-10.75)) * c4
        normal = -self.mul_add(ten, -ten).exp2() * angle.sin()
        result = self.select(self.simd_eq(one), one, normal)
        return self.select(self.simd_eq(zero), zero, result)

    def ease_out_elastic(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        ten = self.from_f32(10.0)
        c4 = self.from_f32(ELASTIC_C4)
        angle = self.mul_add(ten, self.from_f32(-0.75)) * c4
        normal = (self * -ten).exp2().mul_add(angle.sin(), one)
        result = self.select(self.simd_eq(one), one, normal)
        return self.select(self.simd_eq(zero), zero, result)

    def ease_in_out_elastic(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        half = self.from_f32(0.5)
        twenty = self.from_f32(20.0)
        ten = self.from_f32(10.0)
        c5 = self.from_f32(ELASTIC_C5)
        sin_angle = (self.mul_add(twenty, self.from_f32(-11.125)) * c5).sin()
        branch_lower = -self.mul_add(twenty, -ten).exp2() * sin_angle * half
        branch_upper = self.mul_add(-twenty, ten).exp2() * sin_angle * half + one
        result = self.select(self.simd_lt(half), branch_lower, branch_upper)
        result = self.select(self.simd_eq(one), one, result)
        return self.select(self.simd_eq(zero), zero, result)

    def ease_in_curve(self, curve):
        c = self.coerce_curve(curve)
        one = self.from_f32(1.0)
        linear = c.abs().simd_lt(self.from_f32(CURVE_LINEAR_THRESHOLD))
        grow = c.exp()
        a = one / (one - grow)
        normal = a - a * grow.powf(self)
        return self.select(linear, self, normal)

    def ease_in_out_curve(self, curve):
        half = self.from_f32(0.5)
        mask = self.simd_lt(half)
        lower_half = self.double().ease_in_curve(curve) * half
        upper_half = half + (self - half).double().ease_out_curve(curve) * half
        return self.select(mask, lower_half, upper_half)


# =============================================================================
# CONCRETE VECTOR TYPES
# =============================================================================

_SIMD_TYPES: Dict[Tuple[type, int], Type[Simd]] = {}

_DTYPE_PREFIX = {np.float32: 'f32', np.float64: 'f64'}


def _make_simd_type(dtype: type, lanes: int) -> Type[Simd]:
    name = f"{_DTYPE_PREFIX[dtype]}x{lanes}"
    simd_cls = type(Simd)(name, (Simd,), {
        '__slots__': (),
        '__module__': __name__,
        '__doc__': f"Vector of {lanes} {np.dtype(dtype).name} lanes.",
        'dtype': dtype,
        'lane_count': lanes,
    })
    _SIMD_TYPES[(dtype, lanes)] = simd_cls
    return simd_cls


def simd_type(dtype, lanes: int) -> Type[Simd]:
    """
    Get the vector type for a dtype and lane count.

    Args:
        dtype: numpy.float32 or numpy.float64 (anything np.dtype accepts)
        lanes: Lane count, one of SUPPORTED_LANE_COUNTS

    Returns:
        Concrete Simd subclass

    Raises:
        ValueError: If the dtype or lane count is not supported
    """
    scalar_type = np.dtype(dtype).type
    if scalar_type not in SUPPORTED_DTYPES:
        raise ValueError(f"Unsupported vector dtype: {np.dtype(dtype).name}")
    if lanes not in SUPPORTED_LANE_COUNTS:
        raise ValueError(
            f"Unsupported lane count {lanes}; expected one of {list(SUPPORTED_LANE_COUNTS)}"
        )
    return _SIMD_TYPES[(scalar_type, lanes)]


f32x1 = _make_simd_type(np.float32, 1)
f32x2 = _make_simd_type(np.float32, 2)
f32x4 = _make_simd_type(np.float32, 4)
f32x8 = _make_simd_type(np.float32, 8)
f32x16 = _make_simd_type(np.float32, 16)
f32x32 = _make_simd_type(np.float32, 32)
f32x64 = _make_simd_type(np.float32, 64)

f64x1 = _make_simd_type(np.float64, 1)
f64x2 = _make_simd_type(np.float64, 2)
f64x4 = _make_simd_type(np.float64, 4)
f64x8 = _make_simd_type(np.float64, 8)
f64x16 = _make_simd_type(np.float64, 16)
f64x32 = _make_simd_type(np.float64, 32)
f64x64 = _make_simd_type(np.float64, 64)
