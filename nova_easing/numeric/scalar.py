"""
Scalar easing representations.

Provides:
- ScalarValue: Shared implementation over a single NumPy floating-point value
- Float32: 32-bit IEEE-754 scalar
- Float64: 64-bit IEEE-754 scalar

Piecewise formulas branch with plain if/else on the wrapped value.
"""

import numbers
from typing import Type

import numpy as np

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


class ScalarValue(EasingValue):
    """
    A single floating-point value of a fixed NumPy dtype.

    Attributes:
        value: Wrapped numpy.float32 or numpy.float64
    """

    __slots__ = ('value',)

    dtype: Type[np.floating] = np.float64

    def __init__(self, value):
        if isinstance(value, EasingValue):
            raise TypeError(f"Cannot wrap {type(value).__name__} in {type(self).__name__}")
        self.value = self.dtype(value)

    @classmethod
    def from_f32(cls, value: float) -> 'ScalarValue':
        return cls(value)

    def _operand(self, other):
        if type(other) is type(self):
            return other.value
        if isinstance(other, numbers.Real) and not isinstance(other, EasingValue):
            return self.dtype(other)
        raise TypeError(
            f"Unsupported operand for {type(self).__name__}: {type(other).__name__}"
        )

    def _wrap(self, raw) -> 'ScalarValue':
        result = object.__new__(type(self))
        result.value = self.dtype(raw)
        return result

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other):
        with ieee_errstate():
            return self._wrap(self.value + self._operand(other))

    def __radd__(self, other):
        with ieee_errstate():
            return self._wrap(self._operand(other) + self.value)

    def __sub__(self, other):
        with ieee_errstate():
            return self._wrap(self.value - self._operand(other))

    def __rsub__(self, other):
        with ieee_errstate():
            return self._wrap(self._operand(other) - self.value)

    def __mul__(self, other):
        with ieee_errstate():
            return self._wrap(self.value * self._operand(other))

    def __rmul__(self, other):
        with ieee_errstate():
            return self._wrap(self._operand(other) * self.value)

    def __truediv__(self, other):
        with ieee_errstate():
            return self._wrap(self.value / self._operand(other))

    def __rtruediv__(self, other):
        with ieee_errstate():
            return self._wrap(self._operand(other) / self.value)

    def __neg__(self):
        return self._wrap(-self.value)

    def __lt__(self, other) -> bool:
        return bool(self.value < self._operand(other))

    def __le__(self, other) -> bool:
        return bool(self.value <= self._operand(other))

    def __gt__(self, other) -> bool:
        return bool(self.value > self._operand(other))

    def __ge__(self, other) -> bool:
        return bool(self.value >= self._operand(other))

    def __eq__(self, other) -> bool:
        # Plain reals compare at full precision, matching numpy scalar hashing
        if type(other) is type(self):
            return bool(self.value == other.value)
        if isinstance(other, numbers.Real) and not isinstance(other, EasingValue):
            return bool(float(self.value) == other)
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    # -------------------------------------------------------------------------
    # Transcendental operations
    # -------------------------------------------------------------------------

    def sin(self):
        with ieee_errstate():
            return self._wrap(np.sin(self.value))

    def cos(self):
        with ieee_errstate():
            return self._wrap(np.cos(self.value))

    def powi(self, n: int):
        with ieee_errstate():
            return self._wrap(np.power(self.value, self.dtype(n)))

    def powf(self, exponent):
        with ieee_errstate():
            return self._wrap(np.power(self.value, self._operand(exponent)))

    def sqrt(self):
        with ieee_errstate():
            return self._wrap(np.sqrt(self.value))

    def exp(self):
        with ieee_errstate():
            return self._wrap(np.exp(self.value))

    def abs(self):
        return self._wrap(np.abs(self.value))

    def mul_add(self, a, b):
        # NumPy has no fused multiply-add ufunc; evaluated as multiply then add
        with ieee_errstate():
            return self._wrap(self.value * self._operand(a) + self._operand(b))

    def coerce_curve(self, curve):
        if type(curve) is type(self):
            return curve
        if isinstance(curve, EasingValue):
            raise TypeError(
                f"Curve parameter of type {type(curve).__name__} cannot parametrize "
                f"a {type(self).__name__} easing argument"
            )
        if not isinstance(curve, numbers.Real):
            raise TypeError(f"Curve parameter must be a real number, got {type(curve).__name__}")
        return self._wrap(curve)

    # -------------------------------------------------------------------------
    # Piecewise formulas
    # -------------------------------------------------------------------------

    def ease_in_out_quad(self):
        half = self.from_f32(0.5)
        one = self.from_f32(1.0)
        two = self.from_f32(2.0)
        if self < half:
            return two * self.powi(2)
        return one - (two * self - two).powi(2) * half

    def ease_in_out_cubic(self):
        half = self.from_f32(0.5)
        if self < half:
            doubled = self.powi(3).double()
            return doubled + doubled
        one = self.from_f32(1.0)
        two = self.from_f32(2.0)
        return one - (two - self.double()).powi(3) * half

    def ease_in_out_quart(self):
        half = self.from_f32(0.5)
        if self < half:
            return self.from_f32(8.0) * self.powi(4)
        one = self.from_f32(1.0)
        two = self.from_f32(2.0)
        return one - (two - self.double()).powi(4) * half

    def ease_in_out_quint(self):
        half = self.from_f32(0.5)
        if self < half:
            return self.from_f32(16.0) * self.powi(5)
        one = self.from_f32(1.0)
        two = self.from_f32(2.0)
        return one - (two - self.double()).powi(5) * half

    def ease_in_out_circ(self):
        half = self.from_f32(0.5)
        one = self.from_f32(1.0)
        two = self.from_f32(2.0)
        doubled = self.double()
        if self < half:
            return (one - (one - doubled.powi(2)).sqrt()) * half
        return ((one - (two - doubled).powi(2)).sqrt() + one) * half

    def ease_in_out_back(self):
        c2 = self.from_f32(BACK_C2)
        c2_plus_one = self.from_f32(BACK_C2 + 1.0)
        half = self.from_f32(0.5)
        two = self.from_f32(2.0)
        if self < half:
            two_x = self.double()
            return two_x.powi(2) * (c2_plus_one * two_x - c2) * half
        two_x_minus_two = self.double() - two
        inner = c2_plus_one * two_x_minus_two + c2
        return (two_x_minus_two.powi(2) * inner + two) * half

    def ease_out_bounce(self):
        n1 = self.from_f32(BOUNCE_N1)
        if self < self.from_f32(1.0 / BOUNCE_D1):
            return n1 * self * self
        if self < self.from_f32(2.0 / BOUNCE_D1):
            adjusted = self - self.from_f32(1.5 / BOUNCE_D1)
            return (n1 * adjusted).mul_add(adjusted, self.from_f32(0.75))
        if self < self.from_f32(2.5 / BOUNCE_D1):
            adjusted = self - self.from_f32(2.25 / BOUNCE_D1)
            return (n1 * adjusted).mul_add(adjusted, self.from_f32(0.9375))
        adjusted = self - self.from_f32(2.625 / BOUNCE_D1)
        return (n1 * adjusted).mul_add(adjusted, self.from_f32(0.984375))

    def ease_in_out_bounce(self):
        half = self.from_f32(0.5)
        one = self.from_f32(1.0)
        if self < half:
            return (one - (one - self.double()).ease_out_bounce()) * half
        return (one + (self.double() - one).ease_out_bounce()) * half

    def ease_in_expo(self):
        zero = self.from_f32(0.0)
        if self == zero:
            return zero
        ten = self.from_f32(10.0)
        return self.from_f32(2.0).powf(self.mul_add(ten, -ten))

    def ease_out_expo(self):
        one = self.from_f32(1.0)
        if self == one:
            return one
        return one - self.from_f32(2.0).powf(self * self.from_f32(-10.0))

    def ease_in_out_expo(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        if self == zero:
            return zero
        if self == one:
            return one
        two = self.from_f32(2.0)
        half = self.from_f32(0.5)
        twenty = self.from_f32(20.0)
        ten = self.from_f32(10.0)
        if self < half:
            return two.powf(self.mul_add(twenty, -ten)) * half
        return (two - two.powf(self.mul_add(-twenty, ten))) * half

    def ease_in_elastic(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        if self == zero:
            return zero
        if self == one:
            return one
        ten = self.from_f32(10.0)
        c4 = self.from_f32(ELASTIC_C4)
        angle = self.mul_add(ten, self.from_f32(-10.75)) * c4
        return -self.from_f32(2.0).powf(self.mul_add(ten, -ten)) * angle.sin()

    def ease_out_elastic(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        if self == zero:
            return zero
        if self == one:
            return one
        ten = self.from_f32(10.0)
        c4 = self.from_f32(ELASTIC_C4)
        angle = self.mul_add(ten, self.from_f32(-0.75)) * c4
        return self.from_f32(2.0).powf(self * -ten).mul_add(angle.sin(), one)

    def ease_in_out_elastic(self):
        zero = self.from_f32(0.0)
        one = self.from_f32(1.0)
        if self == zero:
            return zero
        if self == one:
            return one
        half = self.from_f32(0.5)
        two = self.from_f32(2.0)
        twenty = self.from_f32(20.0)
        ten = self.from_f32(10.0)
        c5 = self.from_f32(ELASTIC_C5)
        angle = self.mul_add(twenty, self.from_f32(-11.125)) * c5
        if self < half:
            return -two.powf(self.mul_add(twenty, -ten)) * angle.sin() * half
        return two.powf(self.mul_add(-twenty, ten)) * angle.sin() * half + one

    def ease_in_curve(self, curve):
        c = self.coerce_curve(curve)
        if c.abs() < self.from_f32(CURVE_LINEAR_THRESHOLD):
            return self
        one = self.from_f32(1.0)
        grow = c.exp()
        a = one / (one - grow)
        return a - a * grow.powf(self)

    def ease_in_out_curve(self, curve):
        half = self.from_f32(0.5)
        if self < half:
            return self.double().ease_in_curve(curve) * half
        return half + (self - half).double().ease_out_curve(curve) * half


class Float32(ScalarValue):
    """32-bit floating-point easing argument."""

    __slots__ = ()

    dtype = np.float32


class Float64(ScalarValue):
    """64-bit floating-point easing argument."""

    __slots__ = ()

    dtype = np.float64
