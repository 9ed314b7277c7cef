"""
Numeric capability contract for easing computations.

Defines the operations every easing representation must provide, and the
branch-free curve formulas written purely against those operations.
Piecewise formulas are left abstract: scalar representations branch with
if/else, vector representations compute every branch and mask-select.

Provides:
- EasingValue: Abstract base class for all supported representations
- BACK_C1, BACK_C2, BACK_C3: Overshoot constants for the back family
- BOUNCE_N1, BOUNCE_D1: Constants for the bounce family
- ELASTIC_C4, ELASTIC_C5: Angular constants for the elastic family
- CURVE_LINEAR_THRESHOLD: |curve| below which curve easing is the identity
- ieee_errstate: NumPy error state that lets NaN/Inf propagate silently
"""

import math
from abc import ABC, abstractmethod

import numpy as np

# Back (overshoot) family
BACK_C1 = 1.70158
BACK_C2 = BACK_C1 * 1.525
BACK_C3 = BACK_C1 + 1.0

# Bounce family
BOUNCE_N1 = 7.5625
BOUNCE_D1 = 2.75

# Elastic family
ELASTIC_C4 = (2.0 * math.pi) / 3.0
ELASTIC_C5 = (2.0 * math.pi) / 4.5

# Curve family
CURVE_LINEAR_THRESHOLD = 0.001

HALF_PI = math.pi / 2.0


def ieee_errstate() -> np.errstate:
    """Error state for numeric operations: no warnings, no exceptions."""
    return np.errstate(all="ignore")


class EasingValue(ABC):
    """
    Base class for a value that easing functions can operate on.

    Concrete subclasses are closed: Float32, Float64 and the fixed-width
    Simd vector types. Every operation follows IEEE-754 semantics, so
    undefined results (sqrt of a negative, division by zero) come back as
    NaN or Inf instead of raising.
    """

    __slots__ = ()

    # -------------------------------------------------------------------------
    # Numeric operations
    # -------------------------------------------------------------------------

    @classmethod
    @abstractmethod
    def from_f32(cls, value: float) -> 'EasingValue':
        """
        Convert a real constant into this representation.

        Args:
            value: Constant to convert (splatted across lanes for vectors)

        Returns:
            The constant in this representation
        """
        pass

    @abstractmethod
    def __add__(self, other: 'EasingValue') -> 'EasingValue':
        pass

    @abstractmethod
    def __sub__(self, other: 'EasingValue') -> 'EasingValue':
        pass

    @abstractmethod
    def __mul__(self, other: 'EasingValue') -> 'EasingValue':
        pass

    @abstractmethod
    def __truediv__(self, other: 'EasingValue') -> 'EasingValue':
        pass

    @abstractmethod
    def __neg__(self) -> 'EasingValue':
        pass

    @abstractmethod
    def sin(self) -> 'EasingValue':
        pass

    @abstractmethod
    def cos(self) -> 'EasingValue':
        pass

    @abstractmethod
    def powi(self, n: int) -> 'EasingValue':
        """Raise to an integer power."""
        pass

    @abstractmethod
    def powf(self, exponent: 'EasingValue') -> 'EasingValue':
        """Raise to an arbitrary real power given in the same representation."""
        pass

    @abstractmethod
    def sqrt(self) -> 'EasingValue':
        pass

    @abstractmethod
    def exp(self) -> 'EasingValue':
        pass

    @abstractmethod
    def abs(self) -> 'EasingValue':
        pass

    @abstractmethod
    def mul_add(self, a: 'EasingValue', b: 'EasingValue') -> 'EasingValue':
        """
        Multiply-add: self * a + b.

        Args:
            a: Factor
            b: Addend

        Returns:
            self * a + b
        """
        pass

    @abstractmethod
    def coerce_curve(self, curve) -> 'EasingValue':
        """
        Convert a curve parameter into this representation.

        Args:
            curve: Real scalar, or a value of exactly this representation

        Returns:
            Curve parameter shaped like self

        Raises:
            TypeError: If the curve cannot parametrize this representation
        """
        pass

    def double(self) -> 'EasingValue':
        return self + self

    # -------------------------------------------------------------------------
    # Power family
    # -------------------------------------------------------------------------

    def ease_in_pow(self, n: int) -> 'EasingValue':
        return self.powi(n)

    def ease_out_pow(self, n: int) -> 'EasingValue':
        one = self.from_f32(1.0)
        return one - (one - self).powi(n)

    def ease_in_quad(self) -> 'EasingValue':
        """Quadratic ease-in. Starts slow and accelerates."""
        return self.ease_in_pow(2)

    def ease_out_quad(self) -> 'EasingValue':
        """Quadratic ease-out. Starts fast and decelerates."""
        return self.ease_out_pow(2)

    def ease_in_cubic(self) -> 'EasingValue':
        return self.ease_in_pow(3)

    def ease_out_cubic(self) -> 'EasingValue':
        return self.ease_out_pow(3)

    def ease_in_quart(self) -> 'EasingValue':
        return self.ease_in_pow(4)

    def ease_out_quart(self) -> 'EasingValue':
        return self.ease_out_pow(4)

    def ease_in_quint(self) -> 'EasingValue':
        return self.ease_in_pow(5)

    def ease_out_quint(self) -> 'EasingValue':
        return self.ease_out_pow(5)

    @abstractmethod
    def ease_in_out_quad(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_in_out_cubic(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_in_out_quart(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_in_out_quint(self) -> 'EasingValue':
        pass

    # -------------------------------------------------------------------------
    # Trigonometric family
    # -------------------------------------------------------------------------

    def ease_in_sine(self) -> 'EasingValue':
        """Sine ease-in: 1 - cos(t * pi / 2)."""
        one = self.from_f32(1.0)
        return one - (self * self.from_f32(HALF_PI)).cos()

    def ease_out_sine(self) -> 'EasingValue':
        """Sine ease-out: sin(t * pi / 2)."""
        return (self * self.from_f32(HALF_PI)).sin()

    def ease_in_out_sine(self) -> 'EasingValue':
        """Sine ease-in-out: 0.5 - 0.5 * cos(t * pi)."""
        half = self.from_f32(0.5)
        return (self * self.from_f32(math.pi)).cos().mul_add(-half, half)

    # -------------------------------------------------------------------------
    # Circular family
    # -------------------------------------------------------------------------

    def ease_in_circ(self) -> 'EasingValue':
        one = self.from_f32(1.0)
        return one - (one - self.powi(2)).sqrt()

    def ease_out_circ(self) -> 'EasingValue':
        one = self.from_f32(1.0)
        return (one - (self - one).powi(2)).sqrt()

    @abstractmethod
    def ease_in_out_circ(self) -> 'EasingValue':
        pass

    # -------------------------------------------------------------------------
    # Back family
    # -------------------------------------------------------------------------

    def ease_in_back(self) -> 'EasingValue':
        """Back ease-in: c3 * t^3 - c1 * t^2. Dips below 0 before rising."""
        c1 = self.from_f32(BACK_C1)
        c3 = self.from_f32(BACK_C3)
        return self.powi(3).mul_add(c3, -(c1 * self.powi(2)))

    def ease_out_back(self) -> 'EasingValue':
        """Back ease-out: 1 + c3 * (t-1)^3 + c1 * (t-1)^2. Overshoots 1 before settling."""
        c1 = self.from_f32(BACK_C1)
        c3 = self.from_f32(BACK_C3)
        one = self.from_f32(1.0)
        shifted = self - one
        return one + c3 * shifted.powi(3) + c1 * shifted.powi(2)

    @abstractmethod
    def ease_in_out_back(self) -> 'EasingValue':
        pass

    # -------------------------------------------------------------------------
    # Bounce family
    # -------------------------------------------------------------------------

    def ease_in_bounce(self) -> 'EasingValue':
        one = self.from_f32(1.0)
        return one - (one - self).ease_out_bounce()

    @abstractmethod
    def ease_out_bounce(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_in_out_bounce(self) -> 'EasingValue':
        pass

    # -------------------------------------------------------------------------
    # Exponential and elastic families
    # -------------------------------------------------------------------------

    @abstractmethod
    def ease_in_expo(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_out_expo(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_in_out_expo(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_in_elastic(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_out_elastic(self) -> 'EasingValue':
        pass

    @abstractmethod
    def ease_in_out_elastic(self) -> 'EasingValue':
        pass

    # -------------------------------------------------------------------------
    # Curve family
    # -------------------------------------------------------------------------

    @abstractmethod
    def ease_in_curve(self, curve) -> 'EasingValue':
        """
        Exponential ease-in shaped by a curve parameter.

        Positive curves accelerate sharply, negative curves gently, and
        curves with |curve| < 0.001 are linear.

        Args:
            curve: Real scalar or a vector of this representation

        Returns:
            Eased value
        """
        pass

    def ease_out_curve(self, curve) -> 'EasingValue':
        """Mirror of ease_in_curve: 1 - ease_in_curve(1 - t, curve)."""
        one = self.from_f32(1.0)
        return one - (one - self).ease_in_curve(curve)

    @abstractmethod
    def ease_in_out_curve(self, curve) -> 'EasingValue':
        pass
