"""
Named easing functions.

Each function takes a progress value t (conceptually in [0, 1]) and returns
the eased value with the same type and shape: a Python float gives a float,
a numpy.float32 gives a numpy.float32, an f32x4 gives an f32x4, and so on.
Out-of-range inputs are not clamped; they follow each formula and may
produce values outside [0, 1] or NaN.
"""

from typing import Union

import numpy as np

from ..numeric import EasingValue, as_easing_value, to_native

EasingArgument = Union[float, np.float32, np.float64, EasingValue]
CurveArgument = Union[float, np.float32, np.float64, EasingValue]


# =============================================================================
# POWER FAMILY
# =============================================================================

def ease_in_quad(t: EasingArgument) -> EasingArgument:
    """Quadratic ease-in. Starts slow and accelerates: t^2."""
    return to_native(as_easing_value(t).ease_in_quad(), t)


def ease_out_quad(t: EasingArgument) -> EasingArgument:
    """Quadratic ease-out. Starts fast and decelerates: 1 - (1 - t)^2."""
    return to_native(as_easing_value(t).ease_out_quad(), t)


def ease_in_out_quad(t: EasingArgument) -> EasingArgument:
    """Quadratic ease-in-out. Accelerates until t = 0.5, then decelerates."""
    return to_native(as_easing_value(t).ease_in_out_quad(), t)


def ease_in_cubic(t: EasingArgument) -> EasingArgument:
    """Cubic ease-in: t^3."""
    return to_native(as_easing_value(t).ease_in_cubic(), t)


def ease_out_cubic(t: EasingArgument) -> EasingArgument:
    """Cubic ease-out: 1 - (1 - t)^3."""
    return to_native(as_easing_value(t).ease_out_cubic(), t)


def ease_in_out_cubic(t: EasingArgument) -> EasingArgument:
    """Cubic ease-in-out."""
    return to_native(as_easing_value(t).ease_in_out_cubic(), t)


def ease_in_quart(t: EasingArgument) -> EasingArgument:
    """Quartic ease-in: t^4."""
    return to_native(as_easing_value(t).ease_in_quart(), t)


def ease_out_quart(t: EasingArgument) -> EasingArgument:
    """Quartic ease-out: 1 - (1 - t)^4."""
    return to_native(as_easing_value(t).ease_out_quart(), t)


def ease_in_out_quart(t: EasingArgument) -> EasingArgument:
    """Quartic ease-in-out."""
    return to_native(as_easing_value(t).ease_in_out_quart(), t)


def ease_in_quint(t: EasingArgument) -> EasingArgument:
    """Quintic ease-in: t^5."""
    return to_native(as_easing_value(t).ease_in_quint(), t)


def ease_out_quint(t: EasingArgument) -> EasingArgument:
    """Quintic ease-out: 1 - (1 - t)^5."""
    return to_native(as_easing_value(t).ease_out_quint(), t)


def ease_in_out_quint(t: EasingArgument) -> EasingArgument:
    """Quintic ease-in-out."""
    return to_native(as_easing_value(t).ease_in_out_quint(), t)


# =============================================================================
# SINE AND CIRCULAR FAMILIES
# =============================================================================

def ease_in_sine(t: EasingArgument) -> EasingArgument:
    """Sine ease-in. Starts slow along a quarter cosine wave."""
    return to_native(as_easing_value(t).ease_in_sine(), t)


def ease_out_sine(t: EasingArgument) -> EasingArgument:
    """Sine ease-out. Ends slow along a quarter sine wave."""
    return to_native(as_easing_value(t).ease_out_sine(), t)


def ease_in_out_sine(t: EasingArgument) -> EasingArgument:
    """Sine ease-in-out. Half a cosine wave, smooth at both ends."""
    return to_native(as_easing_value(t).ease_in_out_sine(), t)


def ease_in_circ(t: EasingArgument) -> EasingArgument:
    """Circular ease-in: 1 - sqrt(1 - t^2)."""
    return to_native(as_easing_value(t).ease_in_circ(), t)


def ease_out_circ(t: EasingArgument) -> EasingArgument:
    """Circular ease-out: sqrt(1 - (t - 1)^2)."""
    return to_native(as_easing_value(t).ease_out_circ(), t)


def ease_in_out_circ(t: EasingArgument) -> EasingArgument:
    """Circular ease-in-out. Quarter circles scaled into each half."""
    return to_native(as_easing_value(t).ease_in_out_circ(), t)


# =============================================================================
# BACK AND BOUNCE FAMILIES
# =============================================================================

def ease_in_back(t: EasingArgument) -> EasingArgument:
    """
    Back ease-in.

    Pulls back below 0 (minimum about -0.1 near t = 0.42) before accelerating
    to 1.
    """
    return to_native(as_easing_value(t).ease_in_back(), t)


def ease_out_back(t: EasingArgument) -> EasingArgument:
    """Back ease-out. Overshoots 1 before settling."""
    return to_native(as_easing_value(t).ease_out_back(), t)


def ease_in_out_back(t: EasingArgument) -> EasingArgument:
    """Back ease-in-out. Dips below 0 early and overshoots 1 late."""
    return to_native(as_easing_value(t).ease_in_out_back(), t)


def ease_in_bounce(t: EasingArgument) -> EasingArgument:
    """Bounce ease-in: 1 - ease_out_bounce(1 - t)."""
    return to_native(as_easing_value(t).ease_in_bounce(), t)


def ease_out_bounce(t: EasingArgument) -> EasingArgument:
    """
    Bounce ease-out.

    Four parabolic arcs on sub-intervals split at 1/2.75, 2/2.75 and
    2.5/2.75, each landing on 1 with a smaller rebound.
    """
    return to_native(as_easing_value(t).ease_out_bounce(), t)


def ease_in_out_bounce(t: EasingArgument) -> EasingArgument:
    """Bounce ease-in-out. Bounces at the start and at the end."""
    return to_native(as_easing_value(t).ease_in_out_bounce(), t)


# =============================================================================
# EXPONENTIAL AND ELASTIC FAMILIES
# =============================================================================

def ease_in_expo(t: EasingArgument) -> EasingArgument:
    """Exponential ease-in: 2^(10t - 10), exactly 0 at t = 0."""
    return to_native(as_easing_value(t).ease_in_expo(), t)


def ease_out_expo(t: EasingArgument) -> EasingArgument:
    """Exponential ease-out: 1 - 2^(-10t), exactly 1 at t = 1."""
    return to_native(as_easing_value(t).ease_out_expo(), t)


def ease_in_out_expo(t: EasingArgument) -> EasingArgument:
    """Exponential ease-in-out, exactly 0 and 1 at the endpoints."""
    return to_native(as_easing_value(t).ease_in_out_expo(), t)


def ease_in_elastic(t: EasingArgument) -> EasingArgument:
    """Elastic ease-in. Oscillates with growing amplitude before reaching 1."""
    return to_native(as_easing_value(t).ease_in_elastic(), t)


def ease_out_elastic(t: EasingArgument) -> EasingArgument:
    """Elastic ease-out. Overshoots and oscillates around 1 while settling."""
    return to_native(as_easing_value(t).ease_out_elastic(), t)


def ease_in_out_elastic(t: EasingArgument) -> EasingArgument:
    """Elastic ease-in-out. Oscillates at both ends."""
    return to_native(as_easing_value(t).ease_in_out_elastic(), t)


# =============================================================================
# CURVE FAMILY
# =============================================================================

def ease_in_curve(t: EasingArgument, curve: CurveArgument) -> EasingArgument:
    """
    Exponential ease-in controlled by a curve parameter.

    Computes a - a * grow^t with grow = exp(curve) and a = 1 / (1 - grow).

    - curve > 0: convex, steeper acceleration (1.0 moderate, 4.0 sharp)
    - curve < 0: concave, gentler acceleration (-1.0 soft, -4.0 very gradual)
    - |curve| < 0.001: exactly linear (returns t)

    Args:
        t: Progress value
        curve: Real scalar (broadcast to every lane for vectors) or a vector
            of exactly the same type as t

    Returns:
        Eased value of the same type as t

    Raises:
        TypeError: If a vector curve is paired with a scalar t, or the vector
            types differ in dtype or lane count
    """
    return to_native(as_easing_value(t).ease_in_curve(curve), t)


def ease_out_curve(t: EasingArgument, curve: CurveArgument) -> EasingArgument:
    """
    Exponential ease-out controlled by a curve parameter.

    Mirror of ease_in_curve: 1 - ease_in_curve(1 - t, curve).

    Args:
        t: Progress value
        curve: Real scalar or a vector of the same type as t

    Returns:
        Eased value of the same type as t
    """
    return to_native(as_easing_value(t).ease_out_curve(curve), t)


def ease_in_out_curve(t: EasingArgument, curve: CurveArgument) -> EasingArgument:
    """
    Exponential ease-in-out controlled by a curve parameter.

    Below t = 0.5 this is ease_in_curve(2t) / 2; from 0.5 on it is
    0.5 + ease_out_curve(2(t - 0.5)) / 2.

    Args:
        t: Progress value
        curve: Real scalar or a vector of the same type as t

    Returns:
        Eased value of the same type as t
    """
    return to_native(as_easing_value(t).ease_in_out_curve(curve), t)
