"""
Sampling utilities for easing curves.

Provides:
- sample_easing: Evaluate an easing function on evenly spaced points in [0, 1]
- compare_representations: Measure scalar/vector disagreement for a function
"""

import logging
from typing import Callable, Optional, Sequence, Tuple, Union

import numpy as np

from ..config.easing_config_schemas import EasingConfig
from ..easing.registry import get_easing_function, is_curve_function
from ..numeric.base import ieee_errstate
from ..numeric.conversion import resolve_representation
from ..numeric.simd import Simd, simd_type

logger = logging.getLogger(__name__)

DEFAULT_COMPARISON_POINTS = tuple(i / 10.0 for i in range(11))


def _lane_deviation(vector_result: np.ndarray, scalar_result: float) -> np.ndarray:
    """
    Absolute per-lane deviation from the scalar result.

    Equal lanes (including matching infinities) and lanes that are NaN on
    both sides count as 0; a NaN on one side only counts as inf.
    """
    vector_nan = np.isnan(vector_result)
    scalar_nan = np.isnan(scalar_result)
    with ieee_errstate():
        deviation = np.abs(vector_result - scalar_result)
    deviation = np.where(vector_result == scalar_result, 0.0, deviation)
    return np.where(
        vector_nan & scalar_nan, 0.0,
        np.where(vector_nan | scalar_nan, np.inf, deviation)
    )


def _resolve_function(function: Union[str, Callable], curve) -> Callable:
    """Resolve a name or callable to a one-argument easing callable."""
    if isinstance(function, str):
        name = function
        function = get_easing_function(name)
        if is_curve_function(name) and curve is None:
            raise ValueError(f"{name} requires a curve parameter")
        if not is_curve_function(name) and curve is not None:
            raise ValueError(f"{name} does not take a curve parameter")

    if curve is None:
        return function
    return lambda t: function(t, curve)


def sample_easing(function: Union[str, Callable],
                  num_points: int = 512,
                  representation: str = "f32",
                  curve: Optional[float] = None) -> Tuple[np.ndarray, np.ndarray]:
    """
    Sample an easing function over [0, 1].

    Point i is i / (num_points - 1). Vector representations pack consecutive
    points into lanes; the last chunk is padded with 1.0 and the padding is
    discarded from the result.

    Args:
        function: Registered easing name or an easing callable
        num_points: Number of sample points (at least 2)
        representation: Representation name such as 'f32', 'f64' or 'f32x8'
        curve: Curve parameter for the curve family

    Returns:
        Tuple of (xs, ys) arrays in the representation's dtype

    Raises:
        ValueError: If num_points < 2, or the name/representation is unknown
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")

    ease = _resolve_function(function, curve)
    rep = resolve_representation(representation)
    dtype = rep.dtype

    xs = (np.arange(num_points, dtype=np.float64) / (num_points - 1)).astype(dtype)
    ys = np.empty(num_points, dtype=dtype)

    if issubclass(rep, Simd):
        lanes = rep.lane_count
        for start in range(0, num_points, lanes):
            chunk = xs[start:start + lanes]
            padded = np.ones(lanes, dtype=dtype)
            padded[:len(chunk)] = chunk
            result = ease(rep(padded))
            ys[start:start + len(chunk)] = np.asarray(result)[:len(chunk)]
    else:
        for i, x in enumerate(xs):
            ys[i] = ease(dtype(x))

    logger.debug(f"Sampled {num_points} points with representation {representation}")
    return xs, ys


def compare_representations(function: Union[str, Callable],
                            dtype=np.float32,
                            lanes: int = 4,
                            points: Optional[Sequence[float]] = None,
                            curve: Optional[float] = None,
                            config: Optional[EasingConfig] = None) -> float:
    """
    Compare scalar results against splatted vector results.

    Args:
        function: Registered easing name or an easing callable
        dtype: numpy.float32 or numpy.float64
        lanes: Vector lane count
        points: Inputs to compare at (default 0.0, 0.1, ..., 1.0)
        curve: Curve parameter for the curve family
        config: Configuration providing the tolerance (default settings if None)

    Returns:
        Maximum absolute deviation over all points and lanes
    """
    ease = _resolve_function(function, curve)
    vector_type = simd_type(dtype, lanes)
    scalar_type = vector_type.dtype
    if points is None:
        points = DEFAULT_COMPARISON_POINTS
    if config is None:
        config = EasingConfig()

    max_deviation = 0.0
    for p in points:
        scalar_result = float(ease(scalar_type(p)))
        vector_result = np.asarray(ease(vector_type.splat(p)), dtype=np.float64)
        deviation = float(np.max(_lane_deviation(vector_result, scalar_result)))
        max_deviation = max(max_deviation, deviation)

    tolerance = config.tolerance_for(scalar_type)
    if max_deviation > tolerance:
        logger.warning(
            f"Scalar and {vector_type.__name__} results differ by {max_deviation:.3e} "
            f"(tolerance {tolerance:.1e})"
        )
    return max_deviation
