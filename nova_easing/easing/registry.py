"""
Name-based lookup for the easing functions.

Provides:
- EASING_FUNCTIONS: Name -> function for the unparametrized easings
- CURVE_EASING_FUNCTIONS: Name -> function for the curve-parametrized easings
- get_easing_function: Resolve a name to its function
- is_curve_function: Check whether a name needs a curve parameter
- list_easing_functions: All known names
"""

from typing import Callable, Dict, List

from . import functions

EASING_FUNCTIONS: Dict[str, Callable] = {
    'ease_in_quad': functions.ease_in_quad,
    'ease_out_quad': functions.ease_out_quad,
    'ease_in_out_quad': functions.ease_in_out_quad,
    'ease_in_cubic': functions.ease_in_cubic,
    'ease_out_cubic': functions.ease_out_cubic,
    'ease_in_out_cubic': functions.ease_in_out_cubic,
    'ease_in_quart': functions.ease_in_quart,
    'ease_out_quart': functions.ease_out_quart,
    'ease_in_out_quart': functions.ease_in_out_quart,
    'ease_in_quint': functions.ease_in_quint,
    'ease_out_quint': functions.ease_out_quint,
    'ease_in_out_quint': functions.ease_in_out_quint,
    'ease_in_sine': functions.ease_in_sine,
    'ease_out_sine': functions.ease_out_sine,
    'ease_in_out_sine': functions.ease_in_out_sine,
    'ease_in_circ': functions.ease_in_circ,
    'ease_out_circ': functions.ease_out_circ,
    'ease_in_out_circ': functions.ease_in_out_circ,
    'ease_in_back': functions.ease_in_back,
    'ease_out_back': functions.ease_out_back,
    'ease_in_out_back': functions.ease_in_out_back,
    'ease_in_bounce': functions.ease_in_bounce,
    'ease_out_bounce': functions.ease_out_bounce,
    'ease_in_out_bounce': functions.ease_in_out_bounce,
    'ease_in_expo': functions.ease_in_expo,
    'ease_out_expo': functions.ease_out_expo,
    'ease_in_out_expo': functions.ease_in_out_expo,
    'ease_in_elastic': functions.ease_in_elastic,
    'ease_out_elastic': functions.ease_out_elastic,
    'ease_in_out_elastic': functions.ease_in_out_elastic,
}

CURVE_EASING_FUNCTIONS: Dict[str, Callable] = {
    'ease_in_curve': functions.ease_in_curve,
    'ease_out_curve': functions.ease_out_curve,
    'ease_in_out_curve': functions.ease_in_out_curve,
}


def list_easing_functions() -> List[str]:
    """Return every registered easing name, curve functions last."""
    return list(EASING_FUNCTIONS.keys()) + list(CURVE_EASING_FUNCTIONS.keys())


def is_curve_function(name: str) -> bool:
    """
    Check whether an easing name takes a curve parameter.

    Args:
        name: Easing function name

    Returns:
        True for ease_in_curve, ease_out_curve and ease_in_out_curve
    """
    return name in CURVE_EASING_FUNCTIONS


def get_easing_function(name: str) -> Callable:
    """
    Resolve an easing function by name.

    Args:
        name: Easing function name, e.g. 'ease_in_out_quad'

    Returns:
        The easing function

    Raises:
        ValueError: If the name is not registered
    """
    if name in EASING_FUNCTIONS:
        return EASING_FUNCTIONS[name]
    if name in CURVE_EASING_FUNCTIONS:
        return CURVE_EASING_FUNCTIONS[name]
    raise ValueError(f"Unknown easing function '{name}'. Must be one of {list_easing_functions()}")
