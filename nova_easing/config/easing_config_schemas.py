"""
Configuration schemas for easing presets and sampling defaults.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np


@dataclass
class ToleranceSettings:
    """Absolute tolerances used when comparing results of one float kind."""
    float32: float = 1e-6
    float64: float = 1e-7


@dataclass
class SamplingDefaults:
    """Default parameters for sampling a curve over [0, 1]."""
    num_points: int = 512
    representation: str = "f32"


@dataclass
class EasingPreset:
    """
    A named easing choice.

    Attributes:
        function: Registered easing function name
        curve: Curve parameter, required for the curve family and
            forbidden for every other function
    """
    function: str
    curve: Optional[float] = None


@dataclass
class EasingConfig:
    """
    Complete easing configuration.
    Holds comparison tolerances, sampling defaults and named presets.
    """
    name: str = "default"

    tolerances: ToleranceSettings = field(default_factory=ToleranceSettings)
    sampling: SamplingDefaults = field(default_factory=SamplingDefaults)

    presets: Dict[str, EasingPreset] = field(default_factory=dict)

    def tolerance_for(self, dtype) -> float:
        """
        Get the comparison tolerance for a float dtype.

        Args:
            dtype: numpy.float32 or numpy.float64 (anything np.dtype accepts)

        Returns:
            Absolute tolerance
        """
        if np.dtype(dtype) == np.dtype(np.float32):
            return self.tolerances.float32
        return self.tolerances.float64
