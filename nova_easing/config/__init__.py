# Configuration for easing presets, tolerances and sampling defaults

from .easing_config_schemas import (
    EasingConfig,
    EasingPreset,
    SamplingDefaults,
    ToleranceSettings,
)
from .easing_config_manager import EasingConfigManager

__all__ = [
    'EasingConfig',
    'EasingPreset',
    'SamplingDefaults',
    'ToleranceSettings',
    'EasingConfigManager',
]
