"""
Easing configuration manager.
Handles loading of tolerance, sampling and preset settings from YAML.
"""

import logging
from functools import partial
from pathlib import Path
from typing import Callable, Optional, Union

import yaml

# Project Imports
from .easing_config_schemas import (
    EasingConfig,
    EasingPreset,
    SamplingDefaults,
    ToleranceSettings,
)
from ..easing.registry import get_easing_function, is_curve_function
from ..numeric.conversion import resolve_representation

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "default_presets.yaml"


class EasingConfigManager:
    """
    Configuration manager for easing presets.
    Handles configuration loading, validation and preset resolution.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the easing configuration manager."""
        # Bundled configuration lives next to this module
        if config_dir is None:
            self.config_dir = Path(__file__).parent
        else:
            self.config_dir = Path(config_dir)

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> EasingConfig:
        """
        Load easing configuration from a YAML file.

        Args:
            config_path: Path to configuration YAML file. Relative paths are
                resolved against the config directory; None loads the bundled
                defaults.

        Returns:
            EasingConfig: Loaded configuration

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file content is invalid
        """
        config_path = Path(config_path) if config_path is not None else Path(DEFAULT_CONFIG_FILE)

        # Resolve relative paths
        if not config_path.is_absolute():
            config_path = self.config_dir / config_path

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        logger.info(f"Loading easing config from: {config_path}")

        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration root must be a mapping: {config_path}")

        config = EasingConfig()
        config.name = config_data.get('name', config_path.stem)

        if 'tolerances' in config_data:
            tol = config_data['tolerances'] or {}
            config.tolerances = ToleranceSettings(
                float32=float(tol.get('float32', 1e-6)),
                float64=float(tol.get('float64', 1e-7))
            )

        if 'sampling' in config_data:
            sampling = config_data['sampling'] or {}
            config.sampling = SamplingDefaults(
                num_points=int(sampling.get('num_points', 512)),
                representation=str(sampling.get('representation', 'f32'))
            )
            self._validate_sampling(config.sampling)

        if 'presets' in config_data:
            for preset_name, preset_data in (config_data['presets'] or {}).items():
                config.presets[preset_name] = self._parse_preset(preset_name, preset_data)
                logger.debug(f"  Preset '{preset_name}': {config.presets[preset_name].function}")

        logger.info(f"Loaded easing config: {config.name} with {len(config.presets)} presets")
        return config

    def _parse_preset(self, preset_name: str, preset_data) -> EasingPreset:
        if not isinstance(preset_data, dict) or 'function' not in preset_data:
            raise ValueError(f"Preset '{preset_name}' must define a 'function'")

        function_name = preset_data['function']
        curve = preset_data.get('curve')

        # Raises ValueError for unknown names
        get_easing_function(function_name)

        if is_curve_function(function_name):
            if curve is None:
                raise ValueError(f"Preset '{preset_name}' uses {function_name} and requires a 'curve'")
            curve = float(curve)
        elif curve is not None:
            raise ValueError(f"Preset '{preset_name}' uses {function_name}, which takes no 'curve'")

        return EasingPreset(function=function_name, curve=curve)

    def _validate_sampling(self, sampling: SamplingDefaults) -> None:
        if sampling.num_points < 2:
            raise ValueError(f"sampling.num_points must be at least 2, got {sampling.num_points}")
        resolve_representation(sampling.representation)

    def get_preset_function(self, preset_name: str, config: EasingConfig) -> Callable:
        """
        Get a one-argument easing callable for a preset.

        Args:
            preset_name: Name of the preset
            config: The easing configuration

        Returns:
            Callable taking t; curve presets have their curve bound
        """
        if preset_name not in config.presets:
            raise ValueError(f"Preset '{preset_name}' not found in configuration")

        preset = config.presets[preset_name]
        function = get_easing_function(preset.function)
        if preset.curve is not None:
            return partial(function, curve=preset.curve)
        return function
