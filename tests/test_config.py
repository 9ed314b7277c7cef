"""Tests for the easing configuration manager and schemas."""

import numpy as np
import pytest

from nova_easing import ease_out_bounce, ease_in_curve
from nova_easing.config import EasingConfig, EasingConfigManager, EasingPreset


@pytest.fixture
def manager():
    return EasingConfigManager()


def _write(tmp_path, text, name="presets.yaml"):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestBundledConfig:
    def test_loads_defaults(self, manager):
        config = manager.load_config()
        assert config.name == "default"
        assert config.tolerances.float32 == pytest.approx(1e-6)
        assert config.tolerances.float64 == pytest.approx(1e-7)
        assert config.sampling.num_points == 512
        assert config.sampling.representation == "f32"
        assert {'linear', 'smooth', 'landing', 'sharp_in'} <= set(config.presets)

    def test_curve_presets_carry_curve(self, manager):
        config = manager.load_config()
        assert config.presets['sharp_in'] == EasingPreset(function='ease_in_curve', curve=4.0)
        assert config.presets['landing'].curve is None

    def test_get_preset_function(self, manager):
        config = manager.load_config()
        assert manager.get_preset_function('landing', config) is ease_out_bounce
        sharp = manager.get_preset_function('sharp_in', config)
        assert sharp(0.5) == ease_in_curve(0.5, 4.0)
        assert manager.get_preset_function('linear', config)(0.3) == 0.3

    def test_unknown_preset(self, manager):
        config = manager.load_config()
        with pytest.raises(ValueError):
            manager.get_preset_function('wobble', config)


class TestCustomConfig:
    def test_relative_path_resolved_against_config_dir(self, tmp_path):
        _write(tmp_path, "name: custom\npresets:\n  fade:\n    function: ease_in_out_sine\n")
        config = EasingConfigManager(config_dir=tmp_path).load_config("presets.yaml")
        assert config.name == "custom"
        assert config.presets['fade'].function == 'ease_in_out_sine'
        # Unspecified sections keep their defaults
        assert config.sampling.num_points == 512

    def test_name_defaults_to_file_stem(self, tmp_path):
        path = _write(tmp_path, "presets: {}\n", name="studio.yaml")
        assert EasingConfigManager().load_config(path).name == "studio"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            EasingConfigManager(config_dir=tmp_path).load_config("absent.yaml")

    @pytest.mark.parametrize("text", [
        "presets:\n  bad:\n    function: ease_in_sextic\n",
        "presets:\n  bad:\n    function: ease_in_curve\n",
        "presets:\n  bad:\n    function: ease_in_quad\n    curve: 2.0\n",
        "presets:\n  bad:\n    curve: 2.0\n",
        "sampling:\n  num_points: 1\n",
        "sampling:\n  representation: f16x4\n",
        "- just\n- a\n- list\n",
    ])
    def test_invalid_content(self, tmp_path, text):
        path = _write(tmp_path, text)
        with pytest.raises(ValueError):
            EasingConfigManager().load_config(path)


class TestTolerances:
    def test_tolerance_for_dtype(self):
        config = EasingConfig()
        assert config.tolerance_for(np.float32) == 1e-6
        assert config.tolerance_for(np.float64) == 1e-7
        assert config.tolerance_for('float32') == 1e-6
