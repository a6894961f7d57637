"""Tests for planner configuration."""

import pytest
import yaml
from pathlib import Path

from inlane_cruising.config import (
    ConfigValidationError,
    PlannerConfig,
    load_config,
    save_config,
    validate_config,
)

CONFIG_DIR = Path(__file__).parent.parent / 'configs'


def test_default_config_is_valid():
    config = PlannerConfig()
    validate_config(config)
    assert config.downsample_ratio == 8
    assert config.max_curvature == 100000.0
    assert config.curve_parameterization == 'x'


def test_save_and_load(tmp_path):
    config = PlannerConfig(downsample_ratio=3, curve_parameterization='arc_length', curve_sample_spacing=0.5)
    path = tmp_path / "configs" / "planner.yaml"

    save_config(config, path)
    loaded = load_config(path)

    assert loaded.downsample_ratio == 3
    assert loaded.curve_parameterization == 'arc_length'
    assert loaded.curve_sample_spacing == 0.5
    assert loaded.config_path == str(path)


def test_validation_collects_all_errors():
    config = PlannerConfig(downsample_ratio=0, max_curvature=-1.0, curve_parameterization='spline')

    with pytest.raises(ConfigValidationError) as exc_info:
        validate_config(config)

    message = str(exc_info.value)
    assert 'downsample_ratio' in message
    assert 'max_curvature' in message
    assert 'curve_parameterization' in message


def test_validation_rejects_float_ratio():
    with pytest.raises(ConfigValidationError):
        validate_config(PlannerConfig(downsample_ratio=2.5))


@pytest.mark.parametrize("value", [float('nan'), float('inf')])
def test_validation_rejects_non_finite_values(value):
    with pytest.raises(ConfigValidationError, match="max_curvature"):
        validate_config(PlannerConfig(max_curvature=value))
    with pytest.raises(ConfigValidationError, match="curve_sample_spacing"):
        validate_config(PlannerConfig(curve_sample_spacing=value))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_unknown_key(tmp_path):
    path = tmp_path / "unknown.yaml"
    path.write_text(yaml.safe_dump({'downsample_ratio': 2, 'lookahead': 0.3}))
    with pytest.raises(ValueError, match="Invalid configuration structure"):
        load_config(path)


@pytest.mark.parametrize("name", ['default.yaml', 'arc_length.yaml'])
def test_bundled_configs_are_valid(name):
    config = load_config(CONFIG_DIR / name)
    assert config.curve_parameterization in ['x', 'arc_length']


def test_load_invalid_values(tmp_path):
    path = tmp_path / "invalid.yaml"
    path.write_text(yaml.safe_dump({'max_curvature': 0.0}))
    with pytest.raises(ConfigValidationError):
        load_config(path)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
