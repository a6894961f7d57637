"""Configuration management module."""

import math
import yaml
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List, Optional
from loguru import logger


@dataclass
class PlannerConfig:
    """Configuration for the in-lane cruising path planner.

    Attributes:
        downsample_ratio: Keep every nth extracted point before fitting
        max_curvature: Upper clamp for estimated curvature [1/m]
        curve_parameterization: Spline parameter, 'x' or 'arc_length'
        curve_sample_spacing: Parameter step for sampling the fitted curve;
            0 evaluates yaw/curvature at the fitted points themselves
        trim_behind_vehicle: Drop path points before the one nearest to
            the vehicle
    """
    downsample_ratio: int = 8
    max_curvature: float = 100000.0
    curve_parameterization: str = 'x'
    curve_sample_spacing: float = 0.0
    trim_behind_vehicle: bool = True

    # Internal: loaded from
    config_path: Optional[str] = None


class ConfigValidationError(ValueError):
    """Raised when configuration validation fails."""
    pass


def validate_config(config: PlannerConfig) -> None:
    """Validate configuration values for consistency and correctness.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    errors: List[str] = []

    if isinstance(config.downsample_ratio, bool) or not isinstance(config.downsample_ratio, int):
        errors.append(f"downsample_ratio must be an integer, got {config.downsample_ratio!r}")
    elif config.downsample_ratio <= 0:
        errors.append(f"downsample_ratio must be positive, got {config.downsample_ratio}")

    if not math.isfinite(config.max_curvature) or config.max_curvature <= 0:
        errors.append(f"max_curvature must be positive and finite, got {config.max_curvature}")

    if config.curve_parameterization not in ['x', 'arc_length']:
        errors.append(
            f"curve_parameterization must be one of ['x', 'arc_length'], "
            f"got '{config.curve_parameterization}'"
        )

    if not math.isfinite(config.curve_sample_spacing) or config.curve_sample_spacing < 0:
        errors.append(f"curve_sample_spacing must be non-negative and finite, got {config.curve_sample_spacing}")

    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigValidationError(error_msg)


def load_config(config_path: str) -> PlannerConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Loaded configuration
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r') as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {config_path}: {e}") from e

    if config_dict is None:
        raise ValueError(f"YAML file {config_path} is empty or contains no valid content")

    try:
        config = PlannerConfig(**config_dict)
    except TypeError as e:
        raise ValueError(f"Invalid configuration structure in {config_path}: {e}") from e

    config.config_path = str(config_path)

    try:
        validate_config(config)
    except ConfigValidationError:
        logger.error(f"Configuration validation failed for {config_path}")
        raise

    logger.info(f"Configuration loaded and validated from {config_path}")

    return config


def save_config(config: PlannerConfig, config_path: str):
    """Save configuration to YAML file.

    Args:
        config: Configuration to save
        config_path: Path to save YAML file
    """
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = asdict(config)
    config_dict.pop('config_path')

    with open(config_path, 'w') as f:
        yaml.safe_dump(config_dict, f, default_flow_style=False, indent=2)

    logger.info(f"Configuration saved to {config_path}")
