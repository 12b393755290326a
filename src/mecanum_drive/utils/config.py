"""
Configuration loading for the drivetrain.
"""

from pathlib import Path
from typing import Tuple

import yaml

from ..drivetrain.actuators import DEFAULT_MOTOR_CHANNELS, MOTOR_COUNT, MotorChannel


def load_config(path) -> dict:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        Configuration dictionary (empty if the file is empty)
    """
    with open(Path(path), 'r') as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(config).__name__}")
    return config


def _drivetrain_section(config: dict) -> dict:
    """The `drivetrain` mapping (empty if missing or blank)."""
    section = config.get('drivetrain') or {}
    if not isinstance(section, dict):
        raise ValueError(f"drivetrain must be a mapping, got {type(section).__name__}")
    return section


def motor_channels_from_config(config: dict) -> Tuple[MotorChannel, ...]:
    """
    Build the motor channel table from the `drivetrain.motors` list.

    Args:
        config: Robot configuration dictionary

    Returns:
        Four MotorChannels in output order
    """
    motors = _drivetrain_section(config).get('motors')
    if not motors:
        return DEFAULT_MOTOR_CHANNELS
    if not isinstance(motors, list) or len(motors) != MOTOR_COUNT:
        raise ValueError(f"drivetrain.motors must list {MOTOR_COUNT} motors, got {motors!r}")

    channels = []
    for defaults, entry in zip(DEFAULT_MOTOR_CHANNELS, motors):
        if not isinstance(entry, dict):
            raise ValueError(f"drivetrain.motors entries must be mappings, got {entry!r}")
        inverted = entry.get('inverted', False)
        if not isinstance(inverted, bool):
            raise ValueError(f"drivetrain.motors inverted must be true or false, got {inverted!r}")
        channels.append(MotorChannel(
            name=str(entry.get('name', defaults.name)),
            wheel_id=str(entry.get('wheel_id', defaults.wheel_id)),
            inverted=inverted,
        ))
    return tuple(channels)


def drive_speed_from_config(config: dict) -> float:
    """Default max speed from `drivetrain.speed` (1.0 if unset)."""
    speed = _drivetrain_section(config).get('speed', 1.0)
    if isinstance(speed, bool) or not isinstance(speed, (int, float)):
        raise ValueError(f"drivetrain.speed must be a number, got {speed!r}")
    return float(speed)
