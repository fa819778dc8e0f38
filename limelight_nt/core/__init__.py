"""Core types: device modes, errors and configuration."""

from .config import DEFAULT_TABLE_NAME, LimelightConfig
from .modes import CamMode, LEDMode, LimelightError, ModeError

__all__ = [
    "DEFAULT_TABLE_NAME",
    "LimelightConfig",
    "CamMode",
    "LEDMode",
    "LimelightError",
    "ModeError",
]
