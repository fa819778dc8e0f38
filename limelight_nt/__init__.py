"""NetworkTables wrapper for Limelight vision cameras."""

from .core.config import LimelightConfig
from .core.modes import CamMode, LEDMode, LimelightError, ModeError
from .tables.memory import InMemoryTableRegistry
from .tables.nt_registry import NetworkTablesRegistry
from .vision.limelight import Limelight, TargetReading

__all__ = [
    "Limelight",
    "TargetReading",
    "LEDMode",
    "CamMode",
    "LimelightConfig",
    "LimelightError",
    "ModeError",
    "InMemoryTableRegistry",
    "NetworkTablesRegistry",
]
