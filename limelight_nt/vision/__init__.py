"""Limelight camera handle."""

from .limelight import (
    IMAGE_CAPTURE_LATENCY_MS,
    PIPELINE_INDEX_RANGE,
    Limelight,
    TargetReading,
    total_latency_ms,
)

__all__ = [
    "IMAGE_CAPTURE_LATENCY_MS",
    "PIPELINE_INDEX_RANGE",
    "Limelight",
    "TargetReading",
    "total_latency_ms",
]
