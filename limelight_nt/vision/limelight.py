"""Typed accessors over a Limelight camera's NetworkTables table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict

from limelight_nt.core.config import DEFAULT_TABLE_NAME, LimelightConfig
from limelight_nt.core.modes import CamMode, LEDMode, ModeLike
from limelight_nt.tables.memory import TableLike, TableRegistry
from limelight_nt.tables.nt_registry import NetworkTablesRegistry, default_registry


__all__ = [
    "IMAGE_CAPTURE_LATENCY_MS",
    "PIPELINE_INDEX_RANGE",
    "Limelight",
    "TargetReading",
    "total_latency_ms",
]


# ---------------------------------------------------------------------------
# Logging configuration (log.txt hook)
# ---------------------------------------------------------------------------
_LOGGER = logging.getLogger(__name__)
if not _LOGGER.handlers:
    _LOGGER.setLevel(logging.INFO)
    _LOG_PATH = Path(__file__).resolve().parents[2] / "log.txt"
    try:
        _LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(_LOG_PATH, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        _LOGGER.addHandler(handler)
    except OSError:
        _LOGGER.addHandler(logging.NullHandler())
else:
    _LOGGER.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Wire contract
# ---------------------------------------------------------------------------
KEY_TARGET_VISIBLE = "tv"
KEY_TARGET_X = "tx"
KEY_TARGET_Y = "ty"
KEY_TARGET_AREA = "ta"
KEY_TARGET_SKEW = "ts"
KEY_PIPELINE_LATENCY = "tl"
KEY_LED_MODE = "ledMode"
KEY_CAM_MODE = "camMode"
KEY_PIPELINE = "pipeline"

IMAGE_CAPTURE_LATENCY_MS = 11.0
PIPELINE_INDEX_RANGE = range(0, 10)


def total_latency_ms(pipeline_latency_ms: float) -> float:
    """Add the camera's fixed image capture latency to a pipeline latency."""

    return float(pipeline_latency_ms) + IMAGE_CAPTURE_LATENCY_MS


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class TargetReading(BaseModel):
    """The six target fields read one after another.

    Fields are read individually, so a reading taken while the camera is
    publishing may mix values from two frames.
    """

    model_config = ConfigDict(frozen=True)

    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    area: float = 0.0
    skew: float = 0.0
    latency_ms: float = 0.0

    @property
    def total_latency_ms(self) -> float:
        """Pipeline latency plus image capture latency."""

        return total_latency_ms(self.latency_ms)


# ---------------------------------------------------------------------------
# Handle
# ---------------------------------------------------------------------------
class Limelight:
    """NetworkTables wrapper for a Limelight camera.

    Construct once during the program's init phase. The handle holds only a
    reference to the named table; it caches nothing, never closes the table,
    and adds no locking across fields.
    """

    def __init__(
        self,
        table_name: str = DEFAULT_TABLE_NAME,
        registry: Optional[TableRegistry] = None,
        *,
        legacy_cam_mode: bool = False,
    ) -> None:
        """Bind to the table called ``table_name`` in ``registry``.

        Without a registry the process-wide NetworkTables instance is used.
        ``legacy_cam_mode`` makes :meth:`set_cam_mode` always write vision
        mode (0), the way older versions of this wrapper behaved.
        """

        if registry is None:
            registry = default_registry()
        self._table: TableLike = registry.getTable(table_name)
        self._table_name = table_name
        self._legacy_cam_mode = legacy_cam_mode
        _LOGGER.debug("Limelight bound to table %s", table_name)

    @classmethod
    def from_config(
        cls, config: LimelightConfig, registry: Optional[TableRegistry] = None
    ) -> "Limelight":
        """Build a handle from ``config``.

        When no registry is given a NetworkTables registry is created from
        the config, starting a client if a server or team number is set.
        """

        if registry is None:
            registry = NetworkTablesRegistry.from_config(config)
        return cls(
            config.table_name,
            registry,
            legacy_cam_mode=config.legacy_cam_mode,
        )

    @property
    def table_name(self) -> str:
        return self._table_name

    def get(self) -> TableLike:
        """Return the underlying table.

        Writes made through it are seen by the typed accessors.
        """

        return self._table

    # ------------------------------------------------------------------
    # Target telemetry
    # ------------------------------------------------------------------
    def has_target(self) -> bool:
        """Return ``True`` if the camera currently sees a target.

        The camera publishes ``tv`` as a number (0 or 1); a boolean entry is
        accepted as well.
        """

        if self._table.getBoolean(KEY_TARGET_VISIBLE, False):
            return True
        return self._table.getNumber(KEY_TARGET_VISIBLE, 0.0) >= 1.0

    def get_target_x(self) -> float:
        """Horizontal offset from crosshair to target, in degrees."""

        return self._table.getNumber(KEY_TARGET_X, 0.0)

    def get_target_y(self) -> float:
        """Vertical offset from crosshair to target, in degrees."""

        return self._table.getNumber(KEY_TARGET_Y, 0.0)

    def get_target_area(self) -> float:
        """Target area as a fraction of the image (1.0 is 100%)."""

        return self._table.getNumber(KEY_TARGET_AREA, 0.0)

    def get_target_skew(self) -> float:
        """Target skew or rotation, from -90 to 0 degrees."""

        return self._table.getNumber(KEY_TARGET_SKEW, 0.0)

    def get_pipeline_latency(self) -> float:
        """Pipeline latency in milliseconds.

        Image capture adds another :data:`IMAGE_CAPTURE_LATENCY_MS`; it is
        not included here.
        """

        return self._table.getNumber(KEY_PIPELINE_LATENCY, 0.0)

    def read_target(self) -> TargetReading:
        """Read every target field into a :class:`TargetReading`."""

        return TargetReading(
            visible=self.has_target(),
            x=self.get_target_x(),
            y=self.get_target_y(),
            area=self.get_target_area(),
            skew=self.get_target_skew(),
            latency_ms=self.get_pipeline_latency(),
        )

    # ------------------------------------------------------------------
    # Device control
    # ------------------------------------------------------------------
    def set_led_mode(self, mode: ModeLike) -> None:
        """Set the LED mode (``LEDMode``, its value, or its name)."""

        value = LEDMode.encode(mode)
        self._table.putNumber(KEY_LED_MODE, value)
        _LOGGER.debug("%s: ledMode=%d", self._table_name, value)

    def set_cam_mode(self, mode: ModeLike) -> None:
        """Set the camera mode (``CamMode``, its value, or its name)."""

        value = CamMode.encode(mode)
        if self._legacy_cam_mode and value != CamMode.VISION:
            _LOGGER.warning(
                "%s: legacy camMode writes vision mode, ignoring %s",
                self._table_name,
                CamMode(int(value)).name,
            )
            value = float(CamMode.VISION)
        self._table.putNumber(KEY_CAM_MODE, value)
        _LOGGER.debug("%s: camMode=%d", self._table_name, value)

    def set_pipeline(self, index: int) -> None:
        """Select the camera pipeline.

        The camera accepts 0-9; other values are written unchanged.
        """

        if index not in PIPELINE_INDEX_RANGE:
            _LOGGER.warning(
                "%s: pipeline index %s is outside 0-9, writing anyway",
                self._table_name,
                index,
            )
        self._table.putNumber(KEY_PIPELINE, index)
        _LOGGER.debug("%s: pipeline=%s", self._table_name, index)

    def __repr__(self) -> str:
        return f"Limelight({self._table_name!r})"
