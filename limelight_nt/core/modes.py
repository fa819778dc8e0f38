"""Device mode enumerations and their wire encoding."""

from __future__ import annotations

import logging
from enum import IntEnum
from pathlib import Path
from typing import Type, TypeVar, Union


_LOGGER = logging.getLogger(__name__)
if not _LOGGER.handlers:
    _LOGGER.setLevel(logging.INFO)
    _LOG_PATH = Path(__file__).resolve().parents[2] / "log.txt"
    try:
        _LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        _FILE_HANDLER = logging.FileHandler(_LOG_PATH, encoding="utf-8")
        _FILE_HANDLER.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        _LOGGER.addHandler(_FILE_HANDLER)
    except OSError:
        _LOGGER.addHandler(logging.NullHandler())
else:
    _LOGGER.addHandler(logging.NullHandler())


class LimelightError(Exception):
    """Base exception for limelight_nt errors."""


class ModeError(LimelightError, ValueError):
    """Raised when a value cannot be encoded as a device mode."""


_M = TypeVar("_M", bound="_WireMode")
ModeLike = Union[int, str, "_WireMode"]


class _WireMode(IntEnum):
    """Integer enum that knows how to coerce itself from user input."""

    @classmethod
    def coerce(cls: Type[_M], value: ModeLike) -> _M:
        """Return the member for ``value`` (member, integer or member name)."""

        if isinstance(value, cls):
            return value
        if isinstance(value, _WireMode):
            raise ModeError(f"{type(value).__name__} is not a {cls.__name__}")
        if isinstance(value, bool):
            raise ModeError(f"{cls.__name__} does not accept booleans")
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ModeError(f"Unknown {cls.__name__} name: {value!r}") from None
        if isinstance(value, (int, float)) and float(value).is_integer():
            try:
                return cls(int(value))
            except ValueError:
                raise ModeError(f"Unknown {cls.__name__} value: {value!r}") from None
        raise ModeError(f"Cannot interpret {value!r} as {cls.__name__}")

    @classmethod
    def encode(cls, value: ModeLike) -> float:
        """Return the number written to the table for ``value``."""

        member = cls.coerce(value)
        _LOGGER.debug("Encoded %s.%s as %d", cls.__name__, member.name, member.value)
        return float(member.value)


class LEDMode(_WireMode):
    """LED modes understood by the camera's ``ledMode`` key."""

    PIPELINE = 0  # let the active pipeline decide
    OFF = 1
    BLINK = 2
    ON = 3


class CamMode(_WireMode):
    """Camera modes understood by the camera's ``camMode`` key."""

    VISION = 0
    DRIVER = 1  # raises exposure, disables processing


__all__ = ["LimelightError", "ModeError", "ModeLike", "LEDMode", "CamMode"]
