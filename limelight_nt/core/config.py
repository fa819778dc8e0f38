"""Settings model for binding a Limelight handle."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_TABLE_NAME = "limelight"


class LimelightConfig(BaseModel):
    """Where to find the camera's table and how to talk to it.

    ``server`` wins over ``team_number``; when neither is set the registry
    is used as-is and no NetworkTables client is started.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    table_name: str = DEFAULT_TABLE_NAME
    server: Optional[str] = None
    team_number: Optional[int] = Field(default=None, ge=1, le=25599)
    legacy_cam_mode: bool = False

    @field_validator("table_name", mode="before")
    @classmethod
    def _default_blank_name(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_TABLE_NAME
        return value

    @field_validator("server")
    @classmethod
    def _blank_server_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    def resolved_server(self) -> Optional[str]:
        """Return the NetworkTables server host, if any."""

        if self.server:
            return self.server
        if self.team_number is not None:
            return f"roborio-{self.team_number}-frc.local"
        return None


__all__ = ["DEFAULT_TABLE_NAME", "LimelightConfig"]
