"""Telemetry reading published by the iris controller."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Mock value ranges, matching the motor limits configured on the device.
LUX_MAX = 10000.0
LUX_CHANGE_MAX = 50.0
SPEED_MAX = 500.0
ACCELERATION_MAX = 200.0
POSITION_STEPS = 2048


class Reading(BaseModel):
    """One telemetry sample.

    Field names follow Python style; the device and dashboards use the
    camelCase aliases on the wire.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    lux: float
    smoothed_lux: float = Field(alias="smoothedLux")
    lux_change: float = Field(alias="luxChange")
    adjusted_speed: float = Field(alias="adjustedSpeed")
    adjusted_acceleration: float = Field(alias="adjustedAcceleration")
    target_position: int = Field(alias="targetPosition")
    current_position: int = Field(alias="currentPosition")

    @classmethod
    def from_payload(cls, payload: Any) -> Reading:
        return cls.model_validate(payload)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
