"""Domain models shared across services."""

from __future__ import annotations

import struct

from pydantic import BaseModel, ConfigDict, Field, field_validator

UINT32_MAX = 2**32 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_FLOAT32 = struct.Struct("<f")


def to_float32(value: float) -> float:
    """Round ``value`` to the nearest IEEE-754 binary32 value."""
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError as exc:
        raise ValueError(f"{value!r} is outside the 32-bit float range") from exc


class SensorRecord(BaseModel):
    """A single synthetic sensor sample with a fixed-width on-disk encoding."""

    model_config = ConfigDict(frozen=True)

    sensor_id: int = Field(..., ge=0, le=UINT32_MAX)
    temperature_celsius: float
    humidity_percent: float
    timestamp: int = Field(
        ..., ge=INT64_MIN, le=INT64_MAX, description="Seconds since the Unix epoch."
    )

    @field_validator("temperature_celsius", "humidity_percent")
    @classmethod
    def _round_to_float32(cls, value: float) -> float:
        return to_float32(value)
