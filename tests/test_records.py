from __future__ import annotations

import struct

import pytest
from pydantic import ValidationError

from models.records import SensorRecord, to_float32


def test_float_fields_are_held_at_32_bit_precision() -> None:
    record = SensorRecord(
        sensor_id=1,
        temperature_celsius=0.1,
        humidity_percent=33.3,
        timestamp=0,
    )

    assert record.temperature_celsius == struct.unpack("<f", struct.pack("<f", 0.1))[0]
    assert record.temperature_celsius != 0.1
    assert record.humidity_percent == to_float32(33.3)


def test_to_float32_rejects_values_outside_float_range() -> None:
    with pytest.raises(ValueError):
        to_float32(1e39)


@pytest.mark.parametrize("sensor_id", [-1, 2**32])
def test_sensor_id_must_fit_in_unsigned_32_bits(sensor_id: int) -> None:
    with pytest.raises(ValidationError):
        SensorRecord(
            sensor_id=sensor_id,
            temperature_celsius=20.0,
            humidity_percent=50.0,
            timestamp=0,
        )


def test_timestamp_must_fit_in_signed_64_bits() -> None:
    with pytest.raises(ValidationError):
        SensorRecord(
            sensor_id=1,
            temperature_celsius=20.0,
            humidity_percent=50.0,
            timestamp=2**63,
        )


def test_records_are_immutable() -> None:
    record = SensorRecord(
        sensor_id=1,
        temperature_celsius=20.0,
        humidity_percent=50.0,
        timestamp=0,
    )

    with pytest.raises(ValidationError):
        record.sensor_id = 2  # type: ignore[misc]
