"""Fixed-width binary layout for :class:`SensorRecord`.

Each record is 20 bytes, little-endian, without padding::

    offset  width  field
    0       4      sensor_id            uint32
    4       4      temperature_celsius  binary32
    8       4      humidity_percent     binary32
    12      8      timestamp            int64, seconds since the Unix epoch

A record file is the plain concatenation of encoded records, so record ``i``
starts at ``i * RECORD_SIZE``.
"""

from __future__ import annotations

import struct
from typing import Iterable

from models.records import SensorRecord

RECORD_FORMAT = "<Iffq"
RECORD_STRUCT = struct.Struct(RECORD_FORMAT)
RECORD_SIZE = RECORD_STRUCT.size


def encode_record(record: SensorRecord) -> bytes:
    return RECORD_STRUCT.pack(
        record.sensor_id,
        record.temperature_celsius,
        record.humidity_percent,
        record.timestamp,
    )


def encode_records(records: Iterable[SensorRecord]) -> bytes:
    return b"".join(encode_record(record) for record in records)


def decode_record(data: bytes) -> SensorRecord:
    if len(data) != RECORD_SIZE:
        raise ValueError(
            f"Expected {RECORD_SIZE} bytes for a record, got {len(data)}."
        )
    sensor_id, temperature, humidity, timestamp = RECORD_STRUCT.unpack(data)
    return SensorRecord(
        sensor_id=sensor_id,
        temperature_celsius=temperature,
        humidity_percent=humidity,
        timestamp=timestamp,
    )


def record_offset(index: int) -> int:
    if index < 0:
        raise ValueError(f"Record index must be non-negative, got {index}.")
    return index * RECORD_SIZE
