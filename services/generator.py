"""Synthetic sensor record generation."""

from __future__ import annotations

import logging
import random
import time
from typing import Callable, List, Optional, Tuple

from models.records import UINT32_MAX, SensorRecord, to_float32
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _clamp(value: float, bounds: Tuple[float, float]) -> float:
    low, high = bounds
    return min(max(value, low), high)


class RecordGenerator:
    """Produces sequential records from a generator-owned random source.

    Pass ``seed`` (or a ready ``rng``) for reproducible output and ``clock``
    to control timestamps.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.time,
        settings: Optional[Settings] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.clock = clock
        self.settings = settings or get_settings()

    def generate(self, count: int, start_id: Optional[int] = None) -> List[SensorRecord]:
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            raise ValueError(f"count must be a positive integer, got {count!r}.")

        base_id = self.settings.start_id if start_id is None else start_id
        if base_id < 0 or base_id + count - 1 > UINT32_MAX:
            raise ValueError(
                f"Sensor ids {base_id}..{base_id + count - 1} do not fit in 32 bits."
            )

        records = [self._create_record(base_id + offset) for offset in range(count)]
        logger.debug("Generated records from id %d", base_id, extra={"record_count": count})
        return records

    def _create_record(self, sensor_id: int) -> SensorRecord:
        temperature_range = self.settings.temperature_range
        humidity_range = self.settings.humidity_range
        temperature = self.rng.uniform(*temperature_range)
        humidity = self.rng.uniform(*humidity_range)
        return SensorRecord(
            sensor_id=sensor_id,
            temperature_celsius=_clamp(to_float32(temperature), temperature_range),
            humidity_percent=_clamp(to_float32(humidity), humidity_range),
            timestamp=int(self.clock()),
        )
