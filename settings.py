from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple


_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_START_ID = 1000
DEFAULT_TEMPERATURE_RANGE = (-5.0, 55.0)
DEFAULT_HUMIDITY_RANGE = (10.0, 100.0)
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    start_id: int
    temperature_range: Tuple[float, float]
    humidity_range: Tuple[float, float]
    log_level: str


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        start_id=DEFAULT_START_ID,
        temperature_range=DEFAULT_TEMPERATURE_RANGE,
        humidity_range=DEFAULT_HUMIDITY_RANGE,
        log_level=_read_log_level(DEFAULT_LOG_LEVEL),
    )
