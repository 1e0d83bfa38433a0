from __future__ import annotations

from typing import Iterator

import pytest

from settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_apply_without_environment(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = get_settings()

    assert settings.start_id == 1000
    assert settings.temperature_range == (-5.0, 55.0)
    assert settings.humidity_range == (10.0, 100.0)
    assert settings.log_level == "WARNING"


def test_log_level_override_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert get_settings().log_level == "DEBUG"


def test_blank_log_level_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "   ")

    assert get_settings().log_level == "WARNING"
