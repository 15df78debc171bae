from __future__ import annotations

import copy

import pytest

from requests_mock import Mocker

from waybar_openweathermap.settings import ENV_PREFIX


# 07:00 and 16:30 UTC on 2023-11-14
SUNRISE = 1699945200
SUNSET = 1699979400

SAMPLE_RESPONSE = {
    "coord": {"lon": 13.41, "lat": 52.52},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    "main": {"temp": 21.34, "feels_like": 20.9, "pressure": 1013, "humidity": 55},
    "wind": {"speed": 3.4, "deg": 240},
    "sys": {"country": "DE", "sunrise": SUNRISE, "sunset": SUNSET},
    "name": "Berlin",
    "cod": 200,
}


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def owm_response():
    return copy.deepcopy(SAMPLE_RESPONSE)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep the user's config file and WAYBAR_OWM_* variables out of tests."""
    monkeypatch.setenv("HOME", str(tmp_path))
    for suffix in ("BASE_URL", "TIMEOUT", "LANG", "TIMEZONE", "CLASS"):
        monkeypatch.delenv(f"{ENV_PREFIX}{suffix}", raising=False)
    return tmp_path
