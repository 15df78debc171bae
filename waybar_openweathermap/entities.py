from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherSnapshot:
    """Fields of one current-weather response.

    Units follow the ``metric`` query mode:
    - temperatures in Celsius
    - pressure in hectopascal (hPa)
    - humidity in percent
    - wind speed in metres per second (m/s)
    - sunrise/sunset as UNIX epoch seconds
    """

    temperature_c: float
    feels_like_c: float
    humidity_pct: float
    pressure_hpa: float
    sunrise: int
    sunset: int
    wind_speed_ms: float
    icon_code: str
    condition_id: int


@dataclass(frozen=True)
class OutputRecord:
    """The object waybar reads from a custom module's stdout."""

    text: str
    tooltip: str
    css_class: str = "weather"

    def to_payload(self) -> dict:
        return {"text": self.text, "tooltip": self.tooltip, "class": self.css_class}


__all__ = ["Coordinates", "WeatherSnapshot", "OutputRecord"]
