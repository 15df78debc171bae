"""OpenWeatherMap current weather provider."""
from __future__ import annotations

import math
from typing import Any, Optional

from ..entities import Coordinates, WeatherSnapshot
from .base import EmptyConditionListError, ProviderInitError, ProviderQueryError, WeatherProvider


# https://openweathermap.org/current#multi
SUPPORTED_LANGUAGES = frozenset(
    {
        "af", "al", "ar", "az", "bg", "ca", "cz", "da", "de", "el", "en", "es", "eu", "fa",
        "fi", "fr", "gl", "he", "hi", "hr", "hu", "id", "it", "ja", "kr", "la", "lt", "mk",
        "nl", "no", "pl", "pt", "pt_br", "ro", "ru", "se", "sk", "sl", "sp", "sr", "sv",
        "th", "tr", "ua", "uk", "vi", "zh_cn", "zh_tw", "zu",
    }
)


class OpenWeatherProvider(WeatherProvider):
    """Integration with the OpenWeather current weather endpoint."""

    base_url = "https://api.openweathermap.org/data/2.5/weather"
    units = "metric"

    def __init__(
        self,
        api_key: str,
        *,
        lang: str = "en",
        base_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ProviderInitError("API key must not be empty")
        if lang.lower() not in SUPPORTED_LANGUAGES:
            raise ProviderInitError(f"unsupported language {lang!r}")
        super().__init__(**kwargs)
        self.api_key = api_key
        self.lang = lang.lower()
        self.base_url = base_url or self.base_url

    # Public API ---------------------------------------------------------
    def current(self, coordinates: Coordinates) -> WeatherSnapshot:
        params = {
            "lat": coordinates.latitude,
            "lon": coordinates.longitude,
            "units": self.units,
            "lang": self.lang,
            "appid": self.api_key,
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        self._log.info("OpenWeather returned data for %s", data.get("name") or coordinates)
        return self._build_snapshot(data)

    # Helpers ------------------------------------------------------------
    def _build_snapshot(self, data: dict) -> WeatherSnapshot:
        main = _section(data, "main")
        sys_ = _section(data, "sys")
        wind = _section(data, "wind")
        conditions = data.get("weather") or []
        if not isinstance(conditions, list):
            raise ProviderQueryError("malformed 'weather' in response")
        if not conditions:
            raise EmptyConditionListError("response contains no weather conditions")
        condition = conditions[0]
        if not isinstance(condition, dict):
            raise ProviderQueryError("malformed weather condition entry")

        return WeatherSnapshot(
            temperature_c=_require(main, "temp", float),
            feels_like_c=_require(main, "feels_like", float),
            humidity_pct=_require(main, "humidity", float),
            pressure_hpa=_require(main, "pressure", float),
            sunrise=_require(sys_, "sunrise", int),
            sunset=_require(sys_, "sunset", int),
            wind_speed_ms=_require(wind, "speed", float),
            icon_code=_require(condition, "icon", str),
            condition_id=_require(condition, "id", int),
        )


def _require(payload: dict, key: str, cast: Any) -> Any:
    value = payload.get(key)
    if value is None:
        raise ProviderQueryError(f"missing {key!r} in response")
    try:
        result = cast(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ProviderQueryError(f"invalid {key!r} in response: {value!r}") from exc
    if isinstance(result, float) and not math.isfinite(result):
        raise ProviderQueryError(f"invalid {key!r} in response: {value!r}")
    return result


def _section(data: dict, key: str) -> dict:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ProviderQueryError(f"malformed {key!r} in response")
    return section


__all__ = ["OpenWeatherProvider", "SUPPORTED_LANGUAGES"]
