from .base import (
    EmptyConditionListError,
    ProviderError,
    ProviderInitError,
    ProviderQueryError,
    QuotaExceeded,
    RequestConfig,
    WeatherProvider,
)
from .openweather import OpenWeatherProvider

__all__ = [
    "EmptyConditionListError",
    "OpenWeatherProvider",
    "ProviderError",
    "ProviderInitError",
    "ProviderQueryError",
    "QuotaExceeded",
    "RequestConfig",
    "WeatherProvider",
]
