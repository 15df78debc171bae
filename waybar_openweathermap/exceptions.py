from __future__ import annotations


class WeatherBarError(RuntimeError):
    """Base error; any instance reaching the command line is fatal."""


class ArgumentParseError(WeatherBarError):
    """Raised when a positional coordinate is not a decimal number."""


class ConfigError(WeatherBarError):
    """Raised when the config file or an environment override is invalid."""


class SerializationError(WeatherBarError):
    """Raised when the output record cannot be encoded as JSON."""


__all__ = ["WeatherBarError", "ArgumentParseError", "ConfigError", "SerializationError"]
