"""Current weather from OpenWeatherMap, formatted for a waybar custom module."""

__version__ = "0.1.0"
