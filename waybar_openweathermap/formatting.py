"""Text and tooltip rendering for the waybar module."""
from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from typing import Optional

from .providers.base import ProviderQueryError


TIME_FORMAT = "%H:%M %Z"


def format_text(icon: str, temperature: str) -> str:
    return f"{icon} {temperature} °C"


def format_tooltip(
    description: str,
    feels_like: str,
    pressure: str,
    humidity: str,
    sunrise: str,
    sunset: str,
    wind_speed: str,
) -> str:
    """Build the multi-line hover text.

    The first line is the title-cased description; an empty description
    leaves no blank line because leading whitespace is stripped.
    """
    lines = [
        description.title(),
        f"Feels like {feels_like} °C",
        f"Pressure {pressure} hPa",
        f"Humidity {humidity}%",
        f"Sunrise {sunrise}",
        f"Sunset {sunset}",
        f"Wind speed {wind_speed} m/sec",
    ]
    return "\n".join(lines).lstrip()


def format_clock(epoch_seconds: int, tz: Optional[tzinfo] = None) -> str:
    """Render epoch seconds as ``HH:MM TZ`` in ``tz`` or the local zone."""
    try:
        moment = datetime.fromtimestamp(int(epoch_seconds), tz=timezone.utc).astimezone(tz)
    except (OverflowError, OSError, ValueError) as exc:
        raise ProviderQueryError(f"timestamp out of range: {epoch_seconds!r}") from exc
    return moment.strftime(TIME_FORMAT)


__all__ = ["format_text", "format_tooltip", "format_clock", "TIME_FORMAT"]
