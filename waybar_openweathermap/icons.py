from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping


logger = logging.getLogger(__name__)

# Night codes reuse the day pictograms.
ICONS: Mapping[str, str] = MappingProxyType(
    {
        "01d": "☀️",
        "02d": "⛅️",
        "03d": "☁️",
        "04d": "☁️",
        "09d": "🌧️",
        "10d": "🌦️",
        "11d": "⛈️",
        "13d": "🌨️",
        "50d": "🌫",
        "01n": "☀️",
        "02n": "⛅️",
        "03n": "☁️",
        "04n": "☁️",
        "09n": "🌧️",
        "10n": "🌦️",
        "11n": "⛈️",
        "13n": "🌨️",
        "50n": "🌫",
    }
)


def icon_for(code: str) -> str:
    """Map an icon code such as ``"10n"`` to its pictogram; ``""`` if unknown."""
    icon = ICONS.get(code)
    if icon is None:
        logger.warning("Unknown icon code %r", code)
        return ""
    return icon


__all__ = ["ICONS", "icon_for"]
