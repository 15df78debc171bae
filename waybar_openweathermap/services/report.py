"""Turns a provider snapshot into the record printed for waybar."""
from __future__ import annotations

import json
import logging
from datetime import tzinfo
from typing import Optional

from ..conditions import describe
from ..entities import Coordinates, OutputRecord, WeatherSnapshot
from ..exceptions import SerializationError
from ..formatting import format_clock, format_text, format_tooltip
from ..icons import icon_for
from ..providers.openweather import OpenWeatherProvider


class WeatherReportService:
    def __init__(
        self,
        *,
        provider: OpenWeatherProvider,
        css_class: str = "weather",
        tz: Optional[tzinfo] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self.css_class = css_class
        self.tz = tz
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def report(self, coordinates: Coordinates) -> OutputRecord:
        snapshot = self.provider.current(coordinates)
        return self.build_record(snapshot)

    def build_record(self, snapshot: WeatherSnapshot) -> OutputRecord:
        description = describe(snapshot.condition_id)
        if not description:
            self._log.warning("No description for condition %s", snapshot.condition_id)

        text = format_text(icon_for(snapshot.icon_code), f"{snapshot.temperature_c:.1f}")
        tooltip = format_tooltip(
            description,
            str(int(snapshot.feels_like_c)),
            str(int(snapshot.pressure_hpa)),
            str(int(snapshot.humidity_pct)),
            format_clock(snapshot.sunrise, self.tz),
            format_clock(snapshot.sunset, self.tz),
            f"{snapshot.wind_speed_ms:.0f}",
        )
        return OutputRecord(text=text, tooltip=tooltip, css_class=self.css_class)


def serialize(record: OutputRecord) -> str:
    """Encode ``record`` as one compact JSON line with pictograms left as UTF-8."""
    try:
        return json.dumps(record.to_payload(), ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"encode json: {exc}") from exc


__all__ = ["WeatherReportService", "serialize"]
