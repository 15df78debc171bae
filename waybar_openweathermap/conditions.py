"""OpenWeatherMap condition codes.

Codes are grouped the way the provider documents them. ``describe`` searches
the groups in ``CONDITION_GROUPS`` order and the first match wins.
Reference: https://openweathermap.org/weather-conditions
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ConditionData:
    id: int
    meaning: str
    icon: str


THUNDERSTORM_CONDITIONS: Tuple[ConditionData, ...] = (
    ConditionData(200, "thunderstorm with light rain", "11"),
    ConditionData(201, "thunderstorm with rain", "11"),
    ConditionData(202, "thunderstorm with heavy rain", "11"),
    ConditionData(210, "light thunderstorm", "11"),
    ConditionData(211, "thunderstorm", "11"),
    ConditionData(212, "heavy thunderstorm", "11"),
    ConditionData(221, "ragged thunderstorm", "11"),
    ConditionData(230, "thunderstorm with light drizzle", "11"),
    ConditionData(231, "thunderstorm with drizzle", "11"),
    ConditionData(232, "thunderstorm with heavy drizzle", "11"),
)

DRIZZLE_CONDITIONS: Tuple[ConditionData, ...] = (
    ConditionData(300, "light intensity drizzle", "09"),
    ConditionData(301, "drizzle", "09"),
    ConditionData(302, "heavy intensity drizzle", "09"),
    ConditionData(310, "light intensity drizzle rain", "09"),
    ConditionData(311, "drizzle rain", "09"),
    ConditionData(312, "heavy intensity drizzle rain", "09"),
    ConditionData(313, "shower rain and drizzle", "09"),
    ConditionData(314, "heavy shower rain and drizzle", "09"),
    ConditionData(321, "shower drizzle", "09"),
)

RAIN_CONDITIONS: Tuple[ConditionData, ...] = (
    ConditionData(500, "light rain", "10"),
    ConditionData(501, "moderate rain", "10"),
    ConditionData(502, "heavy intensity rain", "10"),
    ConditionData(503, "very heavy rain", "10"),
    ConditionData(504, "extreme rain", "10"),
    ConditionData(511, "freezing rain", "13"),
    ConditionData(520, "light intensity shower rain", "09"),
    ConditionData(521, "shower rain", "09"),
    ConditionData(522, "heavy intensity shower rain", "09"),
    ConditionData(531, "ragged shower rain", "09"),
)

SNOW_CONDITIONS: Tuple[ConditionData, ...] = (
    ConditionData(600, "light snow", "13"),
    ConditionData(601, "snow", "13"),
    ConditionData(602, "heavy snow", "13"),
    ConditionData(611, "sleet", "13"),
    ConditionData(612, "shower sleet", "13"),
    ConditionData(615, "light rain and snow", "13"),
    ConditionData(616, "rain and snow", "13"),
    ConditionData(620, "light shower snow", "13"),
    ConditionData(621, "shower snow", "13"),
    ConditionData(622, "heavy shower snow", "13"),
)

ATMOSPHERE_CONDITIONS: Tuple[ConditionData, ...] = (
    ConditionData(701, "mist", "50"),
    ConditionData(711, "smoke", "50"),
    ConditionData(721, "haze", "50"),
    ConditionData(731, "sand, dust whirls", "50"),
    ConditionData(741, "fog", "50"),
    ConditionData(751, "sand", "50"),
    ConditionData(761, "dust", "50"),
    ConditionData(762, "volcanic ash", "50"),
    ConditionData(771, "squalls", "50"),
    ConditionData(781, "tornado", "50"),
)

CLOUD_CONDITIONS: Tuple[ConditionData, ...] = (
    ConditionData(800, "clear sky", "01"),
    ConditionData(801, "few clouds", "02"),
    ConditionData(802, "scattered clouds", "03"),
    ConditionData(803, "broken clouds", "04"),
    ConditionData(804, "overcast clouds", "04"),
)

# Beaufort-style wind codes; the provider ships no icon for them.
ADDITIONAL_CONDITIONS: Tuple[ConditionData, ...] = (
    ConditionData(951, "calm", ""),
    ConditionData(952, "light breeze", ""),
    ConditionData(953, "gentle breeze", ""),
    ConditionData(954, "moderate breeze", ""),
    ConditionData(955, "fresh breeze", ""),
    ConditionData(956, "strong breeze", ""),
    ConditionData(957, "high wind, near gale", ""),
    ConditionData(958, "gale", ""),
    ConditionData(959, "severe gale", ""),
    ConditionData(960, "storm", ""),
    ConditionData(961, "violent storm", ""),
    ConditionData(962, "hurricane", ""),
)

CONDITION_GROUPS: Tuple[Tuple[ConditionData, ...], ...] = (
    THUNDERSTORM_CONDITIONS,
    DRIZZLE_CONDITIONS,
    RAIN_CONDITIONS,
    SNOW_CONDITIONS,
    ATMOSPHERE_CONDITIONS,
    CLOUD_CONDITIONS,
    ADDITIONAL_CONDITIONS,
)


def find_condition(condition_id: int) -> Optional[ConditionData]:
    for group in CONDITION_GROUPS:
        for condition in group:
            if condition.id == condition_id:
                return condition
    return None


def describe(condition_id: int) -> str:
    """Return the meaning of ``condition_id``, or ``""`` when it is unknown."""
    condition = find_condition(condition_id)
    if condition is None:
        return ""
    return condition.meaning


__all__ = [
    "ConditionData",
    "CONDITION_GROUPS",
    "THUNDERSTORM_CONDITIONS",
    "DRIZZLE_CONDITIONS",
    "RAIN_CONDITIONS",
    "SNOW_CONDITIONS",
    "ATMOSPHERE_CONDITIONS",
    "CLOUD_CONDITIONS",
    "ADDITIONAL_CONDITIONS",
    "find_condition",
    "describe",
]
