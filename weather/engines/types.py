from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal, TypeAlias

ProviderName = Literal["openweather"]
EndpointName = Literal["current", "forecast"]

# Raw upstream JSON documents, passed through untouched by the provider.
RawPayload: TypeAlias = dict[str, Any]


@dataclass(frozen=True)
class WeatherQuery:
    city: str


@dataclass(frozen=True)
class TemperatureRange:
    day: int
    min: int
    max: int


@dataclass(frozen=True)
class CurrentConditions:
    temp: int
    feels_like: int
    humidity: int
    wind_speed: float
    description: str
    icon: str
    sunrise: str
    sunset: str
    pressure: int
    visibility: float


@dataclass(frozen=True)
class DailyForecast:
    date: str
    date_formatted: str
    temp: TemperatureRange
    description: str
    icon: str
    precipitation: int
    humidity: int


@dataclass(frozen=True)
class WeatherReport:
    city: str
    country: str
    current: CurrentConditions
    forecast: Sequence[DailyForecast]


@dataclass
class DayBucket:
    """Running totals for the forecast samples of one calendar day."""

    first_seen: datetime
    temps: list[float] = field(default_factory=list)
    # dict keys keep first-seen order, unlike a set
    descriptions: dict[str, None] = field(default_factory=dict)
    icons: list[str] = field(default_factory=list)
    precipitation_sum: float = 0.0
    humidity_sum: float = 0.0
    count: int = 0
