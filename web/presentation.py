"""Display helpers for the search and results pages.

Everything here is pure: it turns a `WeatherReport` (or a failure) into the
values the templates print. Temperatures stay in Celsius; Fahrenheit is
derived for the client-side unit toggle.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

from weather.engines.types import DailyForecast, WeatherReport
from weather.errors import UpstreamError, WeatherError
from weather.rounding import round_int
from weather.timeutils import format_long_day

POPULAR_CITIES: tuple[str, ...] = (
    "New York",
    "Tokyo",
    "Paris",
    "Dubai",
    "Sydney",
    "Rio",
)

NO_CITY_MESSAGE = "No city specified"
CITY_NOT_FOUND_MESSAGE = "City not found. Please check the spelling."


class Glyph(str, Enum):
    SUN = "sun"
    CLOUD_SUN = "cloud-sun"
    CLOUD = "cloud"
    CLOUDS = "clouds"
    RAIN = "rain"
    LIGHTNING = "lightning"
    SNOW = "snow"
    FOG = "fog"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: dict[Glyph, str] = {
    Glyph.SUN: "☀️",
    Glyph.CLOUD_SUN: "⛅",
    Glyph.CLOUD: "☁️",
    Glyph.CLOUDS: "\U0001f325️",
    Glyph.RAIN: "\U0001f327️",
    Glyph.LIGHTNING: "⛈️",
    Glyph.SNOW: "❄️",
    Glyph.FOG: "\U0001f32b️",
}

# Keyed by the numeric part of the provider icon code ("10d" -> "10").
_ICON_GLYPHS: dict[str, Glyph] = {
    "01": Glyph.SUN,
    "02": Glyph.CLOUD_SUN,
    "03": Glyph.CLOUD,
    "04": Glyph.CLOUDS,
    "09": Glyph.RAIN,
    "10": Glyph.RAIN,
    "11": Glyph.LIGHTNING,
    "13": Glyph.SNOW,
    "50": Glyph.FOG,
}


def weather_glyph(icon: str | None) -> Glyph:
    """Map a provider icon code to a glyph; unknown codes map to cloud."""

    return _ICON_GLYPHS.get((icon or "")[:2], Glyph.CLOUD)


def to_fahrenheit(celsius: float) -> int:
    return round_int(celsius * 9 / 5 + 32)


def condition_theme(description: str) -> str:
    """Pick the card colour scheme for a weather description."""

    desc = description.lower()
    if "rain" in desc:
        return "rain"
    if "cloud" in desc:
        return "cloud"
    if "clear" in desc:
        return "clear"
    if "snow" in desc:
        return "snow"
    return "warm"


def describe_failure(exc: WeatherError) -> str:
    if isinstance(exc, UpstreamError) and exc.upstream_status is not None:
        return (
            f"Request failed with status {exc.upstream_status}: "
            f"{exc.message}"
        )
    return exc.message


def friendly_error(message: str) -> str:
    if "404" in message:
        return CITY_NOT_FOUND_MESSAGE
    return message


def split_day_label(date_formatted: str) -> tuple[str, str]:
    """Split ``"Mon, Jan 6"`` into ``("Mon", "Jan 6")``."""

    weekday, _, month_day = date_formatted.partition(", ")
    return weekday, month_day


@dataclass(frozen=True)
class ForecastCard:
    weekday: str
    month_day: str
    icon: str
    day: int
    high: int
    low: int
    description: str
    highlight: bool


@dataclass(frozen=True)
class TrendBar:
    weekday: str
    temp: int
    height_percent: float


def forecast_cards(forecast: Sequence[DailyForecast]) -> list[ForecastCard]:
    cards: list[ForecastCard] = []
    for index, day in enumerate(forecast):
        weekday, month_day = split_day_label(day.date_formatted)
        cards.append(
            ForecastCard(
                weekday=weekday,
                month_day=month_day,
                icon=day.icon,
                day=day.temp.day,
                high=day.temp.max,
                low=day.temp.min,
                description=day.description.split(", ")[0],
                highlight=index == 0,
            )
        )
    return cards


def trend_bars(forecast: Sequence[DailyForecast]) -> list[TrendBar]:
    """Scale daily mean temperatures between the coldest and warmest day.

    When every day has the same mean the bars are flat at 0%.
    """

    if not forecast:
        return []
    temps = [day.temp.day for day in forecast]
    low, high = min(temps), max(temps)
    span = high - low
    return [
        TrendBar(
            weekday=split_day_label(day.date_formatted)[0],
            temp=day.temp.day,
            height_percent=(
                round((day.temp.day - low) / span * 100, 1) if span else 0.0
            ),
        )
        for day in forecast
    ]


def build_results_context(
    report: WeatherReport, *, today: date
) -> dict[str, Any]:
    return {
        "report": report,
        "theme": condition_theme(report.current.description),
        "today_label": format_long_day(today),
        "cards": forecast_cards(report.forecast),
        "bars": trend_bars(report.forecast),
    }
