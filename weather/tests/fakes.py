from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo

from weather.config import WeatherConfig
from weather.engines.base import WeatherProvider
from weather.engines.types import ProviderName, RawPayload

# 2025-01-06T00:00:00Z, a Monday.
DAY0 = 1_736_121_600
HOUR = 3600
DAY = 24 * HOUR

UTC_CONFIG = WeatherConfig(api_key="test-key", zone=ZoneInfo("UTC"))


def forecast_sample(
    ts: int,
    temp: float,
    *,
    description: str = "clear sky",
    icon: str = "01d",
    pop: float | None = None,
    humidity: float = 50,
) -> dict[str, Any]:
    sample: dict[str, Any] = {
        "dt": ts,
        "main": {"temp": temp, "humidity": humidity},
        "weather": [{"description": description, "icon": icon}],
    }
    if pop is not None:
        sample["pop"] = pop
    return sample


def forecast_payload(samples: list[dict[str, Any]]) -> RawPayload:
    return {"cod": "200", "cnt": len(samples), "list": samples}


def current_payload(**overrides: Any) -> RawPayload:
    payload: RawPayload = {
        "name": "Nairobi",
        "sys": {
            "country": "KE",
            "sunrise": DAY0 + 3 * HOUR + 5 * 60 + 9,
            "sunset": DAY0 + 15 * HOUR + 30 * 60,
        },
        "main": {
            "temp": 21.6,
            "feels_like": 20.4,
            "humidity": 60,
            "pressure": 1015,
        },
        "wind": {"speed": 10},
        "weather": [{"description": "few clouds", "icon": "02d"}],
        "visibility": 8000,
    }
    payload.update(overrides)
    return payload


def five_day_samples(days: int = 6) -> list[dict[str, Any]]:
    """Eight 3-hourly samples per day, starting at DAY0."""

    return [
        forecast_sample(DAY0 + day * DAY + slot * 3 * HOUR, 10.0 + day)
        for day in range(days)
        for slot in range(8)
    ]


class FakeProvider(WeatherProvider):
    """Provider returning canned payloads and recording the calls made."""

    name: ProviderName = "openweather"

    def __init__(
        self,
        *,
        current: RawPayload | None = None,
        forecast: RawPayload | None = None,
        current_error: Exception | None = None,
        forecast_error: Exception | None = None,
    ) -> None:
        self._current = current if current is not None else current_payload()
        self._forecast = (
            forecast
            if forecast is not None
            else forecast_payload(five_day_samples())
        )
        self._current_error = current_error
        self._forecast_error = forecast_error
        self.calls: list[tuple[str, str]] = []

    async def current(self, city: str) -> RawPayload:
        self.calls.append(("current", city))
        if self._current_error is not None:
            raise self._current_error
        return self._current

    async def forecast(self, city: str) -> RawPayload:
        self.calls.append(("forecast", city))
        if self._forecast_error is not None:
            raise self._forecast_error
        return self._forecast
