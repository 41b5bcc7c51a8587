"""OpenWeatherMap configuration loader.

Reads OPENWEATHER_* / WEATHER_DISPLAY_TZ from Django settings into an
immutable object the aggregation service receives explicitly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo

from django.conf import settings

from .timeutils import get_zone

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5"
DEFAULT_UNITS = "metric"


class WeatherConfigError(Exception):
    """Raised when weather configuration is present but unusable."""

    def __init__(self, message: str, *, code: str) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class WeatherConfig:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    units: str = DEFAULT_UNITS
    # None keeps httpx waiting indefinitely.
    timeout: float | None = None
    # None buckets and formats times in the server's local zone.
    zone: tzinfo | None = None


def _parse_timeout(raw: object) -> float | None:
    if raw is None or raw == "":
        return None
    try:
        timeout = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise WeatherConfigError(
            "OPENWEATHER_TIMEOUT_S must be a number of seconds.",
            code="bad_timeout",
        ) from exc
    if timeout <= 0:
        raise WeatherConfigError(
            "OPENWEATHER_TIMEOUT_S must be positive.",
            code="bad_timeout",
        )
    return timeout


def _parse_zone(raw: object) -> tzinfo | None:
    if raw is None or raw == "":
        return None
    if not isinstance(raw, str):
        raise WeatherConfigError(
            "WEATHER_DISPLAY_TZ must be a string.", code="bad_timezone"
        )
    try:
        return get_zone(raw)
    except ValueError as exc:
        raise WeatherConfigError(str(exc), code="bad_timezone") from exc


def load_weather_config() -> WeatherConfig:
    """Return the provider configuration from settings."""

    api_key = str(getattr(settings, "OPENWEATHER_API_KEY", "") or "").strip()
    if not api_key:
        logger.warning(
            "weather.config.missing_api_key setting=OPENWEATHER_API_KEY"
        )

    base_url = str(
        getattr(settings, "OPENWEATHER_BASE_URL", "") or DEFAULT_BASE_URL
    ).rstrip("/")
    units = str(getattr(settings, "OPENWEATHER_UNITS", "") or DEFAULT_UNITS)

    return WeatherConfig(
        api_key=api_key,
        base_url=base_url,
        units=units,
        timeout=_parse_timeout(
            getattr(settings, "OPENWEATHER_TIMEOUT_S", None)
        ),
        zone=_parse_zone(getattr(settings, "WEATHER_DISPLAY_TZ", None)),
    )
