from __future__ import annotations

import logging
import time
from typing import Final

import httpx

from ..config import WeatherConfig
from ..errors import TransportError, UpstreamError, WeatherError
from ..metrics import (
    weather_provider_errors_total,
    weather_provider_latency_seconds,
    weather_provider_requests_total,
)
from .base import WeatherProvider
from .types import EndpointName, ProviderName, RawPayload

logger = logging.getLogger(__name__)

FALLBACK_MESSAGES: Final[dict[EndpointName, str]] = {
    "current": "Failed to fetch weather data",
    "forecast": "Failed to fetch forecast data",
}


class OpenWeatherProvider(WeatherProvider):
    """OpenWeatherMap 2.5 implementation.

    Uses `/weather` for current conditions and `/forecast` for the 5-day
    list of 3-hour samples, both queried by city name. Pass `client` to
    share a configured `httpx.AsyncClient` (timeouts, retries, mocks);
    otherwise a short-lived client is opened per call.
    """

    name: ProviderName = "openweather"

    def __init__(
        self,
        config: WeatherConfig,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self._client = client

    async def current(self, city: str) -> RawPayload:
        return await self._request("weather", city, endpoint="current")

    async def forecast(self, city: str) -> RawPayload:
        return await self._request("forecast", city, endpoint="forecast")

    async def _request(
        self, path: str, city: str, *, endpoint: EndpointName
    ) -> RawPayload:
        url = f"{self.config.base_url}/{path}"
        params = {
            "q": city,
            "units": self.config.units,
            "appid": self.config.api_key,
        }

        start_time = time.perf_counter()
        weather_provider_requests_total.labels(
            provider=self.name, endpoint=endpoint
        ).inc()
        try:
            response = await self._get(url, params, endpoint=endpoint)
            return self._parse(response, endpoint=endpoint)
        except WeatherError as exc:
            weather_provider_errors_total.labels(
                provider=self.name,
                endpoint=endpoint,
                error_type=exc.__class__.__name__,
            ).inc()
            raise
        finally:
            duration = time.perf_counter() - start_time
            weather_provider_latency_seconds.labels(
                provider=self.name, endpoint=endpoint
            ).observe(duration)

    async def _get(
        self, url: str, params: dict[str, str], *, endpoint: EndpointName
    ) -> httpx.Response:
        try:
            if self._client is not None:
                return await self._client.get(url, params=params)
            async with httpx.AsyncClient(
                timeout=self.config.timeout
            ) as client:
                return await client.get(url, params=params)
        except httpx.RequestError as exc:
            logger.warning(
                "weather.upstream.transport endpoint=%s err=%s",
                endpoint,
                exc.__class__.__name__,
            )
            raise TransportError(FALLBACK_MESSAGES[endpoint]) from exc

    def _parse(
        self, response: httpx.Response, *, endpoint: EndpointName
    ) -> RawPayload:
        fallback = FALLBACK_MESSAGES[endpoint]
        try:
            data = response.json()
        except ValueError as exc:
            if not response.is_success:
                raise UpstreamError(
                    fallback, upstream_status=response.status_code
                ) from exc
            logger.warning(
                "weather.upstream.unreadable endpoint=%s status=%s",
                endpoint,
                response.status_code,
            )
            raise TransportError(fallback) from exc

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            logger.warning(
                "weather.upstream.failure endpoint=%s status=%s message=%s",
                endpoint,
                response.status_code,
                message,
            )
            raise UpstreamError(
                str(message) if message else fallback,
                upstream_status=response.status_code,
            )

        if not isinstance(data, dict):
            raise TransportError(fallback)
        return data
