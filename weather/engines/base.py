from __future__ import annotations

from abc import ABC, abstractmethod

from .types import ProviderName, RawPayload


class WeatherProvider(ABC):
    """Abstract base for city-name weather providers."""

    name: ProviderName

    @abstractmethod
    async def current(self, city: str) -> RawPayload:
        """Return the current-conditions document for a city."""

    @abstractmethod
    async def forecast(self, city: str) -> RawPayload:
        """Return the 5-day / 3-hour forecast document for a city."""
