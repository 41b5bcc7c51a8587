"""Failure taxonomy for weather lookups.

Every error carries the HTTP status it is surfaced with; the API exception
handler renders them all as a flat ``{"error": "<message>"}`` body.
"""

from __future__ import annotations


class WeatherError(Exception):
    """Base class for failures raised while building a weather report."""

    status_code: int = 500
    default_message: str = "Failed to fetch weather data"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WeatherError):
    """The query itself is unusable; the client has to correct it."""

    status_code = 400
    default_message = "City is required"


class UpstreamError(WeatherError):
    """The provider answered with a non-success status."""

    def __init__(
        self,
        message: str | None = None,
        *,
        upstream_status: int | None = None,
    ) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class TransportError(WeatherError):
    """The provider could not be reached or returned an unreadable body."""
