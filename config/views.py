"""Project-level non-DRF views.

This module contains the API landing endpoint used for quick service checks
and links to the weather endpoint and the interactive documentation.
"""

from __future__ import annotations

from django.http import HttpRequest, JsonResponse


def api_root(request: HttpRequest) -> JsonResponse:
    """Return basic service metadata and documentation links."""
    return JsonResponse(
        {
            "ok": True,
            "service": "weather-compass",
            "weather": "/api/weather?city={city}",
            "docs": "/api/docs/",
            "redoc": "/api/redoc/",
        }
    )
