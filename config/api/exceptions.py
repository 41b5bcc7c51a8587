from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from rest_framework.response import Response

logger = logging.getLogger(__name__)

JSONValue: TypeAlias = (
    None
    | bool
    | int
    | float
    | str
    | list["JSONValue"]
    | dict[str, "JSONValue"]
)


def _to_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, str | int | float | bool):
        return value
    if isinstance(value, Mapping):
        return {str(k): _to_json_value(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_to_json_value(v) for v in value]
    return str(value)


def _first_message(value: JSONValue) -> str | None:
    """Return the first string found in a DRF error detail structure."""

    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        values: list[JSONValue] = list(value.values())
    elif isinstance(value, list):
        values = value
    else:
        return None
    for item in values:
        found = _first_message(item)
        if found:
            return found
    return None


def custom_exception_handler(
    exc: Exception,
    context: dict[str, Any],
) -> Response:
    # Lazy imports: safe even if settings aren't configured at import time.
    from rest_framework import status
    from rest_framework.response import Response
    from rest_framework.views import exception_handler as drf_exception_handler

    from weather.errors import WeatherError

    if isinstance(exc, WeatherError):
        return Response({"error": exc.message}, status=exc.status_code)

    response = drf_exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            "api.unhandled view=%s err=%s",
            view.__class__.__name__ if view is not None else None,
            exc.__class__.__name__,
            exc_info=exc,
        )
        return Response(
            {"error": "Internal server error"},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    detail = _to_json_value(response.data)
    response.data = {"error": _first_message(detail) or "Request failed"}
    return response
