from __future__ import annotations

from typing import TypeAlias

from rest_framework import status
from rest_framework.response import Response

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


def success_response(
    data: JSONValue,
    *,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    """Return `data` as the response body, without an envelope."""

    return Response(data, status=status_code)


def error_response(
    message: str,
    *,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> Response:
    payload: dict[str, JSONValue] = {"error": message}
    return Response(payload, status=status_code)
