from __future__ import annotations

# ruff: noqa: S101
from decimal import Decimal
from unittest.mock import patch

from django.test import Client
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response

from config.api.exceptions import (
    _first_message,
    _to_json_value,
    custom_exception_handler,
)
from config.api.responses import error_response, success_response
from weather.errors import TransportError, UpstreamError
from weather.errors import ValidationError as CityValidationError


def test_error_response_payload() -> None:
    resp = error_response("Bad request", status_code=418)
    assert resp.status_code == 418
    assert resp.data == {"error": "Bad request"}


def test_success_response_has_no_envelope() -> None:
    resp = success_response({"city": "Paris"})
    assert resp.status_code == 200
    assert resp.data == {"city": "Paris"}


def test_custom_exception_handler_returns_500_on_unhandled() -> None:
    with patch("rest_framework.views.exception_handler", return_value=None):
        resp = custom_exception_handler(Exception("boom"), {})
    assert resp.status_code == 500
    assert resp.data == {"error": "Internal server error"}


def test_custom_exception_handler_maps_weather_errors() -> None:
    resp = custom_exception_handler(UpstreamError("city not found"), {})
    assert resp.status_code == 500
    assert resp.data == {"error": "city not found"}

    resp = custom_exception_handler(TransportError(), {})
    assert resp.status_code == 500
    assert resp.data == {"error": "Failed to fetch weather data"}

    resp = custom_exception_handler(CityValidationError(), {})
    assert resp.status_code == 400
    assert resp.data == {"error": "City is required"}


def test_custom_exception_handler_flattens_drf_validation() -> None:
    exc = ValidationError({"city": ["City is required"]})
    resp = custom_exception_handler(exc, {})
    assert resp.status_code == 400
    assert resp.data == {"error": "City is required"}


def test_custom_exception_handler_keeps_drf_status() -> None:
    with patch(
        "rest_framework.views.exception_handler",
        return_value=Response({"detail": "Not found."}, status=404),
    ):
        resp = custom_exception_handler(NotFound(), {})
    assert resp.status_code == 404
    assert resp.data == {"error": "Not found."}


def test_to_json_value_handles_sequences() -> None:
    payload = ("ok", {"value": Decimal("1.25")})
    assert _to_json_value(payload) == ["ok", {"value": "1.25"}]


def test_first_message_walks_nested_details() -> None:
    assert _first_message({"a": [], "b": {"c": ["deep"]}}) == "deep"
    assert _first_message([None, 3]) is None


def test_api_root_returns_metadata() -> None:
    resp = Client().get("/api/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["service"] == "weather-compass"
    assert body["docs"] == "/api/docs/"


def test_openapi_schema_lists_weather_endpoint() -> None:
    resp = Client().get("/api/schema/", {"format": "json"})
    assert resp.status_code == 200
    assert "/api/weather" in resp.json()["paths"]


def test_metrics_endpoint_exposes_weather_counters() -> None:
    resp = Client().get("/metrics")
    assert resp.status_code == 200
    assert b"weather_reports_total" in resp.content
