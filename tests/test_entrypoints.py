from __future__ import annotations

# ruff: noqa: S101
import importlib
import json
import sys
from collections.abc import Iterable
from typing import Any
from wsgiref.util import setup_testing_defaults

import pytest

import manage


def test_manage_main_defaults_to_project_settings(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    seen: dict[str, Any] = {}

    def _fake_execute(argv: list[str]) -> None:
        seen["argv"] = argv

    monkeypatch.setattr(
        "django.core.management.execute_from_command_line",
        _fake_execute,
    )
    monkeypatch.delenv("DJANGO_SETTINGS_MODULE", raising=False)
    monkeypatch.setattr(sys, "argv", ["manage.py", "runserver"])

    manage.main()

    assert seen["argv"] == ["manage.py", "runserver"]
    assert manage.os.environ["DJANGO_SETTINGS_MODULE"] == "config.settings"


def test_wsgi_application_serves_api_root() -> None:
    module = importlib.reload(importlib.import_module("config.wsgi"))
    environ: dict[str, Any] = {"PATH_INFO": "/api/"}
    setup_testing_defaults(environ)
    started: list[str] = []

    def start_response(status: str, headers: Iterable[Any]) -> None:
        started.append(status)

    body = b"".join(module.application(environ, start_response))

    assert started == ["200 OK"]
    assert json.loads(body)["service"] == "weather-compass"


def test_asgi_application_importable() -> None:
    module = importlib.reload(importlib.import_module("config.asgi"))
    assert callable(module.application)


def test_mypy_settings_keep_weather_defaults(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("DJANGO_SECRET_KEY", "test-secret")

    module = importlib.reload(importlib.import_module("config.mypy_settings"))

    assert module.DEBUG is False
    assert module.USE_TZ is True
    assert module.OPENWEATHER_UNITS == "metric"
    assert "weather.apps.WeatherAppConfig" in module.INSTALLED_APPS
