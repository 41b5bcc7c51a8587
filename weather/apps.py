from __future__ import annotations

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class WeatherAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "weather"
    verbose_name = "Weather"

    def ready(self) -> None:
        # Fail at startup rather than on every lookup.
        from .config import WeatherConfigError, load_weather_config

        try:
            load_weather_config()
        except WeatherConfigError as exc:
            raise ImproperlyConfigured(str(exc)) from exc
