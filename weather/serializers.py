from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from config.api.responses import JSONValue

from .engines.types import WeatherReport

CITY_REQUIRED = "City is required"


class CityQuerySerializer(serializers.Serializer):
    city: ClassVar[serializers.CharField] = serializers.CharField(
        trim_whitespace=True,
        error_messages={
            "required": CITY_REQUIRED,
            "blank": CITY_REQUIRED,
            "null": CITY_REQUIRED,
        },
    )


class TemperatureRangeSerializer(serializers.Serializer):
    day: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    min: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    max: ClassVar[serializers.IntegerField] = serializers.IntegerField()


class CurrentConditionsSerializer(serializers.Serializer):
    temp: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    feels_like: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField()
    )
    humidity: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    wind_speed: ClassVar[serializers.FloatField] = serializers.FloatField(
        help_text="km/h, one decimal"
    )
    description: ClassVar[serializers.CharField] = serializers.CharField()
    icon: ClassVar[serializers.CharField] = serializers.CharField()
    sunrise: ClassVar[serializers.CharField] = serializers.CharField()
    sunset: ClassVar[serializers.CharField] = serializers.CharField()
    pressure: ClassVar[serializers.IntegerField] = serializers.IntegerField()
    visibility: ClassVar[serializers.FloatField] = serializers.FloatField(
        help_text="km"
    )


class DailyForecastSerializer(serializers.Serializer):
    date: ClassVar[serializers.CharField] = serializers.CharField()
    dateFormatted: ClassVar[serializers.CharField] = (  # noqa: N815
        serializers.CharField(source="date_formatted")
    )
    temp: ClassVar[TemperatureRangeSerializer] = TemperatureRangeSerializer()
    description: ClassVar[serializers.CharField] = serializers.CharField()
    icon: ClassVar[serializers.CharField] = serializers.CharField()
    precipitation: ClassVar[serializers.IntegerField] = (
        serializers.IntegerField(help_text="mean probability, %")
    )
    humidity: ClassVar[serializers.IntegerField] = serializers.IntegerField()


class WeatherReportSerializer(serializers.Serializer):
    city: ClassVar[serializers.CharField] = serializers.CharField()
    country: ClassVar[serializers.CharField] = serializers.CharField(
        allow_blank=True
    )
    current: ClassVar[CurrentConditionsSerializer] = (
        CurrentConditionsSerializer()
    )
    forecast: ClassVar[DailyForecastSerializer] = DailyForecastSerializer(
        many=True
    )


def serialize_report(report: WeatherReport) -> dict[str, JSONValue]:
    serializer = WeatherReportSerializer(report)
    return dict(serializer.data)
