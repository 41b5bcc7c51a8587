"""Weather API endpoint.

Authentication: none.
Responses: the report document itself on success; failures are flattened
to ``{"error": "<message>"}`` by `config.api.exceptions`.
"""

from __future__ import annotations

from asgiref.sync import async_to_sync
from drf_spectacular.utils import OpenApiParameter, OpenApiTypes, extend_schema
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.api.openapi import error_body_serializer
from config.api.responses import success_response

from .serializers import (
    CityQuerySerializer,
    WeatherReportSerializer,
    serialize_report,
)
from .services import get_weather_report

weather_error_schema = error_body_serializer("WeatherErrorResponse")


class WeatherView(APIView):
    """Fetch current conditions and a 5-day forecast for a city.

    Auth: none.
    Response: `city`, `country`, `current` conditions and up to five
    `forecast` days, one per calendar date.
    """

    permission_classes = [AllowAny]

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name="city",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                required=True,
                description="Free-text city name, forwarded to the provider",
            ),
        ],
        responses={
            200: WeatherReportSerializer,
            400: weather_error_schema,
            500: weather_error_schema,
        },
    )
    def get(self, request: Request) -> Response:
        """Return the merged weather report.

        Inputs: city (required, non-blank).
        Outputs: temperatures in °C, wind in km/h, visibility in km.
        """

        serializer = CityQuerySerializer(data=request.query_params)
        serializer.is_valid(raise_exception=True)
        report = async_to_sync(get_weather_report)(
            serializer.validated_data["city"]
        )
        return success_response(serialize_report(report))
