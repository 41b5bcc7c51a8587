"""drf-spectacular helpers for documenting the flat error body.

`config.api.exceptions.custom_exception_handler` renders every failure as
``{"error": "<message>"}``; this builds the matching schema component.
"""

from __future__ import annotations

from drf_spectacular.utils import inline_serializer
from rest_framework import serializers
from rest_framework.serializers import Serializer


def error_body_serializer(name: str) -> Serializer:
    """Build an OpenAPI schema matching `error_response`."""

    return inline_serializer(
        name=name,
        fields={"error": serializers.CharField()},
    )
