"""
URL configuration for config project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.1/topics/http/urls/
"""

# Routes:
# - GET / -> city search page (web.urls)
# - GET /weather/?city= -> results page (web.urls)
# - GET /api/ -> api_root
# - GET /api/weather?city= -> weather.urls
# - /api/schema/ -> OpenAPI schema
# - /api/docs/ -> Swagger UI
# - /api/redoc/ -> ReDoc
# - /metrics -> Prometheus

from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from .views import api_root

urlpatterns = [
    path("", include("web.urls")),
    path("", include("django_prometheus.urls")),
    path("api/", api_root, name="api-root"),
    path("api/", include("weather.urls")),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]
