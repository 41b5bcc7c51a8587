from __future__ import annotations

from django.urls import path

from .views import home, results

app_name = "web"

urlpatterns = [
    path("", home, name="home"),
    path("weather/", results, name="results"),
]
