"""Server-rendered pages: the city search form and the results view."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from asgiref.sync import async_to_sync
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils import timezone

from weather.errors import WeatherError
from weather.services import get_weather_report

from .forms import CitySearchForm
from .presentation import (
    NO_CITY_MESSAGE,
    POPULAR_CITIES,
    build_results_context,
    describe_failure,
    friendly_error,
)

logger = logging.getLogger(__name__)


def results_url(city: str) -> str:
    return f"{reverse('web:results')}?{urlencode({'city': city})}"


def home(request: HttpRequest) -> HttpResponse:
    if "city" in request.GET:
        form = CitySearchForm(request.GET)
        if form.is_valid():
            return redirect(results_url(form.cleaned_data["city"]))
    else:
        form = CitySearchForm()

    return render(
        request,
        "web/home.html",
        {
            "form": form,
            "popular_cities": [
                (name, results_url(name)) for name in POPULAR_CITIES
            ],
        },
    )


def results(request: HttpRequest) -> HttpResponse:
    """Render the report for ``?city=``, or an error banner.

    The report is fetched before the page is rendered, so there is no
    loading placeholder. Failures still render with status 200.
    """

    city = request.GET.get("city", "")
    context: dict[str, object] = {
        "city": city,
        "search_url": reverse("web:home"),
    }

    if not city.strip():
        context["error"] = NO_CITY_MESSAGE
        return render(request, "web/results.html", context)

    try:
        report = async_to_sync(get_weather_report)(city)
    except WeatherError as exc:
        logger.info(
            "web.results.failed city=%s error=%s",
            city,
            exc.__class__.__name__,
        )
        context["error"] = friendly_error(describe_failure(exc))
        return render(request, "web/results.html", context)

    context.update(build_results_context(report, today=timezone.localdate()))
    return render(request, "web/results.html", context)
