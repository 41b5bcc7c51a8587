from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, tzinfo
from typing import Any

import httpx

from .config import WeatherConfig, load_weather_config
from .engines.base import WeatherProvider
from .engines.openweather import OpenWeatherProvider
from .engines.types import (
    CurrentConditions,
    DailyForecast,
    DayBucket,
    RawPayload,
    TemperatureRange,
    WeatherQuery,
    WeatherReport,
)
from .errors import TransportError, ValidationError, WeatherError
from .metrics import weather_reports_total
from .rounding import round_half_up, round_int
from .timeutils import (
    format_clock,
    format_short_day,
    from_unix,
    isoformat_utc,
)

logger = logging.getLogger(__name__)

MAX_FORECAST_DAYS = 5
DEFAULT_VISIBILITY_KM = 10
MPS_TO_KMH = 3.6


def build_provider(
    config: WeatherConfig, client: httpx.AsyncClient | None = None
) -> WeatherProvider:
    return OpenWeatherProvider(config, client=client)


def _validate_query(city: str | None) -> WeatherQuery:
    if city is None or not city.strip():
        raise ValidationError()
    return WeatherQuery(city=city.strip())


async def get_weather_report(
    city: str | None,
    *,
    config: WeatherConfig | None = None,
    provider: WeatherProvider | None = None,
) -> WeatherReport:
    """Fetch current conditions and the forecast for `city` and merge them.

    The two upstream calls run one after the other; the first failure
    aborts the lookup, so callers never see a partial report.
    """

    try:
        query = _validate_query(city)
    except ValidationError:
        weather_reports_total.labels(outcome="invalid").inc()
        raise

    config = config or load_weather_config()
    provider_impl = provider or build_provider(config)

    try:
        current_payload = await provider_impl.current(query.city)
        forecast_payload = await provider_impl.forecast(query.city)
        try:
            report = build_report(
                current_payload, forecast_payload, zone=config.zone
            )
        except (
            AttributeError,
            KeyError,
            IndexError,
            TypeError,
            ValueError,
        ) as exc:
            logger.warning(
                "weather.report.malformed city=%s err=%s",
                query.city,
                exc.__class__.__name__,
            )
            raise TransportError() from exc
    except WeatherError as exc:
        weather_reports_total.labels(outcome="error").inc()
        logger.info(
            "weather.report.failed city=%s error=%s message=%s",
            query.city,
            exc.__class__.__name__,
            exc.message,
        )
        raise

    weather_reports_total.labels(outcome="success").inc()
    logger.info(
        "weather.report.built city=%s country=%s days=%s",
        report.city,
        report.country,
        len(report.forecast),
    )
    return report


def build_report(
    current_payload: RawPayload,
    forecast_payload: RawPayload,
    *,
    zone: tzinfo | None = None,
) -> WeatherReport:
    buckets = _group_samples(forecast_payload["list"], zone)
    days = list(buckets.values())[:MAX_FORECAST_DAYS]
    return WeatherReport(
        city=current_payload["name"],
        country=current_payload["sys"].get("country", ""),
        current=_build_current(current_payload, zone),
        forecast=[_reduce_bucket(bucket) for bucket in days],
    )


def _group_samples(
    samples: Iterable[Mapping[str, Any]], zone: tzinfo | None
) -> dict[date, DayBucket]:
    # Samples arrive time-ordered, so insertion order is chronological.
    buckets: dict[date, DayBucket] = {}
    for sample in samples:
        observed = from_unix(sample["dt"], zone)
        bucket = buckets.get(observed.date())
        if bucket is None:
            bucket = DayBucket(first_seen=observed)
            buckets[observed.date()] = bucket

        main = sample["main"]
        conditions = sample["weather"][0]
        bucket.temps.append(float(main["temp"]))
        bucket.descriptions.setdefault(conditions["description"], None)
        bucket.icons.append(conditions["icon"])
        bucket.precipitation_sum += float(sample.get("pop") or 0)
        bucket.humidity_sum += float(main["humidity"])
        bucket.count += 1
    return buckets


def _reduce_bucket(bucket: DayBucket) -> DailyForecast:
    middle = bucket.count // 2
    icon = bucket.icons[middle] if middle < len(bucket.icons) else ""
    return DailyForecast(
        date=isoformat_utc(bucket.first_seen),
        date_formatted=format_short_day(bucket.first_seen),
        temp=TemperatureRange(
            day=round_int(sum(bucket.temps) / len(bucket.temps)),
            min=round_int(min(bucket.temps)),
            max=round_int(max(bucket.temps)),
        ),
        description=", ".join(bucket.descriptions),
        icon=icon or bucket.icons[0],
        precipitation=round_int(bucket.precipitation_sum / bucket.count * 100),
        humidity=round_int(bucket.humidity_sum / bucket.count),
    )


def _build_current(
    payload: RawPayload, zone: tzinfo | None
) -> CurrentConditions:
    main = payload["main"]
    conditions = payload["weather"][0]
    sys_block = payload["sys"]
    # 0 is treated like a missing reading.
    visibility = payload.get("visibility")
    return CurrentConditions(
        temp=round_int(main["temp"]),
        feels_like=round_int(main["feels_like"]),
        humidity=main["humidity"],
        wind_speed=round_half_up(
            float(payload["wind"]["speed"]) * MPS_TO_KMH, 1
        ),
        description=conditions["description"],
        icon=conditions["icon"],
        sunrise=format_clock(sys_block["sunrise"], zone),
        sunset=format_clock(sys_block["sunset"], zone),
        pressure=main["pressure"],
        visibility=(
            visibility / 1000 if visibility else DEFAULT_VISIBILITY_KM
        ),
    )
