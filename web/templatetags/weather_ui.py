from __future__ import annotations

from django import template

from web.presentation import to_fahrenheit, weather_glyph

register = template.Library()


@register.filter
def fahrenheit(celsius: float) -> int:
    return to_fahrenheit(celsius)


@register.filter
def glyph(icon: str | None) -> str:
    return weather_glyph(icon).symbol


@register.filter
def glyph_name(icon: str | None) -> str:
    return weather_glyph(icon).value
