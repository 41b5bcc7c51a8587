from __future__ import annotations

from django import forms

CITY_MISSING = "Please enter a city name"


class CitySearchForm(forms.Form):
    city = forms.CharField(
        strip=True,
        error_messages={"required": CITY_MISSING},
        widget=forms.TextInput(
            attrs={
                "placeholder": "Search for a city...",
                "autocomplete": "off",
                "autofocus": True,
            }
        ),
    )
