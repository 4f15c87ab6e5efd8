"""Query construction for the current-weather endpoint."""

from __future__ import annotations

from typing import Literal

import httpx

from ..exceptions import MissingCredentialError

LookupMode = Literal["city", "coordinates", "zip", "city_id"]

WEATHER_PATH = "/weather"


def _lookup_params(mode: LookupMode, value: object) -> dict[str, str]:
    if mode == "city":
        return {"q": str(value)}
    if mode == "coordinates":
        lat, lon = value  # type: ignore[misc]
        return {"lat": f"{float(lat):f}", "lon": f"{float(lon):f}"}
    if mode == "zip":
        return {"zip": str(value)}
    if mode == "city_id":
        return {"id": str(int(value))}  # type: ignore[call-overload]
    raise ValueError(f"Unknown lookup mode {mode!r}.")


def build_query_params(
    mode: LookupMode,
    value: object,
    *,
    api_key: str,
    units: str = "",
) -> dict[str, str]:
    """Build ordered query parameters for one lookup.

    ``value`` is the city name, a ``(lat, lon)`` pair, the postal code, or the
    numeric city id depending on ``mode``. ``units`` is included only when
    non-empty and the key always comes last as ``APPID``.
    """
    if not api_key or not api_key.strip():
        raise MissingCredentialError("No API key configured; set OWM_API_KEY.")

    params = _lookup_params(mode, value)
    if units:
        params["units"] = units
    params["APPID"] = api_key
    return params


def build_url(base_url: str, params: dict[str, str]) -> str:
    """Render the full request URL with URL-encoded query values."""
    return str(httpx.URL(base_url.rstrip("/") + WEATHER_PATH, params=params))
