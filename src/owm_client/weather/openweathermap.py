"""OpenWeatherMap (api.openweathermap.org) current-weather provider."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config import Settings
from ..exceptions import WeatherReadError, WeatherTransportError
from ..redaction import sanitize_for_logging, sanitize_text
from .base import WeatherProvider
from .decoder import decode_current_weather
from .models import CurrentWeatherResponse
from .request import LookupMode, build_query_params, build_url


class OpenWeatherMapProvider(WeatherProvider):
    """Fetches and decodes current weather from OpenWeatherMap.

    Each lookup validates the key, builds the URL, performs exactly one GET
    bounded by ``settings.timeout_seconds``, and decodes the body. Errors
    propagate to the caller without retry.
    """

    def __init__(
        self,
        settings: Settings,
        logger: logging.Logger | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger or logging.getLogger("owm_client")
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=settings.timeout_seconds,
            headers={"Accept": "application/json"},
        )

    def __enter__(self) -> OpenWeatherMapProvider:
        return self

    def __exit__(self, exc_type: Any, exc: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def current_weather_from_city(self, city: str) -> CurrentWeatherResponse:
        return self._lookup("city", city)

    def current_weather_from_coordinates(self, lat: float, lon: float) -> CurrentWeatherResponse:
        return self._lookup("coordinates", (lat, lon))

    def current_weather_from_zip(self, zip_code: int | str) -> CurrentWeatherResponse:
        return self._lookup("zip", zip_code)

    def current_weather_from_city_id(self, city_id: int) -> CurrentWeatherResponse:
        return self._lookup("city_id", city_id)

    def _lookup(self, mode: LookupMode, value: object) -> CurrentWeatherResponse:
        # Raises MissingCredentialError before the client is touched.
        params = build_query_params(
            mode,
            value,
            api_key=self.settings.api_key,
            units=self.settings.units,
        )
        self.logger.debug("OpenWeatherMap %s query: %s", mode, sanitize_for_logging(params))
        url = build_url(self.settings.base_url, params)
        body = self._request_body(url, context=f"{mode} lookup")
        return decode_current_weather(body)

    def _request_body(self, url: str, context: str) -> bytes:
        safe_url = sanitize_text(url)
        try:
            with self._client.stream("GET", url, timeout=self.settings.timeout_seconds) as response:
                body = self._read_body(response, context=context, safe_url=safe_url)
        except httpx.TimeoutException as exc:
            raise WeatherTransportError(
                f"OpenWeatherMap {context} timed out after "
                f"{self.settings.timeout_seconds:g}s at {safe_url}."
            ) from exc
        except httpx.HTTPError as exc:
            raise WeatherTransportError(
                f"OpenWeatherMap {context} request failed at {safe_url}: "
                f"{sanitize_text(str(exc))}"
            ) from exc

        if response.is_error:
            status = response.status_code
            self.logger.warning("OpenWeatherMap %s failed with HTTP %d", context, status)
            raise WeatherTransportError(
                f"OpenWeatherMap {context} failed with status {status} "
                f"at {safe_url}: {sanitize_text(response.text[:300])}",
                status_code=status,
            )

        self.logger.info(
            "OpenWeatherMap %s succeeded (HTTP %d, %d bytes)",
            context,
            response.status_code,
            len(body),
        )
        return body

    @staticmethod
    def _read_body(response: httpx.Response, *, context: str, safe_url: str) -> bytes:
        try:
            return response.read()
        except (httpx.TransportError, httpx.StreamError) as exc:
            # Timeouts and early connection close during the read are read failures.
            raise WeatherReadError(
                f"OpenWeatherMap {context} body could not be read at {safe_url}: "
                f"{sanitize_text(str(exc))}"
            ) from exc
