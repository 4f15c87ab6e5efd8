"""Provider-agnostic current-weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import CurrentWeatherResponse


class WeatherProvider(ABC):
    """Base contract for current-weather providers: one lookup per call."""

    @abstractmethod
    def current_weather_from_city(self, city: str) -> CurrentWeatherResponse:
        """Fetch current weather for a free-form city name."""

    @abstractmethod
    def current_weather_from_coordinates(self, lat: float, lon: float) -> CurrentWeatherResponse:
        """Fetch current weather at geographic coordinates."""

    @abstractmethod
    def current_weather_from_zip(self, zip_code: int | str) -> CurrentWeatherResponse:
        """Fetch current weather for a postal code."""

    @abstractmethod
    def current_weather_from_city_id(self, city_id: int) -> CurrentWeatherResponse:
        """Fetch current weather for a provider city id."""

    @abstractmethod
    def close(self) -> None:
        """Release provider resources."""
