"""Current-weather lookups against OpenWeatherMap."""

from .base import WeatherProvider
from .decoder import decode_current_weather, decode_forecast
from .models import (
    City,
    Clouds,
    Coord,
    CurrentWeatherResponse,
    ForecastEntry,
    ForecastResponse,
    MainMeasurements,
    Rain,
    Sys,
    WeatherCondition,
    Wind,
)
from .openweathermap import OpenWeatherMapProvider
from .request import LookupMode, build_query_params, build_url

__all__ = [
    "City",
    "Clouds",
    "Coord",
    "CurrentWeatherResponse",
    "ForecastEntry",
    "ForecastResponse",
    "LookupMode",
    "MainMeasurements",
    "OpenWeatherMapProvider",
    "Rain",
    "Sys",
    "WeatherCondition",
    "WeatherProvider",
    "Wind",
    "build_query_params",
    "build_url",
    "decode_current_weather",
    "decode_forecast",
]
