"""OpenWeatherMap current-weather client."""

from .config import Settings, load_settings
from .exceptions import (
    ConfigError,
    MissingCredentialError,
    WeatherClientError,
    WeatherDecodeError,
    WeatherReadError,
    WeatherTransportError,
)
from .weather import CurrentWeatherResponse, OpenWeatherMapProvider

__all__ = [
    "ConfigError",
    "CurrentWeatherResponse",
    "MissingCredentialError",
    "OpenWeatherMapProvider",
    "Settings",
    "WeatherClientError",
    "WeatherDecodeError",
    "WeatherReadError",
    "WeatherTransportError",
    "load_settings",
]

__version__ = "0.1.0"
