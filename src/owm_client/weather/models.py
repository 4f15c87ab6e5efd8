"""Typed models for OpenWeatherMap current-weather and forecast documents.

Every record is frozen and validated strictly: a JSON value of the wrong type
is rejected rather than coerced. Fields missing from a document, or sent as
``null``, take zero values so a decoded record reflects exactly what the
service returned.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _from_epoch(value: int) -> datetime | None:
    if not value:
        return None
    return datetime.fromtimestamp(value, tz=UTC)


class OWMRecord(BaseModel):
    """Immutable base for all decoded records."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat explicit nulls as absent so the field keeps its zero value."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Coord(OWMRecord):
    """Location coordinates."""

    lon: float = 0.0
    lat: float = 0.0


class City(OWMRecord):
    """City id and name as reported in forecast documents."""

    id: int = 0
    name: str = ""


class WeatherCondition(OWMRecord):
    """One weather condition entry (category, description, icon)."""

    id: int = 0
    main: str = ""
    description: str = ""
    icon: str = ""


class MainMeasurements(OWMRecord):
    """Core measurements: temperatures, pressure and humidity."""

    temp: float = 0.0
    feels_like: float = 0.0
    pressure: int = 0
    humidity: int = 0
    temp_min: float = 0.0
    temp_max: float = 0.0
    sea_level: int | None = None
    grnd_level: int | None = None


class Wind(OWMRecord):
    speed: float = 0.0
    deg: float = 0.0
    gust: float | None = None


class Clouds(OWMRecord):
    all: int = 0


class Rain(OWMRecord):
    """Rain accumulation volumes in millimetres."""

    one_hour: float | None = Field(default=None, alias="1h")
    three_hours: float | None = Field(default=None, alias="3h")


class Sys(OWMRecord):
    """System and ephemerides data.

    ``message`` is typed as a float because that is what the provider sends.
    """

    type: int = 0
    id: int = 0
    message: float = 0.0
    country: str = ""
    sunrise: int = 0
    sunset: int = 0

    @property
    def sunrise_at(self) -> datetime | None:
        return _from_epoch(self.sunrise)

    @property
    def sunset_at(self) -> datetime | None:
        return _from_epoch(self.sunset)


class CurrentWeatherResponse(OWMRecord):
    """Current weather document returned by the ``/weather`` endpoint."""

    coord: Coord = Field(default_factory=Coord)
    weather: list[WeatherCondition] = Field(default_factory=list)
    base: str = ""
    main: MainMeasurements = Field(default_factory=MainMeasurements)
    visibility: int = 0
    wind: Wind = Field(default_factory=Wind)
    clouds: Clouds = Field(default_factory=Clouds)
    rain: Rain | None = None
    dt: int = 0
    sys: Sys = Field(default_factory=Sys)
    timezone: int = 0
    id: int = 0
    name: str = ""
    cod: int = 0

    @property
    def observed_at(self) -> datetime | None:
        """Observation time as an aware UTC datetime, or None when ``dt`` is unset."""
        return _from_epoch(self.dt)

    @property
    def primary_condition(self) -> WeatherCondition | None:
        return self.weather[0] if self.weather else None


class ForecastEntry(OWMRecord):
    """One time step of a forecast list."""

    dt: int = 0
    main: MainMeasurements = Field(default_factory=MainMeasurements)
    weather: list[WeatherCondition] = Field(default_factory=list)
    clouds: Clouds = Field(default_factory=Clouds)
    wind: Wind = Field(default_factory=Wind)


class ForecastResponse(OWMRecord):
    """Forecast document; the entry list is exposed as ``entries``."""

    city: City = Field(default_factory=City)
    coord: Coord = Field(default_factory=Coord)
    country: str = ""
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")
