"""JSON decoding of response bodies into typed records."""

from __future__ import annotations

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import WeatherDecodeError
from .models import CurrentWeatherResponse, ForecastResponse

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _decode(body: bytes | str, model: type[_ModelT]) -> _ModelT:
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        # Malformed JSON surfaces as a ValidationError of type "json_invalid".
        if any(err.get("type") == "json_invalid" for err in exc.errors()):
            raise WeatherDecodeError(f"Response body is not valid JSON: {exc}") from exc
        raise WeatherDecodeError(
            f"Response body does not match the {model.__name__} schema: {exc}"
        ) from exc


def decode_current_weather(body: bytes | str) -> CurrentWeatherResponse:
    """Decode a current-weather body; no partial result is ever returned."""
    return _decode(body, CurrentWeatherResponse)


def decode_forecast(body: bytes | str) -> ForecastResponse:
    """Decode a forecast body."""
    return _decode(body, ForecastResponse)
