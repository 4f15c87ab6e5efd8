"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherClientError(Exception):
    """Base class for current-weather lookup failures."""


class MissingCredentialError(WeatherClientError):
    """Raised before any network access when no API key is configured."""


class WeatherTransportError(WeatherClientError):
    """Raised when the HTTP request fails, times out, or returns an error status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class WeatherReadError(WeatherTransportError):
    """Raised when the response body cannot be fully read."""


class WeatherDecodeError(WeatherClientError):
    """Raised when a response body is not valid JSON or does not match the schema."""
