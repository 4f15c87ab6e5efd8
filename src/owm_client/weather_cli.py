"""CLI: fetch current weather for one location and print a summary."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from .config import Settings, load_settings
from .exceptions import ConfigError, MissingCredentialError, WeatherClientError
from .log_setup import setup_logger
from .redaction import sanitize_for_logging
from .weather.models import CurrentWeatherResponse
from .weather.openweathermap import OpenWeatherMapProvider


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse weather CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Fetch current weather from OpenWeatherMap for one location."
    )
    location = parser.add_mutually_exclusive_group(required=True)
    location.add_argument("--city", type=str, help="Free-form city name, e.g. 'London,uk'.")
    location.add_argument(
        "--coords",
        type=float,
        nargs=2,
        metavar=("LAT", "LON"),
        help="Latitude and longitude.",
    )
    location.add_argument("--zip", dest="zip_code", type=str, help="Postal code.")
    location.add_argument("--id", dest="city_id", type=int, help="OpenWeatherMap city id.")
    parser.add_argument(
        "--units",
        type=str,
        default=None,
        help="Unit system passed through to the provider (overrides OWM_UNITS).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the decoded record as JSON instead of a table.",
    )
    return parser.parse_args(argv)


def _fetch(provider: OpenWeatherMapProvider, args: argparse.Namespace) -> CurrentWeatherResponse:
    if args.city is not None:
        return provider.current_weather_from_city(args.city)
    if args.coords is not None:
        lat, lon = args.coords
        return provider.current_weather_from_coordinates(lat, lon)
    if args.zip_code is not None:
        return provider.current_weather_from_zip(args.zip_code)
    return provider.current_weather_from_city_id(args.city_id)


def _print_summary(console: Console, record: CurrentWeatherResponse, settings: Settings) -> None:
    location = record.name or "unknown"
    if record.sys.country:
        location = f"{location}, {record.sys.country}"
    console.print(
        f"Location={location} id={record.id} "
        f"coords=({record.coord.lat:.4f}, {record.coord.lon:.4f}) "
        f"units={settings.units or 'default'}"
    )

    table = Table(title="Current Weather")
    table.add_column("Field")
    table.add_column("Value", overflow="fold")

    condition = record.primary_condition
    if condition is not None:
        table.add_row("Conditions", f"{condition.main} ({condition.description})")
    table.add_row("Temperature", f"{record.main.temp:g}")
    table.add_row("Feels like", f"{record.main.feels_like:g}")
    table.add_row("Min / Max", f"{record.main.temp_min:g} / {record.main.temp_max:g}")
    table.add_row("Pressure", str(record.main.pressure))
    table.add_row("Humidity %", str(record.main.humidity))
    table.add_row("Wind", f"{record.wind.speed:g} @ {record.wind.deg:g}°")
    table.add_row("Clouds %", str(record.clouds.all))
    if record.rain is not None:
        rain = record.rain.one_hour if record.rain.one_hour is not None else record.rain.three_hours
        table.add_row("Rain", f"{rain:g}" if rain is not None else "-")
    table.add_row("Visibility", str(record.visibility))
    observed = record.observed_at
    table.add_row("Observed (UTC)", observed.isoformat() if observed else "-")
    sunrise = record.sys.sunrise_at
    sunset = record.sys.sunset_at
    table.add_row("Sunrise (UTC)", sunrise.isoformat() if sunrise else "-")
    table.add_row("Sunset (UTC)", sunset.isoformat() if sunset else "-")
    console.print(table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a single current-weather lookup."""
    args = parse_args(argv)
    console = Console()

    overrides = {"units": args.units} if args.units is not None else {}
    try:
        settings = load_settings(**overrides)
    except ConfigError as exc:
        logger = setup_logger()
        logger.error("Configuration failure: %s", exc)
        return 2
    logger = setup_logger(level=settings.log_level)
    logger.debug("Loaded settings: %s", sanitize_for_logging(settings.safe_summary()))

    try:
        with OpenWeatherMapProvider(settings=settings, logger=logger) as provider:
            record = _fetch(provider, args)
    except MissingCredentialError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2
    except WeatherClientError as exc:
        logger.error("Weather lookup failure: %s", exc)
        return 4

    if args.json:
        console.print_json(record.model_dump_json(by_alias=True))
    else:
        _print_summary(console, record, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
