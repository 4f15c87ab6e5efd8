"""CLI tests for single-lookup argument handling and exit codes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx
import pytest

from owm_client import weather_cli
from owm_client.config import Settings
from owm_client.weather.openweathermap import OpenWeatherMapProvider

PAYLOAD: dict[str, Any] = {
    "coord": {"lon": -0.13, "lat": 51.51},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    "main": {"temp": 7.5, "feels_like": 4.2, "pressure": 1009, "humidity": 87,
             "temp_min": 6.0, "temp_max": 9.0},
    "wind": {"speed": 5.1, "deg": 240},
    "clouds": {"all": 75},
    "rain": {"1h": 0.4},
    "visibility": 9000,
    "dt": 1700000000,
    "sys": {"type": 2, "id": 2075535, "message": 0.0, "country": "GB",
            "sunrise": 1699946000, "sunset": 1699978000},
    "id": 2643743,
    "name": "London",
    "cod": 200,
}


@pytest.fixture
def logger_levels() -> list[object]:
    return []


@pytest.fixture
def requests_seen(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, logger_levels: list[object]
) -> list[httpx.Request]:
    monkeypatch.chdir(tmp_path)
    for name in ("OWM_API_KEY", "OWM_UNITS", "OWM_BASE_URL", "OWM_TIMEOUT_SECONDS", "OWM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    def _setup_logger(level: object = logging.INFO) -> logging.Logger:
        logger_levels.append(level)
        logger = logging.getLogger("test_weather_cli")
        logger.setLevel(level)  # type: ignore[arg-type]
        return logger

    monkeypatch.setattr(weather_cli, "setup_logger", _setup_logger)

    seen: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.params.get("q") == "Atlantis":
            return httpx.Response(404, json={"cod": "404", "message": "city not found"})
        return httpx.Response(200, json=PAYLOAD)

    def _provider(settings: Settings, logger: logging.Logger) -> OpenWeatherMapProvider:
        client = httpx.Client(transport=httpx.MockTransport(_handler))
        return OpenWeatherMapProvider(settings=settings, logger=logger, client=client)

    monkeypatch.setattr(weather_cli, "OpenWeatherMapProvider", _provider)
    return seen


def test_city_lookup_prints_summary(
    requests_seen: list[httpx.Request],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("OWM_API_KEY", "cli-key")

    exit_code = weather_cli.main(["--city", "London"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "London, GB" in out
    assert "Current Weather" in out
    assert "light rain" in out
    assert requests_seen[0].url.params["q"] == "London"
    assert "units" not in requests_seen[0].url.params


def test_units_flag_overrides_environment(
    requests_seen: list[httpx.Request], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("OWM_API_KEY", "cli-key")
    monkeypatch.setenv("OWM_UNITS", "imperial")

    assert weather_cli.main(["--coords", "51.51", "-0.13", "--units", "metric"]) == 0
    params = requests_seen[0].url.params
    assert params["lat"] == "51.510000"
    assert params["lon"] == "-0.130000"
    assert params["units"] == "metric"


@pytest.mark.parametrize(
    ("argv", "param", "expected"),
    [
        (["--zip", "94040,us"], "zip", "94040,us"),
        (["--id", "2643743"], "id", "2643743"),
    ],
)
def test_zip_and_id_lookups(
    requests_seen: list[httpx.Request],
    monkeypatch: pytest.MonkeyPatch,
    argv: list[str],
    param: str,
    expected: str,
) -> None:
    monkeypatch.setenv("OWM_API_KEY", "cli-key")
    assert weather_cli.main(argv) == 0
    assert requests_seen[0].url.params[param] == expected


def test_json_output(
    requests_seen: list[httpx.Request],
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("OWM_API_KEY", "cli-key")

    assert weather_cli.main(["--id", "2643743", "--json"]) == 0
    out = capsys.readouterr().out
    assert '"name": "London"' in out
    assert '"1h": 0.4' in out


def test_missing_key_exits_with_config_code_and_no_request(
    requests_seen: list[httpx.Request],
) -> None:
    assert weather_cli.main(["--city", "London"]) == 2
    assert requests_seen == []


def test_invalid_settings_exit_with_config_code(
    requests_seen: list[httpx.Request], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("OWM_API_KEY", "cli-key")
    monkeypatch.setenv("OWM_TIMEOUT_SECONDS", "-1")
    assert weather_cli.main(["--city", "London"]) == 2
    assert requests_seen == []


def test_lookup_failure_exits_with_failure_code(
    requests_seen: list[httpx.Request], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("OWM_API_KEY", "cli-key")
    assert weather_cli.main(["--city", "Atlantis"]) == 4
    assert len(requests_seen) == 1


def test_location_arguments_are_mutually_exclusive() -> None:
    with pytest.raises(SystemExit):
        weather_cli.parse_args(["--city", "London", "--id", "1"])
    with pytest.raises(SystemExit):
        weather_cli.parse_args([])


def test_logger_configured_with_settings_level(
    requests_seen: list[httpx.Request],
    monkeypatch: pytest.MonkeyPatch,
    logger_levels: list[object],
) -> None:
    monkeypatch.setenv("OWM_API_KEY", "cli-key")
    monkeypatch.setenv("OWM_LOG_LEVEL", "debug")

    assert weather_cli.main(["--city", "London"]) == 0
    assert logger_levels == ["DEBUG"]
