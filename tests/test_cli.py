import json
import urllib.error
from unittest.mock import patch

import pytest

from aurawx.cli import main
from aurawx.presentation import Presenter, choose_icon
from aurawx.weather import SettingsStore

SAMPLE = {
    "current": {"temperature_2m": 21.5, "apparent_temperature": 19.0, "weather_code": 0, "is_day": 1},
    "daily": {
        "time": ["2024-01-14", "2024-01-15"],
        "temperature_2m_max": [12.0, 14.0],
        "temperature_2m_min": [3.0, 4.0],
        "weather_code": [3, 61],
    },
    "hourly": {
        "time": ["2024-01-14T00:00", "2024-01-14T01:00"],
        "temperature_2m": [5.0, 6.0],
        "weather_code": [3, 3],
        "precipitation_probability": [10, 20],
    },
}


class _FakeResponse:
    def __init__(self, body, status=200):
        self.body = body
        self.status = status

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def read(self):
        return self.body


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"


def test_set_location_then_show(settings_path, capsys):
    assert main(["--settings", str(settings_path), "set-location", "10.5", "20.25", "Spring", "Field"]) == 0
    assert main(["--settings", str(settings_path), "show"]) == 0
    out = capsys.readouterr().out
    assert "Location: Spring Field" in out
    assert "Latitude: 10.5" in out


def test_configure_persists(settings_path):
    assert main(["--settings", str(settings_path), "configure", "--units", "f", "--clock", "24", "--language", "de"]) == 0
    settings = SettingsStore(settings_path).load()
    assert settings.use_fahrenheit is True
    assert settings.use_24_hour is True
    assert settings.language.name == "DE"


def test_forecast_without_location_fails(settings_path, capsys):
    assert main(["--settings", str(settings_path), "forecast"]) == 1
    assert "set-location" in capsys.readouterr().err


def test_forecast_prints_weather(settings_path, capsys):
    main(["--settings", str(settings_path), "set-location", "10.5", "20.25", "Springfield"])
    capsys.readouterr()
    body = json.dumps(SAMPLE).encode()
    with patch("urllib.request.urlopen", return_value=_FakeResponse(body)) as opened:
        assert main(["--settings", str(settings_path), "forecast"]) == 0
    request = opened.call_args[0][0]
    assert "latitude=10.5" in request.full_url
    out = capsys.readouterr().out
    presenter = Presenter()
    assert "Springfield" in out
    assert presenter.format_temperature(21.5) in out
    assert presenter.feels_like_text(19.0) in out
    assert choose_icon(0, True) in out
    assert "Today" in out
    assert "Mon" in out


def test_forecast_network_failure(settings_path, capsys):
    main(["--settings", str(settings_path), "set-location", "1", "2", "Here"])
    with patch("urllib.request.urlopen", side_effect=urllib.error.URLError("offline")):
        assert main(["--settings", str(settings_path), "forecast"]) == 1
    assert "error:" in capsys.readouterr().err


def test_search_prints_places(settings_path, capsys):
    results = {"results": [{"name": "London", "country": "United Kingdom", "latitude": 51.5, "longitude": -0.12}]}
    body = json.dumps(results).encode()
    with patch("urllib.request.urlopen", return_value=_FakeResponse(body)):
        assert main(["--settings", str(settings_path), "search", "London"]) == 0
    out = capsys.readouterr().out
    assert "London, United Kingdom (51.5, -0.12)" in out


def test_http_error_status_fails(settings_path):
    main(["--settings", str(settings_path), "set-location", "1", "2", "Here"])
    with patch("urllib.request.urlopen", return_value=_FakeResponse(b"{}", status=204)):
        assert main(["--settings", str(settings_path), "forecast"]) == 1