from __future__ import annotations

import json

import pytest

from waybar_openweathermap.cli import main, parse_coordinates
from waybar_openweathermap.entities import Coordinates
from waybar_openweathermap.exceptions import ArgumentParseError


OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


@pytest.fixture(autouse=True)
def utc_clock(monkeypatch):
    monkeypatch.setenv("WAYBAR_OWM_TIMEZONE", "UTC")


def test_main_prints_waybar_json(requests_mock, owm_response, capsys):
    requests_mock.get(OPENWEATHER_URL, json=owm_response)

    exit_code = main(["13.41", "52.52", "test-key"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert not out.endswith("\n")
    assert json.loads(out) == {
        "text": "🌦️ 21.3 °C",
        "tooltip": (
            "Light Rain\n"
            "Feels like 20 °C\n"
            "Pressure 1013 hPa\n"
            "Humidity 55%\n"
            "Sunrise 07:00 UTC\n"
            "Sunset 16:30 UTC\n"
            "Wind speed 3 m/sec"
        ),
        "class": "weather",
    }


def test_main_sends_first_argument_as_longitude(requests_mock, owm_response):
    requests_mock.get(OPENWEATHER_URL, json=owm_response)

    assert main(["-0.1276", "51.5072", "test-key"]) == 0

    query = requests_mock.last_request.qs
    assert query["lon"] == ["-0.1276"]
    assert query["lat"] == ["51.5072"]


def test_main_reads_config_file(requests_mock, owm_response, tmp_path, capsys):
    config = tmp_path / "owm.yaml"
    config.write_text("base_url: https://owm.test/weather\nclass: weather-custom\n", encoding="utf-8")
    requests_mock.get("https://owm.test/weather", json=owm_response)

    assert main(["--config", str(config), "13.41", "52.52", "test-key"]) == 0

    assert json.loads(capsys.readouterr().out)["class"] == "weather-custom"


@pytest.mark.parametrize("argv", [["east", "52.52", "k"], ["13.41", "north", "k"]])
def test_main_rejects_bad_coordinates_before_request(requests_mock, capsys, caplog, argv):
    assert main(argv) == 1

    assert requests_mock.call_count == 0
    assert capsys.readouterr().out == ""
    assert "ArgumentParseError" in caplog.text


def test_main_empty_api_key(requests_mock, capsys, caplog):
    assert main(["13.41", "52.52", ""]) == 1

    assert requests_mock.call_count == 0
    assert capsys.readouterr().out == ""
    assert "ProviderInitError" in caplog.text


def test_main_provider_failure(requests_mock, capsys, caplog):
    requests_mock.get(OPENWEATHER_URL, status_code=401, json={"cod": 401, "message": "Invalid API key."})

    assert main(["13.41", "52.52", "bad-key"]) == 1

    assert capsys.readouterr().out == ""
    assert "Invalid API key" in caplog.text


def test_main_empty_condition_list(requests_mock, owm_response, capsys, caplog):
    owm_response["weather"] = []
    requests_mock.get(OPENWEATHER_URL, json=owm_response)

    assert main(["13.41", "52.52", "test-key"]) == 1

    assert capsys.readouterr().out == ""
    assert "EmptyConditionListError" in caplog.text


def test_main_requires_three_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["13.41", "52.52"])

    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""


def test_parse_coordinates():
    assert parse_coordinates("13.41", "52.52") == Coordinates(latitude=52.52, longitude=13.41)

    with pytest.raises(ArgumentParseError, match="longitude"):
        parse_coordinates("x", "52.52")


def test_main_out_of_range_sunrise(requests_mock, owm_response, capsys, caplog):
    owm_response["sys"]["sunrise"] = 10**20
    requests_mock.get(OPENWEATHER_URL, json=owm_response)

    assert main(["13.41", "52.52", "test-key"]) == 1

    assert capsys.readouterr().out == ""
    assert "ProviderQueryError" in caplog.text


def test_main_malformed_main_section(requests_mock, owm_response, capsys, caplog):
    owm_response["main"] = "n/a"
    requests_mock.get(OPENWEATHER_URL, json=owm_response)

    assert main(["13.41", "52.52", "test-key"]) == 1

    assert capsys.readouterr().out == ""
    assert "ProviderQueryError" in caplog.text


def test_main_unquoted_language_in_config(requests_mock, tmp_path, capsys, caplog):
    config = tmp_path / "owm.yaml"
    config.write_text("lang: no\n", encoding="utf-8")

    assert main(["--config", str(config), "13.41", "52.52", "test-key"]) == 1

    assert requests_mock.call_count == 0
    assert capsys.readouterr().out == ""
    assert "ConfigError" in caplog.text


def test_parse_coordinates_reports_longitude_first():
    with pytest.raises(ArgumentParseError, match="longitude"):
        parse_coordinates("east", "north")
