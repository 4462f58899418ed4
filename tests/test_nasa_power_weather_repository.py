"""Tests for NASAPowerWeatherRepository."""

from datetime import date

import pandas as pd
import pytest
import requests
from willitrain.domain.exceptions import ProviderUnavailableError
from willitrain.infrastructure.repositories.nasa_power_weather_repository import (
    NASAPowerWeatherRepository,
)

PAYLOAD = {
    "properties": {
        "parameter": {
            "T2M": {"20240704": 77.5, "20240705": -999.0},
            "PRECTOTCORR": {"20240704": 0.12, "20240705": 0.0},
            "WS2M": {"20240704": 6.1, "20240705": 5.0},
            "SNODP": {"20240704": 0.0, "20240705": 0.0},
        }
    },
    "parameters": {"T2M": {"units": "F"}},
}


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.error is not None:
            raise self.error
        return self.response


def test_fetch_from_api_builds_request():
    session = FakeSession(FakeResponse(PAYLOAD))
    repo = NASAPowerWeatherRepository(base_url="http://power.test/daily", session=session)

    series = repo.get_weather_series(40.7, -74.0, date(2020, 1, 1), date(2025, 1, 1))

    url, params, timeout = session.calls[0]
    assert url == "http://power.test/daily"
    assert params["parameters"] == "T2M,WS2M,PRECTOTCORR,SNODP"
    assert params["start"] == "20200101"
    assert params["end"] == "20250101"
    assert params["latitude"] == 40.7
    assert params["longitude"] == -74.0
    assert params["community"] == "RE"
    assert params["units"] == "imperial"
    assert params["format"] == "JSON"
    assert timeout == 30.0

    assert series.temperature == {"20240704": 77.5, "20240705": -999.0}
    assert series.precipitation["20240704"] == 0.12
    assert series.wind_speed["20240704"] == 6.1
    assert len(series) == 2


def test_units_read_from_parameter_metadata():
    payload = {
        "properties": {
            "parameter": PAYLOAD["properties"]["parameter"],
            "parameters": {"T2M": {"units": "F"}, "WS2M": {"units": "mph"}},
        }
    }
    repo = NASAPowerWeatherRepository(session=FakeSession(FakeResponse(payload)))

    series = repo.get_weather_series(0, 0, date(2024, 1, 1), date(2024, 12, 31))

    assert series.units == {"T2M": "F", "WS2M": "mph"}


def test_connection_error_raises_provider_unavailable():
    session = FakeSession(error=requests.ConnectionError("refused"))
    repo = NASAPowerWeatherRepository(session=session)

    with pytest.raises(ProviderUnavailableError):
        repo.get_weather_series(0, 0, date(2024, 1, 1), date(2024, 12, 31))


def test_error_status_raises_provider_unavailable():
    repo = NASAPowerWeatherRepository(session=FakeSession(FakeResponse({}, status_code=503)))

    with pytest.raises(ProviderUnavailableError) as excinfo:
        repo.get_weather_series(0, 0, date(2024, 1, 1), date(2024, 12, 31))

    assert excinfo.value.status_code == 503


def test_invalid_json_raises_provider_unavailable():
    repo = NASAPowerWeatherRepository(session=FakeSession(FakeResponse(None)))

    with pytest.raises(ProviderUnavailableError):
        repo.get_weather_series(0, 0, date(2024, 1, 1), date(2024, 12, 31))


def test_response_without_parameter_data_raises():
    payload = {"messages": ["Latitude out of range"], "properties": {}}
    repo = NASAPowerWeatherRepository(session=FakeSession(FakeResponse(payload)))

    with pytest.raises(ProviderUnavailableError, match="Latitude out of range"):
        repo.get_weather_series(99, 0, date(2024, 1, 1), date(2024, 12, 31))


def test_load_from_csv_file(tmp_path):
    data_file = tmp_path / "power.csv"
    data_file.write_text(
        "date,T2M,PRECTOTCORR,WS2M,SNODP\n"
        "2019-07-04,70.0,0.1,5.0,0.0\n"
        "2020-07-04,72.0,0.2,6.0,0.0\n"
        "20210704,74.0,0.3,7.0,0.0\n"
    )
    repo = NASAPowerWeatherRepository(data_file=str(data_file))

    series = repo.get_weather_series(0, 0, date(2020, 1, 1), date(2025, 1, 1))

    assert series.temperature == {"20200704": 72.0, "20210704": 74.0}
    assert series.snow_depth == {"20200704": 0.0, "20210704": 0.0}


def test_load_from_xlsx_with_excel_dates(tmp_path):
    data_file = tmp_path / "power.xlsx"
    pd.DataFrame(
        {
            "date": pd.to_datetime(["2019-07-04", "2020-07-04", "2021-07-04"]),
            "T2M": [70.0, 72.0, 74.0],
            "PRECTOTCORR": [0.1, 0.2, 0.3],
            "WS2M": [5.0, 6.0, 7.0],
            "SNODP": [0.0, 0.0, 0.0],
        }
    ).to_excel(data_file, index=False, engine="openpyxl")
    repo = NASAPowerWeatherRepository(data_file=str(data_file))

    series = repo.get_weather_series(0, 0, date(2020, 1, 1), date(2025, 1, 1))

    assert series.temperature == {"20200704": 72.0, "20210704": 74.0}
    assert sorted(series.wind_speed) == ["20200704", "20210704"]


def test_file_rows_with_unreadable_dates_are_skipped(tmp_path):
    data_file = tmp_path / "power.csv"
    data_file.write_text(
        "date,T2M,PRECTOTCORR,WS2M,SNODP\n"
        "not-a-date,1.0,0.1,5.0,0.0\n"
        "2020-07-04,72.0,0.2,6.0,0.0\n"
    )
    repo = NASAPowerWeatherRepository(data_file=str(data_file))

    series = repo.get_weather_series(0, 0, date(2020, 1, 1), date(2025, 1, 1))

    assert series.temperature == {"20200704": 72.0}


def test_missing_data_file_raises():
    with pytest.raises(FileNotFoundError):
        NASAPowerWeatherRepository(data_file="/nonexistent/power.csv")
