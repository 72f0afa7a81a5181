"""Pytest fixtures for weather_station tests."""

from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests


def make_payload(
    description: str = "clear sky",
    temp: float = 18.2,
    humidity: float = 60,
    pressure: float = 1012,
    speed: float = 3.4,
    name: str = "London",
) -> Dict[str, Any]:
    """A minimal OpenWeatherMap /weather body."""
    return {
        "weather": [{"id": 800, "main": "Clear", "description": description}],
        "main": {"temp": temp, "humidity": humidity, "pressure": pressure},
        "wind": {"speed": speed},
        "name": name,
    }


def make_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Optional[Exception] = None,
) -> MagicMock:
    """A requests.Response stand-in with the given status and body."""
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(
            f"{status} Client Error", response=resp
        )
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def london_payload() -> Dict[str, Any]:
    return make_payload()


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    """Keep a developer's local .env out of the tests."""
    monkeypatch.setattr("weather_station.config.load_dotenv", lambda *a, **kw: False)
