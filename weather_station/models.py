from dataclasses import dataclass
from typing import Any, Tuple

from .errors import EmptyConditionsError, FetchError


@dataclass(frozen=True)
class WeatherQuery:
    city: str
    country_code: str


@dataclass(frozen=True)
class Condition:
    description: str


@dataclass(frozen=True)
class WeatherObservation:
    """One decoded current-weather report (metric units)."""

    location_name: str
    conditions: Tuple[Condition, ...]
    temperature_c: float
    humidity_percent: float
    pressure_hpa: float
    wind_speed_ms: float

    @property
    def description(self) -> str:
        """Description of the first (primary) condition."""
        if not self.conditions:
            raise EmptyConditionsError("Weather response contained no conditions.")
        return self.conditions[0].description

    @classmethod
    def from_json(cls, payload: Any) -> "WeatherObservation":
        """
        Build an observation from the OpenWeatherMap ``/weather`` body.

        Expected shape::

            {"weather": [{"description": str, ...}],
             "main": {"temp": num, "humidity": num, "pressure": num},
             "wind": {"speed": num},
             "name": str}

        Raises FetchError when the body does not match, and
        EmptyConditionsError when ``weather`` is an empty list.
        """
        try:
            weather = payload["weather"]
            main = payload["main"]
            if not isinstance(weather, list):
                raise TypeError("'weather' is not a list")
            conditions = tuple(
                Condition(description=_string(entry["description"]))
                for entry in weather
            )
            observation = cls(
                location_name=_string(payload["name"]),
                conditions=conditions,
                temperature_c=_number(main["temp"]),
                humidity_percent=_number(main["humidity"]),
                pressure_hpa=_number(main["pressure"]),
                wind_speed_ms=_number(payload["wind"]["speed"]),
            )
        except KeyError as exc:
            raise FetchError(
                f"Unexpected response from weather API, missing key: {exc}"
            ) from exc
        except (TypeError, ValueError) as exc:
            raise FetchError(f"Unexpected response from weather API: {exc}") from exc

        if not observation.conditions:
            raise EmptyConditionsError("Weather response contained no conditions.")
        return observation


def _string(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected a string, got {type(value).__name__}")
    return value


def _number(value: Any) -> float:
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    return float(value)
