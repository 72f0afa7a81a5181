"""
weather_station package – a tiny interactive CLI that prints the current
weather for a city using the OpenWeatherMap API.

Public entry points
-------------------
* `weather_station.main` – the command-line driver (`python -m weather_station`)
* `WeatherSession` – the prompt → fetch → render loop
* `OpenWeatherService` – the HTTP client
* Rendering helpers: `render_weather`, `temperature_emoji`, `description_colour`
* Colour constants via `weather_station.Colours`

    >>> from weather_station import OpenWeatherService, render_weather
"""

__all__ = [
    "VERSION",
    "Colours",
    "Settings",
    "load_settings",
    # Errors
    "WeatherStationError",
    "ConfigError",
    "FetchError",
    "EmptyConditionsError",
    # Models
    "WeatherQuery",
    "Condition",
    "WeatherObservation",
    # Services
    "OpenWeatherService",
    "WeatherSession",
    # Utilities
    "render_weather",
    "format_weather",
    "temperature_emoji",
    "description_colour",
]

VERSION = "0.1.0"

from .config import Colours, Settings, load_settings  # noqa: F401,E402
from .errors import (  # noqa: F401,E402
    WeatherStationError,
    ConfigError,
    FetchError,
    EmptyConditionsError,
)
from .models import WeatherQuery, Condition, WeatherObservation  # noqa: F401,E402
from .services import OpenWeatherService  # noqa: F401,E402
from .main import WeatherSession  # noqa: F401,E402
from .utils import (  # noqa: F401,E402
    render_weather,
    format_weather,
    temperature_emoji,
    description_colour,
)
