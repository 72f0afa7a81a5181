"""
services package – wrappers around external APIs.

    from weather_station.services import OpenWeatherService
"""

from .openweather import OpenWeatherService  # noqa: F401

__all__ = [
    "OpenWeatherService",
]
