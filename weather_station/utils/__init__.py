"""
utils package – terminal rendering for a weather observation.

Temperature emoji, condition colour and the coloured summary text, so the
session loop can do:

    from weather_station.utils import render_weather
"""

from .display import (  # noqa: F401
    colourize,
    description_colour,
    format_weather,
    render_weather,
    temperature_emoji,
)

__all__ = [
    "colourize",
    "description_colour",
    "format_weather",
    "render_weather",
    "temperature_emoji",
]
