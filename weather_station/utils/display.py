from ..config import Colours
from ..models import WeatherObservation

BRIGHT_YELLOW_DESCRIPTIONS = frozenset({"clear sky"})
BRIGHT_BLUE_DESCRIPTIONS = frozenset({"few clouds", "scattered clouds", "broken clouds"})
DIM_DESCRIPTIONS = frozenset({
    "overcast clouds", "mist", "haze", "smoke", "sand", "dust", "fog", "squalls",
})
BRIGHT_CYAN_DESCRIPTIONS = frozenset({"shower rain", "rain", "thunderstorm", "snow"})


def temperature_emoji(temperature: float) -> str:
    """Emoji for a Celsius temperature; each band includes its lower bound."""
    if temperature < 0.0:
        return "🥶"
    elif temperature < 15.0:
        return "☁️"
    elif temperature < 25.0:
        return "⛅️"
    elif temperature < 35.0:
        return "🌤️"
    else:
        return "🔥"


def description_colour(description: str) -> str:
    """ANSI colour for an exact condition description, '' when unknown."""
    if description in BRIGHT_YELLOW_DESCRIPTIONS:
        return Colours.YELLOW
    elif description in BRIGHT_BLUE_DESCRIPTIONS:
        return Colours.BLUE
    elif description in DIM_DESCRIPTIONS:
        return Colours.DIM
    elif description in BRIGHT_CYAN_DESCRIPTIONS:
        return Colours.CYAN
    else:
        return ""


def colourize(text: str, colour: str) -> str:
    """Wrap text with an ANSI colour; an empty colour leaves it untouched."""
    if not colour:
        return text
    return f"{colour}{text}{Colours.RESET}"


def format_weather(observation: WeatherObservation) -> str:
    description = observation.description
    return (
        f"Weather in {observation.location_name}: {description} "
        f"{temperature_emoji(observation.temperature_c)}\n"
        f"        > Temperature: {observation.temperature_c:.1f}°C,\n"
        f"        > Humidity: {observation.humidity_percent:.1f}%,\n"
        f"        > Pressure: {observation.pressure_hpa:.1f} hPa,\n"
        f"        > Wind Speed: {observation.wind_speed_ms:.1f} m/s"
    )


def render_weather(observation: WeatherObservation) -> str:
    """The summary text, coloured by the primary condition."""
    return colourize(format_weather(observation), description_colour(observation.description))
