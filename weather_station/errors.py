class WeatherStationError(Exception):
    """Base class for every error raised by weather_station."""


class ConfigError(WeatherStationError):
    """A required setting (the API key) is missing."""


class FetchError(WeatherStationError):
    """The weather API could not be reached or returned unusable data."""


class EmptyConditionsError(FetchError):
    """The API answered with an empty ``weather`` list."""
