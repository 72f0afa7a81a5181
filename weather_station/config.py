import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

API_KEY_VAR = "OPENWEATHER_API_KEY"
BASE_URL_VAR = "OPENWEATHER_BASE_URL"
LOG_LEVEL_VAR = "WEATHER_STATION_LOG_LEVEL"

DEFAULT_BASE_URL = "http://api.openweathermap.org/data/2.5"
DEFAULT_LOG_LEVEL = "WARNING"


class Colours:
    """ANSI escape sequences used by the terminal output."""

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    DIM = "\033[2m"
    RESET = "\033[0m"


@dataclass(frozen=True)
class Settings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Resolve the runtime settings once at startup.

    A local ``.env`` file (or ``env_file`` when given) pre-populates the
    environment; a missing file is not an error and variables that are
    already set win over the file.
    """
    load_dotenv(env_file)

    api_key = os.getenv(API_KEY_VAR)
    if not api_key:
        raise ConfigError(f"{API_KEY_VAR} must be set")

    base_url = (os.getenv(BASE_URL_VAR) or DEFAULT_BASE_URL).rstrip("/")
    log_level = (os.getenv(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning("%s has an unknown level %r, using %s",
                       LOG_LEVEL_VAR, log_level, DEFAULT_LOG_LEVEL)
        log_level = DEFAULT_LOG_LEVEL
    return Settings(api_key=api_key, base_url=base_url, log_level=log_level)
