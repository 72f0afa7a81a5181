import logging
import sys
from typing import Callable, Optional

from .config import Colours, load_settings
from .errors import ConfigError, FetchError
from .models import WeatherQuery
from .services.openweather import OpenWeatherService
from .utils.display import colourize, render_weather

logger = logging.getLogger(__name__)

WELCOME = "Welcome to Weather Station!"
CITY_PROMPT = "Please enter city name: "
COUNTRY_PROMPT = "Please enter country code: "
CONTINUE_PROMPT = "Do you want to search for weather in another city? (y/n):"
FAREWELL = "Thank you for using our software!"


class WeatherSession:
    """Interactive prompt → fetch → render loop."""

    def __init__(self, service: OpenWeatherService,
                 read_line: Optional[Callable[[], str]] = None):
        self.service = service
        self.read_line = read_line if read_line is not None else input

    def _ask(self, prompt: str) -> str:
        print(colourize(prompt, Colours.GREEN))
        return self.read_line().strip()

    def _read_query(self) -> WeatherQuery:
        city = self._ask(CITY_PROMPT)
        country_code = self._ask(COUNTRY_PROMPT)
        return WeatherQuery(city=city, country_code=country_code)

    def show_weather(self, query: WeatherQuery) -> bool:
        """Fetch and print one report; returns False if the fetch failed."""
        try:
            observation = self.service.get_current_weather(query.city, query.country_code)
        except FetchError as exc:
            logger.info("Weather lookup for %s,%s failed: %s",
                        query.city, query.country_code, exc)
            print(f"Error: {exc}", file=sys.stderr)
            return False
        print(render_weather(observation))
        return True

    def run_once(self) -> bool:
        """One loop iteration; returns True when the user wants another."""
        self.show_weather(self._read_query())
        answer = self._ask(CONTINUE_PROMPT).lower()
        return answer == "y"

    def start(self) -> None:
        print(colourize(WELCOME, Colours.YELLOW))
        while self.run_once():
            pass
        print(FAREWELL)


def main() -> None:
    try:
        settings = load_settings()
    except ConfigError as exc:
        sys.exit(f"Configuration error: {exc}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    service = OpenWeatherService(settings.api_key, settings.base_url)
    session = WeatherSession(service)
    try:
        session.start()
    except EOFError:
        sys.exit("Failed to read input: stream closed.")
    except UnicodeDecodeError:
        sys.exit("Failed to read input: not valid text.")
    except KeyboardInterrupt:
        sys.exit("\nInterrupted.")


if __name__ == "__main__":
    main()
