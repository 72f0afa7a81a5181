import logging

import requests

from ..config import DEFAULT_BASE_URL
from ..errors import FetchError
from ..models import WeatherObservation

logger = logging.getLogger(__name__)


class OpenWeatherService:
    """Wraps the OpenWeatherMap current-weather API."""

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")

    # ------------------------------------------------------------------
    # 1️⃣ Build the request target
    # ------------------------------------------------------------------
    def build_url(self, city: str, country_code: str) -> str:
        return (
            f"{self.base_url}/weather?q={city},{country_code}"
            f"&units=metric&appid={self.api_key}"
        )

    # ------------------------------------------------------------------
    # 2️⃣ Pull and decode the payload
    # ------------------------------------------------------------------
    @staticmethod
    def _error_detail(resp: requests.Response) -> str:
        """The API's own ``message`` field, if the error body carries one."""
        try:
            body = resp.json()
        except ValueError:
            return ""
        if isinstance(body, dict) and body.get("message"):
            return f" ({body['message']})"
        return ""

    def _fetch_json(self, url: str):
        try:
            resp = requests.get(url)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            detail = self._error_detail(exc.response) if exc.response is not None else ""
            raise FetchError(f"HTTP status {status} from weather API{detail}") from exc
        except requests.RequestException as exc:
            raise FetchError(f"Request to weather API failed: {exc}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise FetchError("Invalid JSON response from weather API") from exc

    # ------------------------------------------------------------------
    # Public façade
    # ------------------------------------------------------------------
    def get_current_weather(self, city: str, country_code: str) -> WeatherObservation:
        """
        Returns the current observation for ``city,country_code``.

        Network failures, non-2xx statuses and bodies that do not match the
        expected schema all surface as FetchError.
        """
        logger.info("Fetching current weather for %s,%s", city, country_code)
        payload = self._fetch_json(self.build_url(city, country_code))
        observation = WeatherObservation.from_json(payload)
        logger.info("Received observation for %s", observation.location_name)
        return observation
