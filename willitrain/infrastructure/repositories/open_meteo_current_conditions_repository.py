"""Open-Meteo current conditions repository implementation."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
import requests
from ...domain.entities.current_conditions import CurrentConditions
from ...domain.exceptions import ProviderUnavailableError
from ...domain.repositories.current_conditions_repository import CurrentConditionsRepository

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_CURRENT = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "wind_speed_10m",
    "weather_code",
]


def condition_from_code(code: Optional[int]) -> str:
    """Interpret a WMO weather code."""
    if code is None:
        return "unknown"
    if code == 0:
        return "clear"
    if 1 <= code <= 3:
        return "partly-cloudy"
    if 45 <= code <= 48:
        return "foggy"
    if 51 <= code <= 67 or 80 <= code <= 82:
        return "rain"
    if 71 <= code <= 77 or 85 <= code <= 86:
        return "snow"
    if 95 <= code <= 99:
        return "thunderstorm"
    return "cloudy"


class OpenMeteoCurrentConditionsRepository(CurrentConditionsRepository):
    """Repository for live weather from the Open-Meteo forecast API."""

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        current: Optional[List[str]] = None,
        temperature_unit: str = "fahrenheit",
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.current = current or list(DEFAULT_CURRENT)
        self.temperature_unit = temperature_unit
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_current_conditions(self, latitude: float, longitude: float) -> CurrentConditions:
        """Fetch the current weather at a point."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(self.current),
            "timezone": "auto",
            "forecast_days": 1,
            "temperature_unit": self.temperature_unit,
        }

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"Open-Meteo answered with status {status}")
            raise ProviderUnavailableError(
                f"Open-Meteo answered with status {status}", status_code=status
            ) from e
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Open-Meteo request failed: {e}")
            raise ProviderUnavailableError(f"Open-Meteo request failed: {e}") from e

        return self._parse_response(data)

    @staticmethod
    def _parse_response(data: Dict[str, Any]) -> CurrentConditions:
        """Parse an Open-Meteo response into CurrentConditions."""
        current = data.get("current")
        if not isinstance(current, dict):
            raise ProviderUnavailableError("Open-Meteo response has no current data")

        code = current.get("weather_code")
        code = int(code) if code is not None else None
        return CurrentConditions(
            temperature=current.get("temperature_2m"),
            condition=condition_from_code(code),
            wind_speed=current.get("wind_speed_10m"),
            precipitation=current.get("precipitation"),
            humidity=current.get("relative_humidity_2m"),
            weather_code=code,
            timestamp=current.get("time", datetime.now().isoformat()),
        )
