"""NASA POWER weather repository implementation."""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional
import pandas as pd
import requests
from ...domain.entities.weather_series import WeatherSeries
from ...domain.exceptions import ProviderUnavailableError
from ...domain.repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)

DEFAULT_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"
DEFAULT_PARAMETERS = ["T2M", "WS2M", "PRECTOTCORR", "SNODP"]


class NASAPowerWeatherRepository(WeatherRepository):
    """Repository for daily point data from the NASA POWER API or a local file."""

    def __init__(
        self,
        data_file: Optional[str] = None,
        base_url: str = DEFAULT_URL,
        parameters: Optional[List[str]] = None,
        community: str = "RE",
        units: str = "imperial",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV/XLSX with a 'date' column and one column per
                parameter (file mode). When omitted the API is used.
            base_url: NASA POWER daily point endpoint
            parameters: Parameters to request
            community: NASA POWER user community
            units: 'imperial' or 'metric'
            timeout: Request timeout in seconds
            session: Optional requests session
        """
        self.data_file = Path(data_file) if data_file else None
        self.base_url = base_url
        self.parameters = parameters or list(DEFAULT_PARAMETERS)
        self.community = community
        self.units = units
        self.timeout = timeout
        self.session = session or requests.Session()

        if self.data_file and not self.data_file.exists():
            raise FileNotFoundError(f"Weather data file not found: {data_file}")

    def get_weather_series(
        self,
        latitude: float,
        longitude: float,
        start_date: date,
        end_date: date,
    ) -> WeatherSeries:
        """Retrieve weather series from file or API."""
        if self.data_file:
            return self._load_from_file(start_date, end_date)
        return self._fetch_from_api(latitude, longitude, start_date, end_date)

    def _fetch_from_api(
        self, latitude: float, longitude: float, start_date: date, end_date: date
    ) -> WeatherSeries:
        """Fetch daily series from the NASA POWER API."""
        params = {
            "parameters": ",".join(self.parameters),
            "start": start_date.strftime("%Y%m%d"),
            "end": end_date.strftime("%Y%m%d"),
            "latitude": latitude,
            "longitude": longitude,
            "community": self.community,
            "units": self.units,
            "format": "JSON",
        }
        logger.info(
            f"Fetching NASA POWER data for ({latitude}, {longitude}) "
            f"from {params['start']} to {params['end']}"
        )

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"NASA POWER request failed: {e}")
            raise ProviderUnavailableError(f"NASA POWER request failed: {e}") from e

        if not response.ok:
            logger.error(f"NASA POWER answered with status {response.status_code}")
            raise ProviderUnavailableError(
                f"NASA POWER answered with status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderUnavailableError("NASA POWER returned invalid JSON") from e

        return self._parse_response(payload)

    @staticmethod
    def _parse_response(payload: Dict[str, Any]) -> WeatherSeries:
        """Parse a NASA POWER GeoJSON response into a WeatherSeries."""
        properties = payload.get("properties") or {}
        parameter = properties.get("parameter")
        if not isinstance(parameter, dict):
            messages = payload.get("messages") or properties.get("messages") or []
            raise ProviderUnavailableError(
                "NASA POWER response has no parameter data"
                + (f": {'; '.join(map(str, messages))}" if messages else "")
            )

        units = {
            name: info.get("units", "")
            for name, info in (properties.get("parameters") or {}).items()
            if isinstance(info, dict)
        }
        series = WeatherSeries.from_parameters(parameter, units)
        logger.info(f"Parsed {len(series)} days of NASA POWER data")
        return series

    def _load_from_file(self, start_date: date, end_date: date) -> WeatherSeries:
        """Load daily series from a local file."""
        logger.info(
            f"Loading weather data from {self.data_file} from {start_date} to {end_date}"
        )

        try:
            if self.data_file.suffix == ".xlsx":
                df = pd.read_excel(self.data_file, engine="openpyxl", dtype={"date": str})
            else:
                df = pd.read_csv(self.data_file, dtype={"date": str})
        except Exception as e:
            logger.error(f"Error loading weather data: {e}")
            raise

        # Accepts YYYYMMDD, YYYY-MM-DD and Excel datetime cells
        dates = pd.to_datetime(df["date"].str.strip(), format="mixed", errors="coerce")
        unparsed = int(dates.isna().sum())
        if unparsed:
            logger.warning(f"Skipping {unparsed} rows with unreadable dates")
        df = df[dates.notna()].assign(date=dates.dropna().dt.strftime("%Y%m%d"))

        in_range = (df["date"] >= start_date.strftime("%Y%m%d")) & (
            df["date"] <= end_date.strftime("%Y%m%d")
        )
        df = df[in_range]

        parameter = {
            name: dict(zip(df["date"], df[name]))
            for name in self.parameters
            if name in df.columns
        }
        series = WeatherSeries.from_parameters(parameter)
        logger.info(f"Loaded {len(series)} daily records")
        return series
