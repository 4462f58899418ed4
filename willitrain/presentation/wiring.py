"""Construction of the outlook service from settings."""

import logging

from ..application.services.outlook_service import OutlookService
from ..infrastructure.repositories.json_saved_query_repository import JsonSavedQueryRepository
from ..infrastructure.repositories.nasa_power_weather_repository import NASAPowerWeatherRepository
from ..infrastructure.repositories.open_meteo_current_conditions_repository import (
    OpenMeteoCurrentConditionsRepository,
)
from config.settings import (
    ACTIVITY_CATALOG,
    CONDITION_DEFINITIONS,
    EXPORT_DIR,
    LOG_LEVEL,
    NASA_POWER_SETTINGS,
    OPEN_METEO_SETTINGS,
    SAVED_QUERIES_FILE,
    WEATHER_DATA_FILE,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> None:
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO), format=LOG_FORMAT)


def build_service() -> OutlookService:
    """Wire repositories and the outlook service from config.settings."""
    weather_repo = NASAPowerWeatherRepository(
        data_file=WEATHER_DATA_FILE or None,
        base_url=NASA_POWER_SETTINGS["base_url"],
        parameters=NASA_POWER_SETTINGS["parameters"],
        community=NASA_POWER_SETTINGS["community"],
        units=NASA_POWER_SETTINGS["units"],
        timeout=NASA_POWER_SETTINGS["timeout"],
    )
    current_conditions_repo = OpenMeteoCurrentConditionsRepository(
        base_url=OPEN_METEO_SETTINGS["base_url"],
        current=OPEN_METEO_SETTINGS["current"],
        temperature_unit=OPEN_METEO_SETTINGS["temperature_unit"],
        timeout=OPEN_METEO_SETTINGS["timeout"],
    )
    saved_query_repo = JsonSavedQueryRepository(str(SAVED_QUERIES_FILE))

    return OutlookService(
        weather_repo=weather_repo,
        activity_catalog=ACTIVITY_CATALOG,
        condition_definitions=CONDITION_DEFINITIONS,
        current_conditions_repo=current_conditions_repo,
        saved_query_repo=saved_query_repo,
        history_start=NASA_POWER_SETTINGS["history_start"],
        history_end=NASA_POWER_SETTINGS["history_end"],
        fill_value=NASA_POWER_SETTINGS["fill_value"],
        export_dir=EXPORT_DIR,
    )
