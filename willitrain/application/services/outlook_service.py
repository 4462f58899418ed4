"""Service orchestrating the historical outlook workflow."""

import logging
import uuid
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ...domain.entities.activity import Activity
from ...domain.entities.current_conditions import CurrentConditions
from ...domain.entities.location import Location
from ...domain.entities.outlook import DayOutlook
from ...domain.entities.saved_query import SavedQuery
from ...domain.entities.weather_series import WeatherSeries
from ...domain.repositories.current_conditions_repository import CurrentConditionsRepository
from ...domain.repositories.saved_query_repository import SavedQueryRepository
from ...domain.repositories.weather_repository import WeatherRepository
from ...domain.statistics import round_half_up

# Use cases
from ...domain.use_cases.collect_weather_data import CollectWeatherDataUseCase
from ...domain.use_cases.extract_calendar_day_sample import ExtractCalendarDaySampleUseCase
from ...domain.use_cases.classify_conditions import ClassifyConditionsUseCase
from ...domain.use_cases.recommend_activities import RecommendActivitiesUseCase
from ...domain.use_cases.recommend_clothing import RecommendClothingUseCase
from ...domain.use_cases.summarize_outlook import SummarizeOutlookUseCase
from ...domain.use_cases.export_outlook_csv import ExportOutlookCsvUseCase

logger = logging.getLogger(__name__)


class OutlookService:
    """Orchestrates fetching history, estimating conditions and building guidance."""

    def __init__(
        self,
        weather_repo: WeatherRepository,
        activity_catalog: Sequence[Dict[str, Any]],
        condition_definitions: Dict[str, Dict[str, Any]],
        current_conditions_repo: Optional[CurrentConditionsRepository] = None,
        saved_query_repo: Optional[SavedQueryRepository] = None,
        history_start: str = "20200101",
        history_end: str = "20250101",
        fill_value: float = -999.0,
        export_dir: Optional[Path] = None,
    ):
        self.weather_repo = weather_repo
        self.current_conditions_repo = current_conditions_repo
        self.saved_query_repo = saved_query_repo

        self.catalog = [Activity.from_dict(definition) for definition in activity_catalog]
        self.history_start = datetime.strptime(history_start, "%Y%m%d").date()
        self.history_end = datetime.strptime(history_end, "%Y%m%d").date()
        self.export_dir = Path(export_dir) if export_dir else Path("data/exports")

        # Use cases
        self.collect_weather_uc = CollectWeatherDataUseCase(weather_repo)
        self.extract_sample_uc = ExtractCalendarDaySampleUseCase(fill_value=fill_value)
        self.classify_uc = ClassifyConditionsUseCase(condition_definitions)
        self.recommend_activities_uc = RecommendActivitiesUseCase()
        self.recommend_clothing_uc = RecommendClothingUseCase()
        self.summarize_uc = SummarizeOutlookUseCase()
        self.export_csv_uc = ExportOutlookCsvUseCase()

    def evaluate(self, location: Location, target_date: date) -> DayOutlook:
        """
        Build the outlook for a location and calendar day.

        Args:
            location: Point of interest
            target_date: Day of interest; only month and day are used

        Returns:
            DayOutlook with estimates, rated activities, clothing and summary

        Raises:
            ProviderUnavailableError: If historical data cannot be fetched
            InsufficientDataError: If no year has data for the calendar day
        """
        series = self.collect_weather_uc.execute(
            location, self.history_start, self.history_end
        )
        return self.evaluate_series(series, location, target_date)

    def evaluate_series(
        self, series: WeatherSeries, location: Location, target_date: date
    ) -> DayOutlook:
        """Build the outlook from already fetched series."""
        logger.info(f"=== Evaluating outlook for {location} on {target_date.isoformat()} ===")

        sample = self.extract_sample_uc.execute(series, target_date)
        estimates = self.classify_uc.execute(sample)
        activities = self.recommend_activities_uc.execute(self.catalog, estimates)
        clothing = self.recommend_clothing_uc.execute(estimates)
        summary = self.summarize_uc.execute(estimates)

        return DayOutlook(
            location=location,
            target_date=target_date,
            sample=sample,
            estimates=estimates,
            activities=activities,
            clothing=clothing,
            summary=summary,
        )

    def export_csv(self, outlook: DayOutlook) -> str:
        """Render an outlook's sample as CSV text."""
        return self.export_csv_uc.execute(outlook.sample, outlook.estimates)

    def write_csv(self, outlook: DayOutlook, directory: Optional[Path] = None) -> Path:
        """Write an outlook's CSV export and return its path."""
        export_dir = Path(directory) if directory else self.export_dir
        export_dir.mkdir(parents=True, exist_ok=True)

        path = export_dir / f"forecast_summary_{outlook.target_date.strftime('%Y%m%d')}.csv"
        path.write_text(self.export_csv(outlook), encoding="utf-8")
        logger.info(f"CSV export written to {path}")
        return path

    def current_conditions(self, location: Location) -> CurrentConditions:
        """Fetch live weather for a location."""
        if self.current_conditions_repo is None:
            raise RuntimeError("No current conditions provider configured")
        return self.current_conditions_repo.get_current_conditions(
            location.latitude, location.longitude
        )

    def _require_saved_queries(self) -> SavedQueryRepository:
        if self.saved_query_repo is None:
            raise RuntimeError("No saved query store configured")
        return self.saved_query_repo

    def save_query(self, outlook: DayOutlook) -> SavedQuery:
        """Store an outlook as a saved query."""
        repo = self._require_saved_queries()
        primary = outlook.estimates[0]
        query = SavedQuery(
            id=uuid.uuid4().hex,
            location=outlook.location.name or "",
            date=outlook.target_date.isoformat(),
            time=datetime.now().strftime("%H:%M:%S"),
            lat=str(outlook.location.latitude),
            lon=str(outlook.location.longitude),
            conditions=[e.id.value for e in outlook.estimates],
            temperature=round_half_up(outlook.temperature_mean),
            weather_icon=primary.icon,
        )
        repo.add_query(query)
        return query

    def list_saved_queries(self) -> List[SavedQuery]:
        return self._require_saved_queries().list_queries()

    def delete_saved_query(self, query_id: str) -> bool:
        return self._require_saved_queries().delete_query(query_id)
