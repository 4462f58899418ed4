"""FastAPI main application."""

import logging
import datetime
from typing import Dict, List, Optional
from fastapi import FastAPI, HTTPException, Query, Response
from pydantic import BaseModel, Field
from ...application.services.outlook_service import OutlookService
from ...domain.entities.location import Location
from ...domain.entities.outlook import DayOutlook
from ...domain.entities.saved_query import SavedQuery
from ...domain.exceptions import InsufficientDataError, ProviderUnavailableError
from ..wiring import build_service, configure_logging
from config.settings import API_SETTINGS

configure_logging()
logger = logging.getLogger(__name__)


# Request/Response models
class OutlookRequest(BaseModel):
    """Request model for an outlook."""

    latitude: float = Field(..., ge=-90, le=90, description="Latitude in decimal degrees")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude in decimal degrees")
    date: datetime.date = Field(..., description="Day of interest; only month and day are used")
    location: Optional[str] = Field(None, description="Display name (e.g., 'Boulder, CO')")


class ConditionEstimateModel(BaseModel):
    id: str
    label: str
    probability: int
    icon: str
    color: str
    temperature_mean: float
    temperature_high: float
    temperature_low: float


class ActivityModel(BaseModel):
    id: str
    name: str
    description: str
    indoor: bool
    recommendation: str
    planner_tier: str
    advice: str


class ClothingItemModel(BaseModel):
    id: str
    name: str
    description: str
    icon: str
    essential: bool


class OutlookResponse(BaseModel):
    """Response model for an outlook."""

    location: str
    latitude: float
    longitude: float
    date: str
    sample_size: int
    matched_dates: List[str]
    estimates: List[ConditionEstimateModel]
    activities: List[ActivityModel]
    clothing: List[ClothingItemModel]
    summary: str
    temperature_band: Dict[str, str]


class SavedQueryModel(BaseModel):
    id: str
    location: str
    date: str
    time: str
    lat: str
    lon: str
    conditions: List[str]
    temperature: Optional[int] = None
    weather_icon: Optional[str] = None


def _to_response(outlook: DayOutlook) -> OutlookResponse:
    band = outlook.summary.temperature_band
    return OutlookResponse(
        location=str(outlook.location),
        latitude=outlook.location.latitude,
        longitude=outlook.location.longitude,
        date=outlook.target_date.isoformat(),
        sample_size=outlook.sample.size,
        matched_dates=list(outlook.sample.dates),
        estimates=[
            ConditionEstimateModel(
                id=e.id.value,
                label=e.label,
                probability=e.probability,
                icon=e.icon,
                color=e.color,
                temperature_mean=e.temperature_mean,
                temperature_high=e.temperature_high,
                temperature_low=e.temperature_low,
            )
            for e in outlook.estimates
        ],
        activities=[
            ActivityModel(
                id=a.id,
                name=a.name,
                description=a.description,
                indoor=a.indoor,
                recommendation=a.recommendation.value,
                planner_tier=a.planner_tier.value,
                advice=a.recommendation.describe(),
            )
            for a in outlook.activities
        ],
        clothing=[
            ClothingItemModel(
                id=c.id,
                name=c.name,
                description=c.description,
                icon=c.icon,
                essential=c.essential,
            )
            for c in outlook.clothing
        ],
        summary=outlook.summary.text,
        temperature_band={"label": band.label, "color": band.color, "icon": band.icon},
    )


def _saved_query_model(query: SavedQuery) -> SavedQueryModel:
    return SavedQueryModel(
        id=query.id,
        location=query.location,
        date=query.date,
        time=query.time,
        lat=query.lat,
        lon=query.lon,
        conditions=list(query.conditions),
        temperature=query.temperature,
        weather_icon=query.weather_icon,
    )


def _to_http_exception(e: Exception) -> HTTPException:
    """Map engine errors onto HTTP status codes."""
    if isinstance(e, InsufficientDataError):
        return HTTPException(status_code=422, detail=str(e))
    if isinstance(e, ProviderUnavailableError):
        return HTTPException(status_code=502, detail=str(e))
    logger.error(f"Unexpected error: {e}", exc_info=True)
    return HTTPException(status_code=500, detail=str(e))


def create_app(service: Optional[OutlookService] = None) -> FastAPI:
    """
    Create the API application.

    Args:
        service: Outlook service to serve; built from settings when omitted
    """
    service = service or build_service()
    app = FastAPI(
        title=API_SETTINGS["title"],
        description=API_SETTINGS["description"],
        version=API_SETTINGS["version"],
    )

    def _evaluate(request: OutlookRequest) -> DayOutlook:
        location = Location(
            latitude=request.latitude, longitude=request.longitude, name=request.location
        )
        return service.evaluate(location, request.date)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": API_SETTINGS["title"],
            "version": API_SETTINGS["version"],
            "endpoints": {
                "outlook": "/outlook",
                "export": "/outlook/export",
                "current": "/current",
                "saved_queries": "/saved-queries",
                "health": "/health",
            },
        }

    @app.get("/health")
    def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.post("/outlook", response_model=OutlookResponse)
    def outlook(request: OutlookRequest) -> OutlookResponse:
        """
        Estimate rain, snow and wind likelihoods for a calendar day.

        Args:
            request: Coordinates, date and optional location name

        Returns:
            Estimates with rated activities, clothing and summary
        """
        try:
            return _to_response(_evaluate(request))
        except Exception as e:
            raise _to_http_exception(e) from e

    @app.post("/outlook/export")
    def export(request: OutlookRequest) -> Response:
        """Export the matched historical days as CSV."""
        try:
            csv_text = service.export_csv(_evaluate(request))
        except Exception as e:
            raise _to_http_exception(e) from e

        filename = f"forecast_summary_{request.date.strftime('%Y%m%d')}.csv"
        return Response(
            content=csv_text,
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.get("/current")
    def current(
        latitude: float = Query(..., ge=-90, le=90),
        longitude: float = Query(..., ge=-180, le=180),
    ):
        """Live weather at a point."""
        try:
            conditions = service.current_conditions(Location(latitude, longitude))
        except Exception as e:
            raise _to_http_exception(e) from e
        return conditions.to_dict()

    @app.get("/saved-queries", response_model=List[SavedQueryModel])
    def list_saved_queries() -> List[SavedQueryModel]:
        """List saved queries, newest first."""
        try:
            return [_saved_query_model(q) for q in service.list_saved_queries()]
        except Exception as e:
            raise _to_http_exception(e) from e

    @app.post("/saved-queries", response_model=SavedQueryModel)
    def save_query(request: OutlookRequest) -> SavedQueryModel:
        """Evaluate an outlook and keep it as a saved query."""
        try:
            return _saved_query_model(service.save_query(_evaluate(request)))
        except Exception as e:
            raise _to_http_exception(e) from e

    @app.delete("/saved-queries/{query_id}")
    def delete_saved_query(query_id: str):
        """Delete a saved query."""
        try:
            deleted = service.delete_saved_query(query_id)
        except Exception as e:
            raise _to_http_exception(e) from e
        if not deleted:
            raise HTTPException(status_code=404, detail=f"Saved query not found: {query_id}")
        return {"status": "deleted", "id": query_id}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
