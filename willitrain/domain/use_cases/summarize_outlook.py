"""Use case for describing condition estimates in plain language."""

from typing import Sequence
from ..entities.condition_estimate import ConditionEstimate, ConditionId
from ..entities.outlook import OutlookSummary, TemperatureBand
from ..exceptions import InsufficientDataError
from ..statistics import round_half_up
from .condition_readings import ConditionReadings

# Lower bound (inclusive) -> band, checked top down
TEMPERATURE_BANDS = (
    (75, TemperatureBand("Sunny", "#FF6B35", "sunny")),
    (60, TemperatureBand("Warm", "#FFD23F", "partly-sunny")),
    (40, TemperatureBand("Cool", "#4ECDC4", "cool")),
)
COLD_BAND = TemperatureBand("Cold", "#4A90E2", "snow")

CLEAR_LABEL = "sunny/clear"

HEADLINE_LABELS = {
    ConditionId.RAIN: "rain",
    ConditionId.SNOW: "snow",
    ConditionId.WIND: "windy",
}


def temperature_band(temperature: float) -> TemperatureBand:
    """Get the display band for a Fahrenheit temperature."""
    for lower_bound, band in TEMPERATURE_BANDS:
        if temperature >= lower_bound:
            return band
    return COLD_BAND


class SummarizeOutlookUseCase:
    """Use case to build the headline shown above an outlook."""

    def execute(self, estimates: Sequence[ConditionEstimate]) -> OutlookSummary:
        """
        Execute summarization.

        Args:
            estimates: Rain, snow and wind estimates

        Returns:
            OutlookSummary with headline, full text and temperature band
        """
        if not estimates:
            raise InsufficientDataError("No condition estimates to summarize")
        readings = ConditionReadings.from_estimates(estimates)

        # max() keeps the first of equal probabilities
        primary = max(estimates, key=lambda e: e.probability)
        if primary.probability > 0:
            label = HEADLINE_LABELS.get(primary.id, primary.label.lower())
        else:
            label = CLEAR_LABEL
        parts = [f"Likely {label}"]
        if readings.rain >= 10:
            parts.append(f"{readings.rain}% chance of rain")
        if readings.snow >= 10:
            parts.append(f"{readings.snow}% chance of snow")
        if readings.wind >= 20:
            parts.append(f"{readings.wind}% chance of windy conditions")
        headline = ", ".join(parts)

        climate = primary.climate
        high = round_half_up(climate.temperature_high)
        low = round_half_up(climate.temperature_low)
        text = (
            f"{headline}. Average around {readings.temperature}°F "
            f"(H:{high}°F / L:{low}°F). Plan activities accordingly."
        )
        return OutlookSummary(
            headline=headline,
            text=text,
            temperature_band=temperature_band(climate.temperature_mean),
        )
