"""Use case for recommending clothing and gear for condition estimates."""

import logging
from typing import List, Sequence
from ..entities.clothing_item import ClothingItem
from ..entities.condition_estimate import ConditionEstimate
from .condition_readings import ConditionReadings

logger = logging.getLogger(__name__)

COLD_ITEMS = (
    ClothingItem("base-thermal", "Thermal base layer", "Moisture-wicking top and bottoms", "thermometer", True),
    ClothingItem("insulated-jacket", "Insulated jacket", "Down or synthetic insulation", "snow", True),
    ClothingItem("beanie-gloves", "Beanie & gloves", "Keep extremities warm", "snow"),
)
COOL_ITEMS = (
    ClothingItem("midlayer", "Light jacket/hoodie", "Fleece or softshell", "shirt", True),
    ClothingItem("long-pants", "Long pants", "Comfortable, breathable fabric", "walk"),
)
MILD_ITEMS = (
    ClothingItem("tee", "T-shirt", "Breathable top", "shirt", True),
    ClothingItem("option-layer", "Light long-sleeve (optional)", "For shade or breeze", "shirt"),
)
HOT_ITEMS = (
    ClothingItem("sun-top", "Breathable top", "Lightweight, sweat-wicking", "sunny", True),
    ClothingItem("shorts", "Shorts", "Stay cool and mobile", "walk"),
    ClothingItem("sun-protection", "Hat & sunscreen", "Protect from strong sun", "sunny"),
)
RAIN_ITEMS = (
    ClothingItem("rain-jacket", "Rain jacket", "Waterproof (e.g., Gore-Tex)", "rainy", True),
    ClothingItem("waterproof-footwear", "Waterproof footwear", "Keep feet dry", "umbrella"),
)
SNOW_ITEMS = (
    ClothingItem("heavy-coat", "Heavy coat", "Insulated & wind-resistant", "snow", True),
    ClothingItem("insulated-boots", "Insulated boots", "Traction for snow/ice", "snow"),
)


class RecommendClothingUseCase:
    """Use case to pick one temperature band of clothing plus rain and snow gear."""

    def __init__(self, rain_threshold: int = 40, snow_threshold: int = 30):
        """
        Initialize use case.

        Args:
            rain_threshold: Rain percentage at which rain gear is added
            snow_threshold: Snow percentage at which snow gear is added
        """
        self.rain_threshold = rain_threshold
        self.snow_threshold = snow_threshold

    @staticmethod
    def temperature_band(temperature: int) -> Sequence[ClothingItem]:
        """Get the clothing for a rounded Fahrenheit temperature."""
        if temperature < 40:
            return COLD_ITEMS
        if temperature < 60:
            return COOL_ITEMS
        if temperature <= 75:
            return MILD_ITEMS
        return HOT_ITEMS

    def execute(self, estimates: Sequence[ConditionEstimate]) -> List[ClothingItem]:
        """
        Execute clothing selection.

        Args:
            estimates: Rain, snow and wind estimates

        Returns:
            Band items first, then rain items, then snow items
        """
        readings = ConditionReadings.from_estimates(estimates)

        items = list(self.temperature_band(readings.temperature))
        if readings.rain >= self.rain_threshold:
            items.extend(RAIN_ITEMS)
        if readings.snow >= self.snow_threshold:
            items.extend(SNOW_ITEMS)

        logger.info(
            f"Recommended {len(items)} clothing items for {readings.temperature}°F "
            f"(rain={readings.rain}%, snow={readings.snow}%)"
        )
        return items
