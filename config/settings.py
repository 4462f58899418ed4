"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = Path(os.getenv("WILLITRAIN_DATA_DIR", BASE_DIR / "data"))
EXPORT_DIR = DATA_DIR / "exports"
SAVED_QUERIES_FILE = DATA_DIR / "saved_queries.json"

# Optional local copy of NASA POWER daily data (CSV/XLSX). When unset the API is used.
WEATHER_DATA_FILE = os.getenv("WEATHER_DATA_FILE", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# NASA POWER daily point API
NASA_POWER_SETTINGS = {
    "base_url": os.getenv(
        "NASA_POWER_URL", "https://power.larc.nasa.gov/api/temporal/daily/point"
    ),
    "community": "RE",
    "units": "imperial",
    "parameters": ["T2M", "WS2M", "PRECTOTCORR", "SNODP"],
    "timeout": float(os.getenv("NASA_POWER_TIMEOUT", "30")),
    "fill_value": -999.0,
    # History window sampled for every calendar day
    "history_start": os.getenv("HISTORY_START", "20200101"),
    "history_end": os.getenv("HISTORY_END", "20250101"),
}

# Open-Meteo current conditions
OPEN_METEO_SETTINGS = {
    "base_url": os.getenv("OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast"),
    "current": [
        "temperature_2m",
        "relative_humidity_2m",
        "precipitation",
        "wind_speed_10m",
        "weather_code",
    ],
    "temperature_unit": "fahrenheit",
    "timeout": float(os.getenv("OPEN_METEO_TIMEOUT", "10")),
}

# Display definitions for each estimated condition
CONDITION_DEFINITIONS = {
    "rain": {"label": "Rain", "icon": "rainy", "color": "#4A90E2"},
    "snow": {"label": "Snow", "icon": "snow", "color": "#87CEEB"},
    "wind": {"label": "Wind", "icon": "leaf", "color": "#32CD32"},
}

# Activity catalog evaluated against every outlook
ACTIVITY_CATALOG = [
    {"id": "hiking", "name": "Hiking", "description": "Explore scenic trails"},
    {"id": "jogging", "name": "Jogging", "description": "Go for a run"},
    {"id": "gardening", "name": "Gardening", "description": "Tend to plants"},
    {"id": "climbing", "name": "Climbing", "description": "Hit the crag or gym"},
    {"id": "fishing", "name": "Fishing", "description": "Cast a line"},
    {"id": "cycling", "name": "Cycling", "description": "Ride your favorite route"},
    {"id": "picnic", "name": "Picnic", "description": "Relax outdoors"},
    {"id": "photography", "name": "Photography", "description": "Capture the day"},
    {
        "id": "indoor-climbing",
        "name": "Indoor Climbing",
        "description": "Challenge yourself",
        "indoor": True,
    },
]

# API settings
API_SETTINGS = {
    "title": "Will It Rain API",
    "description": "Historical weather likelihoods with activity and clothing guidance",
    "version": "1.0.0",
}
