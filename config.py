# config.py

"""
Central configuration file for the U.S. Diabetes Prevalence map.
This file stores constants and settings to make the application more maintainable.
"""

from typing import Dict, Final, List, Tuple

# File paths (or http(s) URLs) for the input data assets
STATE_BOUNDARIES_PATH: Final[str] = "data/us_states_accurate.geojson"
STATE_SERIES_PATH: Final[str] = "data/temporal/diabetes_by_state_years.geojson"
COUNTY_BOUNDARIES_PATH: Final[str] = "data/us_counties.geojson"
COUNTY_STATS_PATH: Final[str] = "data/diabetes_prevalence.csv"
NATIONAL_TABLE_PATH: Final[str] = "data/temporal/diabetes_prevalence_by_year.csv"

# The persisted output of the batch merge (build_merged_states.py)
MERGED_STATES_PATH: Final[str] = "data/merged_diabetes_states.geojson"

REQUEST_TIMEOUT: Final[int] = 60  # seconds

# Property names tried, in order, when looking for a state's name
STATE_NAME_KEYS: Final[Tuple[str, ...]] = ("NAME", "name", "State", "STATE_NAME")
# Property names tried, in order, when looking for a county's geographic identifier
COUNTY_ID_KEYS: Final[Tuple[str, ...]] = ("GEOID", "GEO_ID")

# Census summary-level marker on county GEO_IDs, e.g. "0500000US01001"
CENSUS_COUNTY_PREFIX: Final[str] = "0500000US"
FIPS_WIDTH: Final[int] = 5

# Substituted for states that have no matching series
PLACEHOLDER_SERIES: Final[List[Dict[str, float]]] = [
    {"year": 2000, "value": 5.0},
    {"year": 2005, "value": 6.0},
    {"year": 2010, "value": 7.0},
    {"year": 2015, "value": 8.0},
    {"year": 2020, "value": 9.0},
]

# County statistics CSV columns
COUNTY_FIPS_COLUMN: Final[str] = "FIPS.Codes"
COUNTY_NAME_COLUMN: Final[str] = "County"
COUNTY_STATE_COLUMN: Final[str] = "State"
MEN_DIABETES_COLUMN: Final[str] = "percent.men.diabetes"
WOMEN_DIABETES_COLUMN: Final[str] = "percent.women.diabetes"

# Feature property -> CSV column, raw percentages copied verbatim onto matched county features
COUNTY_PERCENT_FIELDS: Final[Dict[str, str]] = {
    "menDiabetesPercent": MEN_DIABETES_COLUMN,
    "womenDiabetesPercent": WOMEN_DIABETES_COLUMN,
    "menObesePercent": "percent.men.obese",
    "womenObesePercent": "percent.women.obese",
}

# The county statistics are a single-year snapshot
COUNTY_DATA_YEAR: Final[int] = 2012
DEFAULT_YEAR: Final[int] = 2020

# --- Map display ---
DEFAULT_MAP_LOCATION: Final[List[float]] = [37.8, -96.0]
DEFAULT_ZOOM: Final[int] = 4
MAP_TILES: Final[str] = "cartodbpositron"
NO_DATA_COLOR: Final[str] = "#808080"
# Lower bounds of each color step (a value must be strictly greater to reach the next step)
COLOR_THRESHOLDS: Final[List[float]] = [0, 4, 6, 8, 10, 12, 14, 16]
COLOR_SCALE: Final[List[str]] = [
    "#E0FFFF",  # light cyan
    "#7FFFD4",  # aquamarine
    "#72D8F7",
    "#66B3F3",  # sky blue
    "#5E8BEF",
    "#5560E9",  # blue-purple
    "#4B36D1",
    "#3A1C71",  # deep purple
]
