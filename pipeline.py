# pipeline.py
"""
Load-and-merge steps shared by the batch build script and the dashboard.

Each step reads its inputs completely before merging; any read failure
propagates as a DataSourceError (or a pandera SchemaError for a table
missing its expected columns) and nothing is returned.
"""

from typing import Any, Dict, List, Tuple

from config import (
    COUNTY_BOUNDARIES_PATH,
    COUNTY_STATS_PATH,
    NATIONAL_TABLE_PATH,
    STATE_BOUNDARIES_PATH,
    STATE_SERIES_PATH,
)
from county_merger import CountyMergeReport, load_county_records, merge_county_stats
from national_stats import load_national_table
from sources import read_geojson, read_text
from state_merger import StateMergeReport, merge_state_series, series_from_collection


def build_state_collection(
    boundaries_location: str = STATE_BOUNDARIES_PATH,
    series_location: str = STATE_SERIES_PATH,
) -> Tuple[Dict[str, Any], StateMergeReport]:
    series = series_from_collection(read_geojson(series_location))
    boundaries = read_geojson(boundaries_location)
    return merge_state_series(boundaries, series)


def build_county_collection(
    boundaries_location: str = COUNTY_BOUNDARIES_PATH,
    stats_location: str = COUNTY_STATS_PATH,
) -> Tuple[Dict[str, Any], CountyMergeReport]:
    boundaries = read_geojson(boundaries_location)
    records = load_county_records(read_text(stats_location))
    return merge_county_stats(boundaries, records)


def build_national_table(location: str = NATIONAL_TABLE_PATH) -> List[Dict[str, str]]:
    return load_national_table(read_text(location))
