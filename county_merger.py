# county_merger.py
"""Joins county boundary features with the single-year county statistics by FIPS code."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from config import (
    COUNTY_FIPS_COLUMN,
    COUNTY_ID_KEYS,
    COUNTY_NAME_COLUMN,
    COUNTY_PERCENT_FIELDS,
    COUNTY_STATE_COLUMN,
    MEN_DIABETES_COLUMN,
    WOMEN_DIABETES_COLUMN,
)
from csv_table import frame_to_records, read_csv_frame
from formatting import one_decimal, parse_percent
from keys import derive_fips, pad_fips
from schemas import CountyStatsSchema

CountyRecord = Dict[str, str]


@dataclass
class CountyMergeReport:
    matched: int = 0
    unmatched_fips: List[str] = field(default_factory=list)

    @property
    def unmatched(self) -> int:
        return len(self.unmatched_fips)

    def summary_lines(self) -> List[str]:
        return [f"Matched {self.matched} counties, {self.unmatched} without statistics."]


def county_records_from_rows(rows: Sequence[Mapping[str, str]]) -> Dict[str, CountyRecord]:
    """
    Keys county statistics rows by zero-padded FIPS code.

    Each record gains `FIPS` and `diabetesPercent`, the mean of the men's and
    women's diabetes percentages (an unparseable side counts as 0).
    """
    records = {}
    for row in rows:
        record = dict(row)
        record["FIPS"] = pad_fips(row.get(COUNTY_FIPS_COLUMN))
        men = parse_percent(row.get(MEN_DIABETES_COLUMN)) or 0.0
        women = parse_percent(row.get(WOMEN_DIABETES_COLUMN)) or 0.0
        record["diabetesPercent"] = one_decimal((men + women) / 2)
        records[record["FIPS"]] = record
    return records


def load_county_records(text: str) -> Dict[str, CountyRecord]:
    """Parses the county statistics CSV, checking that the expected columns exist."""
    df = read_csv_frame(text)
    CountyStatsSchema.validate(df)
    return county_records_from_rows(frame_to_records(df))


def extract_geo_identifier(
    properties: Mapping[str, Any], id_keys: Sequence[str] = COUNTY_ID_KEYS
) -> Optional[Any]:
    for key in id_keys:
        value = properties.get(key)
        if value:
            return value
    return None


def merge_county_stats(
    boundaries: Mapping[str, Any],
    records: Mapping[str, CountyRecord],
    id_keys: Sequence[str] = COUNTY_ID_KEYS,
) -> Tuple[Dict[str, Any], CountyMergeReport]:
    """
    Enriches county boundary features with their statistics.

    Matched features are rebuilt with the county/state names, the overall
    `diabetesPercent` and the four raw percentage columns added to their
    properties. Features without statistics are passed through unchanged.
    """
    report = CountyMergeReport()
    merged_features = []

    for feature in boundaries.get("features", []):
        properties = feature.get("properties") or {}
        fips = derive_fips(extract_geo_identifier(properties, id_keys))
        record = records.get(fips) if fips else None

        if record is None:
            report.unmatched_fips.append(fips)
            merged_features.append(feature)
            continue

        report.matched += 1
        enriched = dict(properties)
        enriched["county"] = record.get(COUNTY_NAME_COLUMN)
        enriched["state"] = record.get(COUNTY_STATE_COLUMN)
        enriched["diabetesPercent"] = record["diabetesPercent"]
        for prop, column in COUNTY_PERCENT_FIELDS.items():
            enriched[prop] = record.get(column)
        merged_features.append({**feature, "properties": enriched})

    return {**boundaries, "features": merged_features}, report
