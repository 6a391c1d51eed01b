# national_stats.py
"""
National summary statistics for the map's statistics panel.

The state view reads the precomputed national table for the selected year;
the county view aggregates the merged county features on the fly.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, NamedTuple, Optional, Sequence, Tuple

from config import DEFAULT_YEAR
from csv_table import frame_to_records, read_csv_frame
from formatting import one_decimal, parse_percent
from schemas import NationalYearSchema

View = Literal["state", "county"]


@dataclass(frozen=True)
class Selection:
    """What the map is currently showing."""
    view: View = "state"
    year: int = DEFAULT_YEAR


class YearEstimate(NamedTuple):
    percentage: str
    lower_limit: str
    upper_limit: str

    @property
    def rate_label(self) -> str:
        return f"{self.percentage}%"

    @property
    def range_label(self) -> str:
        return f"{self.lower_limit}% - {self.upper_limit}%"


@dataclass(frozen=True)
class NationalStat:
    average: str  # one decimal place, or "N/A" when nothing was counted
    minimum: float
    maximum: float

    @property
    def rate_label(self) -> str:
        return f"{self.average}%"

    @property
    def range_label(self) -> str:
        return f"{one_decimal(self.minimum)}% - {one_decimal(self.maximum)}%"


def load_national_table(text: str) -> List[Dict[str, str]]:
    """Parses the national prevalence-by-year CSV, checking its columns."""
    df = read_csv_frame(text)
    NationalYearSchema.validate(df)
    return frame_to_records(df)


def lookup_year(table: Sequence[Mapping[str, str]], year: int) -> Optional[YearEstimate]:
    """Returns the first row whose Year equals `year` numerically ("2020" == 2020)."""
    for row in table:
        row_year = parse_percent(row.get("Year"))
        if row_year is not None and row_year == year:
            return YearEstimate(
                percentage=row.get("Percentage", ""),
                lower_limit=row.get("LowerLimit", ""),
                upper_limit=row.get("UpperLimit", ""),
            )
    return None


def aggregate(features: Sequence[Mapping[str, Any]]) -> NationalStat:
    """
    Averages `diabetesPercent` over every feature that has a numeric value.

    The running min/max start at 100 and 0 and are reported as-is, so an
    empty input gives a "100.0% - 0.0%" range alongside an "N/A" average.
    """
    total = 0.0
    count = 0
    minimum = 100.0
    maximum = 0.0

    for feature in features:
        value = parse_percent((feature.get("properties") or {}).get("diabetesPercent"))
        if value is None:
            continue
        total += value
        count += 1
        minimum = min(minimum, value)
        maximum = max(maximum, value)

    average = one_decimal(total / count) if count > 0 else "N/A"
    return NationalStat(average=average, minimum=minimum, maximum=maximum)


def national_summary(
    selection: Selection,
    national_table: Optional[Sequence[Mapping[str, str]]],
    county_features: Optional[Sequence[Mapping[str, Any]]],
) -> Optional[Tuple[str, str]]:
    """
    Returns the (rate, range) labels for the statistics panel, or None when
    the data for the selected view isn't loaded or has no entry for the year.
    """
    if selection.view == "state":
        if national_table is None:
            return None
        estimate = lookup_year(national_table, selection.year)
    else:
        if county_features is None:
            return None
        estimate = aggregate(county_features)

    if estimate is None:
        return None
    return estimate.rate_label, estimate.range_label


def state_value_for_year(properties: Mapping[str, Any], year: int) -> Optional[float]:
    """Value of a merged state's diabetes series at `year`, if it has one."""
    for point in properties.get("diabetes") or []:
        if point.get("year") == year:
            return parse_percent(point.get("value"))
    return None


def available_years(collection: Mapping[str, Any]) -> List[int]:
    """Sorted years present in any merged state's diabetes series."""
    years = set()
    for feature in collection.get("features", []):
        for point in (feature.get("properties") or {}).get("diabetes") or []:
            year = point.get("year")
            if isinstance(year, int):
                years.add(year)
    return sorted(years)
