# state_merger.py
"""
Joins state boundary features with yearly diabetes series by state name.

Names are matched exactly first and then case-insensitively. States with
no usable series get a fixed placeholder series so every merged feature
can be colored for any year on the slider.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from config import PLACEHOLDER_SERIES, STATE_NAME_KEYS
from keys import normalize_key

UNKNOWN_NAME = "UNKNOWN"

YearValue = Dict[str, Any]
YearSeries = List[YearValue]


@dataclass(frozen=True)
class NameMatch:
    """Result of looking a state name up in the series map."""
    key: str
    exact: bool
    # More than one series key normalizes to the same name; `key` is the first.
    ambiguous: bool = False
    candidates: Tuple[str, ...] = ()


@dataclass
class StateMergeReport:
    """Which names matched, which didn't, and which series went unused."""
    matched: List[str] = field(default_factory=list)
    unmatched: List[str] = field(default_factory=list)
    unused: List[str] = field(default_factory=list)
    ambiguous: List[str] = field(default_factory=list)

    def summary_lines(self) -> List[str]:
        lines = [
            f"Matched {len(self.matched)} states, "
            f"{len(self.unmatched)} unmatched, {len(self.unused)} series unused."
        ]
        lines += [f"  - No diabetes data for state: {name}" for name in self.unmatched]
        lines += [f"  - Series never used: {key}" for key in self.unused]
        lines += [f"  - Ambiguous match: {entry}" for entry in self.ambiguous]
        return lines


def extract_state_name(
    properties: Mapping[str, Any], name_keys: Sequence[str] = STATE_NAME_KEYS
) -> Optional[str]:
    """Returns the first non-empty candidate name property, trimmed."""
    for key in name_keys:
        value = properties.get(key)
        if value is None:
            continue
        value = str(value).strip()
        if value:
            return value
    return None


def find_series_key(name: str, series: Mapping[str, Any]) -> Optional[NameMatch]:
    """Finds the series key for a state name: exact match, then case-insensitive."""
    if name in series:
        return NameMatch(key=name, exact=True)

    wanted = normalize_key(name)
    candidates = tuple(key for key in series if normalize_key(key) == wanted)
    if not candidates:
        return None
    return NameMatch(
        key=candidates[0],
        exact=False,
        ambiguous=len(candidates) > 1,
        candidates=candidates,
    )


def series_from_collection(collection: Mapping[str, Any]) -> Dict[str, YearSeries]:
    """
    Builds the name -> series map from the diabetes-by-state GeoJSON.

    Uses properties.NAME and properties.diabetes; features without a name
    are skipped and a repeated name overwrites the earlier one.
    """
    series = {}
    for feature in collection.get("features", []):
        properties = feature.get("properties") or {}
        name = properties.get("NAME")
        if name is None:
            continue
        series[name] = properties.get("diabetes")
    return series


def _copy_series(points: Sequence[Mapping[str, Any]]) -> YearSeries:
    return [dict(point) for point in points]


def merge_state_series(
    boundaries: Mapping[str, Any],
    series: Mapping[str, Optional[Sequence[YearValue]]],
    name_keys: Sequence[str] = STATE_NAME_KEYS,
) -> Tuple[Dict[str, Any], StateMergeReport]:
    """
    Adds a `diabetes` series to every state boundary feature.

    Returns a new FeatureCollection (inputs are left untouched) along with a
    report of matched, unmatched and unused names. A series that is present
    but empty counts as no match.
    """
    report = StateMergeReport()
    consumed = set()
    merged_features = []

    for feature in boundaries.get("features", []):
        properties = feature.get("properties") or {}
        name = extract_state_name(properties, name_keys)

        match = find_series_key(name, series) if name is not None else None
        points = series.get(match.key) if match else None

        if match and points:
            diabetes = _copy_series(points)
            consumed.add(match.key)
            if match.exact:
                report.matched.append(name)
            else:
                report.matched.append(f"{name} (matched as '{match.key}')")
            if match.ambiguous:
                report.ambiguous.append(
                    f"{name} -> {', '.join(match.candidates)} (used '{match.key}')"
                )
        else:
            diabetes = _copy_series(PLACEHOLDER_SERIES)
            report.unmatched.append(name if name is not None else UNKNOWN_NAME)

        merged_features.append(
            {**feature, "properties": {**properties, "diabetes": diabetes}}
        )

    report.unused = [key for key in series if key not in consumed]
    return {**boundaries, "features": merged_features}, report
