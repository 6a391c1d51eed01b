import pandas as pd
import plotly.graph_objects as go
from typing import Any, Dict, Mapping

from formatting import one_decimal, parse_percent
from national_stats import state_value_for_year
from state_merger import extract_state_name


def plot_state_trend(properties: Mapping[str, Any], year: int) -> go.Figure:
    """Line chart of one state's diabetes series with the selected year marked."""
    name = extract_state_name(properties) or "Unknown state"
    series = properties.get("diabetes") or []
    years = [point.get("year") for point in series]
    values = [point.get("value") for point in series]

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=years,
            y=values,
            mode="lines+markers",
            name=name,
            line=dict(color="#5560E9", width=2.5),
        )
    )
    selected = state_value_for_year(properties, year)
    if selected is not None:
        fig.add_trace(
            go.Scatter(
                x=[year],
                y=[selected],
                mode="markers",
                name=str(year),
                marker=dict(color="#3A1C71", size=12, symbol="circle"),
            )
        )
    fig.update_layout(
        title=f"{name} Diabetes Prevalence",
        xaxis_title="Year",
        yaxis_title="% of adults",
        template="plotly_white",
        font=dict(size=14),
        height=400,
        showlegend=False,
    )
    return fig


def state_detail_table(properties: Mapping[str, Any], year: int) -> pd.DataFrame:
    """One row per year of a state's series; `Selected` flags the current year."""
    name = extract_state_name(properties) or "Unknown state"
    rows = []
    for point in properties.get("diabetes") or []:
        value = parse_percent(point.get("value"))
        rows.append({
            "State": name,
            "Year": point.get("year"),
            "Prevalence (%)": one_decimal(value) if value is not None else "N/A",
            "Selected": point.get("year") == year,
        })
    return pd.DataFrame(rows, columns=["State", "Year", "Prevalence (%)", "Selected"])


def county_detail_table(properties: Mapping[str, Any]) -> pd.DataFrame:
    """Overall/men/women diabetes rows for a county, plus obesity rows when both are known."""
    columns = ["County", "Measure", "Percent"]
    county = properties.get("county")
    if not county:
        return pd.DataFrame(columns=columns)

    rows = [
        (county, "Overall", properties.get("diabetesPercent")),
        (county, "Men", properties.get("menDiabetesPercent")),
        (county, "Women", properties.get("womenDiabetesPercent")),
    ]
    if properties.get("menObesePercent") and properties.get("womenObesePercent"):
        rows.append((county, "Obesity (Men)", properties["menObesePercent"]))
        rows.append((county, "Obesity (Women)", properties["womenObesePercent"]))
    return pd.DataFrame(rows, columns=columns)


def rank_states_for_year(collection: Dict[str, Any], year: int) -> pd.DataFrame:
    """All states with a value for `year`, sorted by prevalence, highest first."""
    rows = []
    for feature in collection.get("features", []):
        properties = feature.get("properties") or {}
        value = state_value_for_year(properties, year)
        if value is not None:
            rows.append({"State": extract_state_name(properties), "Year": year, "Prevalence (%)": value})

    df = pd.DataFrame(rows, columns=["State", "Year", "Prevalence (%)"])
    return df.sort_values("Prevalence (%)", ascending=False, kind="stable").reset_index(drop=True)
