# -*- coding: utf-8 -*-
"""
This module contains the UI components for the Streamlit application.
"""
import streamlit as st
from typing import List, Optional, Tuple

from config import COUNTY_DATA_YEAR, DEFAULT_YEAR
from national_stats import Selection

VIEW_LABELS = {"State": "state", "County": "county"}


def setup_page_config():
    """Sets the Streamlit page configuration."""
    st.set_page_config(
        page_title="U.S. Diabetes Prevalence",
        page_icon="🗺️",
        layout="wide",
    )


def display_header_and_about():
    """Displays the main title and the 'About' expander."""
    st.title("U.S. Diabetes Prevalence")
    st.markdown(
        "Explore the share of adults diagnosed with diabetes across the United States, "
        "by state over time or by county."
    )
    with st.expander("About the Data"):
        st.markdown(
            f"""
            - **State view:** age-adjusted prevalence for each reporting year. Move the slider to change the year.
            - **County view:** average of the men's and women's prevalence for {COUNTY_DATA_YEAR}, the only year available.
            - States without published figures are shown with a placeholder series.
            """
        )


def default_year(years: List[int]) -> int:
    if not years or DEFAULT_YEAR in years:
        return DEFAULT_YEAR
    return years[-1]


def display_sidebar(years: List[int]) -> Selection:
    """
    Renders the sidebar controls.

    Args:
        years (list): The reporting years available in the state data.

    Returns:
        Selection: The view and year to display.
    """
    with st.sidebar:
        st.header("Map Controls")

        view_label = st.radio("View:", options=list(VIEW_LABELS), horizontal=True, key="view_radio")
        view = VIEW_LABELS[view_label]

        year = default_year(years)
        if view == "state" and len(years) > 1:
            year = st.select_slider("Year:", options=years, value=year, key="year_slider")
        elif view == "county":
            st.caption(f"County data: {COUNTY_DATA_YEAR}")

        return Selection(view=view, year=year)


def display_national_stats(summary: Optional[Tuple[str, str]], selection: Selection):
    """Renders the national statistics panel."""
    title = "National Statistics"
    if selection.view == "county":
        title += f" (County data: {COUNTY_DATA_YEAR})"
    st.subheader(title)

    if summary is None:
        st.info("National statistics are not available for this selection.")
        return

    rate, value_range = summary
    col1, col2 = st.columns(2)
    col1.metric("Average prevalence", rate)
    col2.metric("Range", value_range)
