import streamlit as st
import os
import pandera.errors
from typing import Any, Dict, List, Optional

from config import MERGED_STATES_PATH
from pipeline import build_county_collection, build_national_table, build_state_collection
from sources import DataSourceError, read_geojson

# Streamlit does not cache a call that raises, so the cached loaders below
# raise on failure and the public getters turn that into st.error + None.


@st.cache_data(show_spinner=False)
def _load_state_collection() -> Dict[str, Any]:
    if os.path.exists(MERGED_STATES_PATH):
        return read_geojson(MERGED_STATES_PATH)

    print(f"{MERGED_STATES_PATH} not found, merging state data on the fly...")
    collection, report = build_state_collection()
    for line in report.summary_lines():
        print(line)
    return collection


@st.cache_data(show_spinner=False)
def _load_national_table() -> List[Dict[str, str]]:
    return build_national_table()


@st.cache_data(show_spinner=False)
def _load_county_collection() -> Dict[str, Any]:
    collection, report = build_county_collection()
    for line in report.summary_lines():
        print(line)
    return collection


def get_state_collection() -> Optional[Dict[str, Any]]:
    """
    Loads the merged state collection written by build_merged_states.py.
    If the build has not been run, the raw inputs are merged here instead.
    """
    try:
        return _load_state_collection()
    except DataSourceError as e:
        st.error(f"Error Loading State Data: {e}")
        return None


def get_national_table() -> Optional[List[Dict[str, str]]]:
    """Loads the national prevalence-by-year table. Cached as it never changes."""
    try:
        return _load_national_table()
    except (DataSourceError, pandera.errors.SchemaError) as e:
        st.error(f"Error loading national data: {e}")
        return None


def get_county_collection() -> Optional[Dict[str, Any]]:
    """
    Loads county boundaries and statistics and merges them by FIPS code.
    Only called once the county view is first opened.
    """
    with st.spinner("Loading county data..."):
        try:
            return _load_county_collection()
        except (DataSourceError, pandera.errors.SchemaError) as e:
            st.error(f"Error loading county data: {e}")
            return None


def clear_caches() -> None:
    for loader in (_load_state_collection, _load_national_table, _load_county_collection):
        loader.clear()
