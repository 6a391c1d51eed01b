# -*- coding: utf-8 -*-
import streamlit as st

# --- Custom Modules ---
from data_loader import get_state_collection, get_national_table, get_county_collection
from map_view import display_map, display_name
from national_stats import Selection, available_years, national_summary
from plotting import plot_state_trend, state_detail_table, county_detail_table, rank_states_for_year
from ui import setup_page_config, display_header_and_about, display_sidebar, display_national_stats


def main() -> None:
    """Main function to run the Streamlit application."""
    setup_page_config()
    display_header_and_about()

    state_collection = get_state_collection()
    years = available_years(state_collection) if state_collection is not None else []
    selection = display_sidebar(years)

    national_table = get_national_table()
    county_collection = get_county_collection() if selection.view == "county" else None
    collection = state_collection if selection.view == "state" else county_collection

    map_col, info_col = st.columns([3, 2])
    with map_col:
        clicked_index = display_map(collection, selection)
    with info_col:
        county_features = county_collection["features"] if county_collection is not None else None
        display_national_stats(national_summary(selection, national_table, county_features), selection)
        if collection is not None:
            handle_detail_panel(collection, selection, clicked_index)

    st.markdown("---")
    st.markdown("Data Source: [CDC Diabetes Surveillance System](https://www.cdc.gov/diabetes/data/)")


def handle_detail_panel(collection, selection: Selection, clicked_index=None):
    """
    Handles the per-region details shown beside the map. A region clicked on
    the map becomes the selected entry.
    """
    properties_by_index = [feature.get("properties") or {} for feature in collection["features"]]
    labels = [display_name(properties, selection.view) for properties in properties_by_index]
    options = [None] + sorted(range(len(labels)), key=lambda i: labels[i])
    if clicked_index is not None and not 0 <= clicked_index < len(labels):
        clicked_index = None

    choice = st.selectbox(
        f"Explore a {selection.view}:",
        options=options,
        index=options.index(clicked_index),
        format_func=lambda i: "All" if i is None else labels[i],
        key=f"{selection.view}_selectbox_{clicked_index}",
    )

    if selection.view == "state":
        if choice is None:
            st.caption(f"All States ({selection.year}), sorted by diabetes prevalence")
            st.dataframe(rank_states_for_year(collection, selection.year), hide_index=True)
        else:
            properties = properties_by_index[choice]
            st.plotly_chart(plot_state_trend(properties, selection.year))
            st.dataframe(state_detail_table(properties, selection.year), hide_index=True)
    elif choice is None:
        st.caption("Select a county to see its diabetes and obesity statistics.")
    else:
        table = county_detail_table(properties_by_index[choice])
        if table.empty:
            st.info("No diabetes statistics for this county.")
        else:
            st.dataframe(table, hide_index=True)


if __name__ == "__main__":
    main()
