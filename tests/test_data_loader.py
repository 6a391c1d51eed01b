# -*- coding: utf-8 -*-
import json
import pytest
from unittest.mock import patch

import data_loader
from data_loader import clear_caches, get_county_collection, get_national_table, get_state_collection
from sources import DataSourceError
from county_merger import CountyMergeReport
from state_merger import StateMergeReport

MERGED = {
    "type": "FeatureCollection",
    "features": [
        {"type": "Feature", "geometry": None, "properties": {"NAME": "Alabama", "diabetes": [{"year": 2020, "value": 14.1}]}},
    ],
}


@pytest.fixture(autouse=True)
def fresh_caches():
    clear_caches()
    yield
    clear_caches()


def test_state_collection_prefers_merged_file(tmp_path):
    merged_path = tmp_path / "merged_diabetes_states.geojson"
    merged_path.write_text(json.dumps(MERGED), encoding="utf-8")

    with patch.object(data_loader, "MERGED_STATES_PATH", str(merged_path)), \
         patch("data_loader.build_state_collection") as mock_build:
        assert get_state_collection() == MERGED
        assert not mock_build.called


def test_state_collection_merges_when_build_not_run(tmp_path):
    with patch.object(data_loader, "MERGED_STATES_PATH", str(tmp_path / "missing.geojson")), \
         patch("data_loader.build_state_collection", return_value=(MERGED, StateMergeReport())) as mock_build:
        assert get_state_collection() == MERGED
        assert mock_build.called


def test_county_collection_load_failure_reports_error():
    with patch("data_loader.build_county_collection", side_effect=DataSourceError("offline")), \
         patch("data_loader.st.error") as mock_error:
        assert get_county_collection() is None
        assert "offline" in mock_error.call_args.args[0]


def test_national_table_is_parsed():
    csv_text = "Year,Percentage,LowerLimit,UpperLimit\n2020,10.1,9.8,10.4\n"
    with patch("pipeline.read_text", return_value=csv_text):
        table = get_national_table()
    assert table == [{"Year": "2020", "Percentage": "10.1", "LowerLimit": "9.8", "UpperLimit": "10.4"}]


def test_failed_load_is_retried_on_next_call():
    csv_text = "Year,Percentage,LowerLimit,UpperLimit\n2020,10.1,9.8,10.4\n"
    with patch("pipeline.read_text", side_effect=DataSourceError("timeout")), \
         patch("data_loader.st.error") as mock_error:
        assert get_national_table() is None
        assert mock_error.called

    with patch("pipeline.read_text", return_value=csv_text):
        table = get_national_table()
    assert table == [{"Year": "2020", "Percentage": "10.1", "LowerLimit": "9.8", "UpperLimit": "10.4"}]


def test_failed_county_load_is_not_cached():
    with patch("data_loader.build_county_collection", side_effect=DataSourceError("offline")), \
         patch("data_loader.st.error"):
        assert get_county_collection() is None

    with patch("data_loader.build_county_collection", return_value=(MERGED, CountyMergeReport())):
        assert get_county_collection() == MERGED
