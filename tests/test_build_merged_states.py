import json

import pytest
from unittest.mock import patch

from build_merged_states import main


@pytest.fixture
def inputs(tmp_path):
    boundaries = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [-86.8, 32.8]}, "properties": {"NAME": "Alabama"}},
            {"type": "Feature", "geometry": {"type": "Point", "coordinates": [-107.5, 43.0]}, "properties": {"NAME": "Wyoming"}},
        ],
    }
    series = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": None, "properties": {
                "NAME": "ALABAMA", "diabetes": [{"year": 2000, "value": 7.1}, {"year": 2020, "value": 14.2}],
            }},
        ],
    }
    boundaries_path = tmp_path / "us_states_accurate.geojson"
    series_path = tmp_path / "diabetes_by_state_years.geojson"
    boundaries_path.write_text(json.dumps(boundaries), encoding="utf-8")
    series_path.write_text(json.dumps(series), encoding="utf-8")
    return str(boundaries_path), str(series_path), tmp_path / "merged_diabetes_states.geojson"


def test_build_writes_merged_states(inputs, capsys):
    boundaries_path, series_path, output_path = inputs
    main(boundaries_path, series_path, str(output_path))

    merged = json.loads(output_path.read_text(encoding="utf-8"))
    alabama, wyoming = merged["features"]
    assert alabama["properties"]["diabetes"] == [{"year": 2000, "value": 7.1}, {"year": 2020, "value": 14.2}]
    assert alabama["geometry"] == {"type": "Point", "coordinates": [-86.8, 32.8]}
    assert [p["year"] for p in wyoming["properties"]["diabetes"]] == [2000, 2005, 2010, 2015, 2020]

    out = capsys.readouterr().out
    assert "No diabetes data for state: Wyoming" in out
    assert "--- State Merge Build Complete ---" in out


def test_build_is_idempotent(inputs):
    boundaries_path, series_path, output_path = inputs
    main(boundaries_path, series_path, str(output_path))
    first = output_path.read_bytes()
    main(boundaries_path, series_path, str(output_path))
    assert output_path.read_bytes() == first


def test_build_fails_without_writing_output(inputs, capsys):
    boundaries_path, _, output_path = inputs
    with pytest.raises(SystemExit) as excinfo:
        main(boundaries_path, str(output_path.parent / "missing.geojson"), str(output_path))

    assert excinfo.value.code == 1
    assert not output_path.exists()
    assert "FATAL" in capsys.readouterr().out


def test_build_reports_write_failure(inputs, capsys):
    boundaries_path, series_path, output_path = inputs
    with patch("sources.os.replace", side_effect=PermissionError("read-only")), \
         pytest.raises(SystemExit) as excinfo:
        main(boundaries_path, series_path, str(output_path))

    assert excinfo.value.code == 1
    assert not output_path.exists()
    out = capsys.readouterr().out
    assert "FATAL: Could not write" in out
    assert "read-only" in out
