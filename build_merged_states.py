# build_merged_states.py
from config import MERGED_STATES_PATH, STATE_BOUNDARIES_PATH, STATE_SERIES_PATH
from pipeline import build_state_collection
from sources import DataSourceError, write_geojson


def main(
    boundaries_path: str = STATE_BOUNDARIES_PATH,
    series_path: str = STATE_SERIES_PATH,
    output_path: str = MERGED_STATES_PATH,
) -> None:
    """
    Merges the yearly diabetes series into the state boundaries and saves the
    result as the display file the map loads. Safe to re-run: the same inputs
    always produce the same output file.
    """
    print("--- Starting State Merge Build Process ---")
    print(f"Reading state boundaries from {boundaries_path}...")
    print(f"Reading diabetes series from {series_path}...")

    try:
        merged, report = build_state_collection(boundaries_path, series_path)
    except DataSourceError as e:
        print(f"--- FATAL: Could not load the input data. Aborting. ---\n  - {e}")
        exit(1)

    for line in report.summary_lines():
        print(line)

    try:
        write_geojson(merged, output_path)
    except OSError as e:
        print(f"--- FATAL: Could not write {output_path}. Aborting. ---\n  - {e}")
        exit(1)

    print("--- State Merge Build Complete ---")
    print(f"Merged data saved to {output_path}")
    print(f"Total states processed: {len(merged['features'])}")


if __name__ == "__main__":
    main()
