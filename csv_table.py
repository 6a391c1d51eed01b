# csv_table.py
"""
Parsing of the small comma-delimited tables (county statistics and the
national yearly series) into header-keyed records.

The tables are split on plain commas: there is no quoting or escaping, and
every value is kept exactly as written ("NA", "" and so on stay strings).
"""

from typing import Dict, List

import pandas as pd


def read_csv_frame(text: str) -> pd.DataFrame:
    """
    Reads a comma-delimited table into a DataFrame of raw strings.

    The first line names the columns and blank lines are skipped. A row with
    fewer fields than the header leaves the trailing columns missing (NaN),
    and fields beyond the last header are ignored.
    """
    lines = pd.Series(text.splitlines(), dtype=object)
    if lines.empty:
        return pd.DataFrame()

    headers = lines.iloc[0].split(",")
    rows = lines.iloc[1:]
    rows = rows[rows.str.strip() != ""]
    if rows.empty:
        return pd.DataFrame(columns=headers, dtype=object)

    fields = rows.str.split(",", expand=True)
    fields = fields.reindex(columns=range(len(headers))).astype(object)
    fields.columns = headers
    return fields.reset_index(drop=True)


def frame_to_records(df: pd.DataFrame) -> List[Dict[str, str]]:
    """Converts a frame to records, leaving missing fields out of each record."""
    return [
        {column: value for column, value in row.items() if pd.notna(value)}
        for row in df.to_dict(orient="records")
    ]


def parse_csv(text: str) -> List[Dict[str, str]]:
    """Parses a comma-delimited table into a list of {header: raw value} records."""
    return frame_to_records(read_csv_frame(text))
