# sources.py
"""
Input acquisition for the map data: local files or http(s) URLs.

Everything that can fail while reading an input is raised as a
DataSourceError so callers have a single thing to catch.
"""

import json
import os
import tempfile
from typing import Any, Dict

import requests

from config import REQUEST_TIMEOUT


class DataSourceError(Exception):
    """An input could not be read or is not the expected kind of document."""


def _is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def read_text(location: str) -> str:
    """Returns the text of a local file or a remote http(s) resource."""
    if _is_url(location):
        try:
            response = requests.get(location, timeout=REQUEST_TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            raise DataSourceError(
                f"Failed to download {location}: Server error ({e.response.status_code})."
            ) from e
        except requests.RequestException as e:
            raise DataSourceError(f"Failed to download {location}: {e}") from e
        return response.text

    try:
        with open(location, encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise DataSourceError(f"Could not read {location}: {e}") from e


def read_geojson(location: str) -> Dict[str, Any]:
    """Loads a GeoJSON FeatureCollection as plain dicts, geometry untouched."""
    text = read_text(location)
    try:
        collection = json.loads(text)
    except json.JSONDecodeError as e:
        raise DataSourceError(f"{location} is not valid JSON: {e}") from e

    if (
        not isinstance(collection, dict)
        or collection.get("type") != "FeatureCollection"
        or not isinstance(collection.get("features"), list)
    ):
        raise DataSourceError(f"{location} is not a GeoJSON FeatureCollection.")
    return collection


def write_geojson(collection: Dict[str, Any], path: str) -> None:
    """
    Writes a FeatureCollection as compact UTF-8 JSON.

    The file is written next to its destination and renamed into place, so
    a failed write never leaves a partial output behind.
    """
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(collection, f, ensure_ascii=False, separators=(",", ":"))
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
