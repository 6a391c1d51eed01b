# keys.py
"""Join-key helpers shared by the state and county mergers."""

from typing import Any

from config import CENSUS_COUNTY_PREFIX, FIPS_WIDTH


def normalize_key(key: Any) -> str:
    """Trims and lowercases a key. Only used for comparisons, never stored."""
    return str(key).strip().lower()


def derive_fips(geo_identifier: Any) -> str:
    """
    Derives a county FIPS code from a GEOID / GEO_ID property.

    Census-style identifiers ("0500000US01001") lose their 9-character
    summary-level prefix; anything else is returned as-is. Malformed
    identifiers are not rejected here, they simply fail to match later.
    """
    if geo_identifier is None:
        return ""
    geo_identifier = str(geo_identifier)
    if geo_identifier.startswith(CENSUS_COUNTY_PREFIX):
        return geo_identifier[len(CENSUS_COUNTY_PREFIX):]
    return geo_identifier


def pad_fips(code: Any) -> str:
    """Zero-pads a FIPS code to 5 characters. Missing codes become ""."""
    if code is None:
        return ""
    code = str(code).strip()
    return code.zfill(FIPS_WIDTH) if code else ""
