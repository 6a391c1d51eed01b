# formatting.py
"""Percentage parsing and formatting helpers."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

import pandas as pd

_ONE_PLACE = Decimal("0.1")


def parse_percent(raw: Any) -> Optional[float]:
    """Parses a raw table/property value into a float, or None if it is not numeric."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    value = pd.to_numeric(raw, errors="coerce")
    if pd.isna(value):
        return None
    return float(value)


def one_decimal(value: float) -> str:
    """
    Formats a number with exactly one decimal place.

    Rounds the exact binary value half-up, so 11.25 -> "11.3" while
    0.15 (stored as 0.1499...) -> "0.1".
    """
    quantized = Decimal(value).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
    return f"{quantized:.1f}"
