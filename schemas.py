# schemas.py
"""Data validation schemas for the delimited input tables.

Values are kept as raw strings; the schemas only guarantee that the
columns the mergers read are present.
"""

import pandera.pandas as pa
from pandera.typing import Series


class CountyStatsSchema(pa.DataFrameModel):
    """Schema for the county diabetes/obesity statistics table."""
    fips: Series[str] = pa.Field(alias="FIPS.Codes", nullable=True)
    county: Series[str] = pa.Field(alias="County", nullable=True)
    state: Series[str] = pa.Field(alias="State", nullable=True)
    men_diabetes: Series[str] = pa.Field(alias="percent.men.diabetes", nullable=True)
    women_diabetes: Series[str] = pa.Field(alias="percent.women.diabetes", nullable=True)
    men_obese: Series[str] = pa.Field(alias="percent.men.obese", nullable=True)
    women_obese: Series[str] = pa.Field(alias="percent.women.obese", nullable=True)


class NationalYearSchema(pa.DataFrameModel):
    """Schema for the national prevalence-by-year table."""
    year: Series[str] = pa.Field(alias="Year", nullable=True)
    percentage: Series[str] = pa.Field(alias="Percentage", nullable=True)
    lower_limit: Series[str] = pa.Field(alias="LowerLimit", nullable=True)
    upper_limit: Series[str] = pa.Field(alias="UpperLimit", nullable=True)
