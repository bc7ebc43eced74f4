import logging

import numpy as np
import pandas as pd

from shared.data_access import StemEthnicitySchema
from shared.parse_utils import parse_count_column, parse_year_range, format_year_range, safe_ratio

logger = logging.getLogger(__name__)

ETHNICITY_CATEGORIES = [
    "White",
    "Black",
    "Hispanic",
    "Asian",
    "Pacific Islander",
    "American Indian/Alaska Native",
    "Two or more races",
    "Nonresident alien",
]

COL_START_YEAR = "start_year"

INCREASE = "increase"
DECREASE = "decrease"

PROPORTION_TOLERANCE = 1e-9


def compute_ethnicity_proportions(df, categories=ETHNICITY_CATEGORIES):
    """
    Each ethnicity's share of the year's STEM graduates.

    Args:
        df (DataFrame): Year ("2011-2012"), Total, and one count column per category
        categories (list): category columns to use

    Returns:
        DataFrame: start_year (int) and one proportion (0..1) column per category, sorted by year

    Raises:
        DataParseError: bad year labels or count strings
        UndefinedRatioError: a year with a total of 0
        ValueError: missing columns, or proportions outside [0, 1] / summing above 1
    """
    missing = [col for col in categories if col not in df.columns]
    if missing:
        raise ValueError(f"STEM ethnicity dataset is missing category columns: {missing}")

    start_years = df[StemEthnicitySchema.COL_YEAR].map(parse_year_range)
    totals = parse_count_column(df[StemEthnicitySchema.COL_TOTAL])

    proportions = pd.DataFrame({COL_START_YEAR: start_years.astype(int)})
    for category in categories:
        counts = parse_count_column(df[category])
        proportions[category] = safe_ratio(counts, totals)

    values = proportions[categories]
    out_of_range = (values < 0) | (values > 1 + PROPORTION_TOLERANCE)
    if out_of_range.any().any():
        bad_years = proportions.loc[out_of_range.any(axis=1), COL_START_YEAR].tolist()
        raise ValueError(f"Proportions outside [0, 1] for years starting {bad_years}")

    row_sums = values.sum(axis=1)
    if (row_sums > 1 + PROPORTION_TOLERANCE).any():
        bad_years = proportions.loc[row_sums > 1 + PROPORTION_TOLERANCE, COL_START_YEAR].tolist()
        raise ValueError(f"Category counts exceed the total for years starting {bad_years}")

    if proportions[COL_START_YEAR].duplicated().any():
        raise ValueError("STEM ethnicity dataset has more than one row per year")

    logger.info("Ethnicity proportions: %s years x %s categories", proportions.shape[0], len(categories))
    return proportions.sort_values(COL_START_YEAR).reset_index(drop=True)


def flag_year_over_year(proportions, categories=ETHNICITY_CATEGORIES):
    """
    "increase" where a category's share went up from the previous year, "decrease" otherwise.
    The first year has nothing to compare to and gets None.
    """
    ordered = proportions.sort_values(COL_START_YEAR)
    values = ordered[categories]
    previous = values.shift(1)

    flags = pd.DataFrame(
        np.where(values > previous, INCREASE, DECREASE),
        index=values.index,
        columns=categories,
        dtype=object
    )
    flags[previous.isna() | values.isna()] = None
    return flags.reindex(proportions.index)


def build_ethnicity_table(proportions, categories=ETHNICITY_CATEGORIES):
    """
    Display table (Year label restored to "YYYY-YYYY") and the matching flags.

    Returns:
        (DataFrame, DataFrame): table indexed by Year label, flags with the same index/columns
    """
    ordered = proportions.sort_values(COL_START_YEAR).reset_index(drop=True)
    flags = flag_year_over_year(ordered, categories)

    year_labels = ordered[COL_START_YEAR].map(format_year_range)

    table = ordered[categories].copy()
    table.index = pd.Index(year_labels, name=StemEthnicitySchema.COL_YEAR)
    flags.index = table.index
    return table, flags
