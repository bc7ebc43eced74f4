import logging

import pandas as pd

from shared.data_access import MajorsSchema, DegreesByFieldSchema
from shared.parse_utils import parse_count_column, safe_ratio, strip_year_marker

logger = logging.getLogger(__name__)

UNCATEGORIZED_FIELD = "Other and not classified"
TOP_N_FIELDS = 10

COL_YEAR = "Year"
COL_GRADUATES = "Graduates"
COL_CUMULATIVE_GRADUATES = "Cumulative Graduates"
COL_EMPLOYMENT_RATE = "Employment_rate"

COL_GENDER = "Gender"
COL_SHARE = "Share"
COL_SHARE_MEN = "ShareMen"


## ---------------------------------------------
## Trend: degrees conferred over time
## ---------------------------------------------

def degrees_long_form(wide_df, marker=DegreesByFieldSchema.YEAR_MARKER,
                      uncategorized_field=UNCATEGORIZED_FIELD):
    """
    Turns the wide degrees-by-field table into one row per (field, year).

    Args:
        wide_df (DataFrame): one row per field, one column per year range (e.g. "X1970-71")
        marker           (str): prefix on the year columns
        uncategorized_field (str): row to drop before ranking

    Returns:
        DataFrame: field, Year (ordered categorical, file order), Graduates (float, NaN if blank)
    """
    field_col = DegreesByFieldSchema.COL_FIELD
    year_columns = [col for col in wide_df.columns if col != field_col and str(col).startswith(marker)]

    df = wide_df[wide_df[field_col] != uncategorized_field]

    long_df = df.melt(id_vars=field_col, value_vars=year_columns,
                      var_name=COL_YEAR, value_name=COL_GRADUATES)

    # Year labels keep the file's column order on the chart axis
    year_labels = [strip_year_marker(col, marker) for col in year_columns]
    long_df[COL_YEAR] = pd.Categorical(
        long_df[COL_YEAR].map(lambda label: strip_year_marker(label, marker)),
        categories=year_labels,
        ordered=True
    )
    long_df[COL_GRADUATES] = parse_count_column(long_df[COL_GRADUATES])
    return long_df


def rank_fields_by_total(long_df):
    """
    Cumulative graduates per field, largest first. Blank years count as zero.
    Ties go to the field name so the ranking doesn't depend on row order.
    """
    field_col = DegreesByFieldSchema.COL_FIELD
    totals = (long_df
                .assign(**{COL_GRADUATES: long_df[COL_GRADUATES].fillna(0)})
                .groupby(field_col, as_index=False)[COL_GRADUATES]
                .sum()
                .rename(columns={COL_GRADUATES: COL_CUMULATIVE_GRADUATES}))

    totals = totals.sort_values([COL_CUMULATIVE_GRADUATES, field_col],
                                ascending=[False, True],
                                kind="mergesort")
    return totals.reset_index(drop=True)


def build_trend_table(wide_df, top_n=TOP_N_FIELDS):
    """
    Long-form series for the top `top_n` fields, ordered by rank then year.
    """
    field_col = DegreesByFieldSchema.COL_FIELD
    long_df = degrees_long_form(wide_df)

    top_fields = rank_fields_by_total(long_df).head(top_n)[field_col].tolist()
    field_order = {field: rank for rank, field in enumerate(top_fields)}

    trend_df = long_df[long_df[field_col].isin(top_fields)].copy()
    trend_df["rank"] = trend_df[field_col].map(field_order)
    trend_df = trend_df.sort_values(["rank", COL_YEAR]).drop(columns="rank")

    logger.info("Trend table: kept %s of %s fields", len(top_fields), long_df[field_col].nunique())
    return trend_df.reset_index(drop=True)


## ---------------------------------------------
## Earnings and employment by major category
## ---------------------------------------------

def add_employment_rate(df):
    """
    Employment rate (in %, one decimal) = Employed / (Employed + Unemployed).

    A major with nobody in the labor force has no rate (NaN), so summaries that
    need the rate leave it out.
    """
    out = df.copy()
    labor_force = out[MajorsSchema.COL_EMPLOYED] + out[MajorsSchema.COL_UNEMPLOYED]

    empty_labor_force = labor_force == 0
    if empty_labor_force.any():
        logger.warning("%s majors have Employed + Unemployed == 0; their employment rate is undefined",
                       empty_labor_force.sum())
    labor_force = labor_force.mask(empty_labor_force)

    rate = safe_ratio(out[MajorsSchema.COL_EMPLOYED], labor_force) * 100
    out[COL_EMPLOYMENT_RATE] = rate.round(1)
    return out


def summarize_earnings_by_category(df):
    """
    One row per major category, for the earnings vs. employment bubble chart.

    Aggregations:
        - Employment rate: mean of the majors' rates (not re-weighted by size)
        - Total: sum
        - Median earnings: mean of the majors' medians
        - Unemployment rate: mean, x100 to be a percent

    Returns:
        DataFrame: Major_category, Median, Employment_rate, Unemployment_rate, Total
    """
    required_columns = [MajorsSchema.COL_TOTAL, MajorsSchema.COL_CATEGORY, MajorsSchema.COL_MEDIAN,
                        COL_EMPLOYMENT_RATE, MajorsSchema.COL_UNEMPLOYMENT_RATE]

    majors_df = add_employment_rate(df).dropna(subset=required_columns)

    # Majors whose labor force is larger than the number of graduates are bad rows
    labor_force = majors_df[MajorsSchema.COL_EMPLOYED] + majors_df[MajorsSchema.COL_UNEMPLOYED]
    inconsistent = labor_force > majors_df[MajorsSchema.COL_TOTAL]
    if inconsistent.any():
        logger.warning("Excluding %s majors where Employed + Unemployed > Total: %s",
                       inconsistent.sum(), majors_df.loc[inconsistent, MajorsSchema.COL_MAJOR].tolist())
    majors_df = majors_df[~inconsistent]

    logger.info("Earnings summary: using %s of %s majors", majors_df.shape[0], df.shape[0])

    summary = majors_df.groupby(MajorsSchema.COL_CATEGORY, as_index=False).agg(**{
        MajorsSchema.COL_MEDIAN: (MajorsSchema.COL_MEDIAN, "mean"),
        COL_EMPLOYMENT_RATE: (COL_EMPLOYMENT_RATE, "mean"),
        MajorsSchema.COL_UNEMPLOYMENT_RATE: (MajorsSchema.COL_UNEMPLOYMENT_RATE, "mean"),
        MajorsSchema.COL_TOTAL: (MajorsSchema.COL_TOTAL, "sum"),
    })
    summary[MajorsSchema.COL_UNEMPLOYMENT_RATE] = summary[MajorsSchema.COL_UNEMPLOYMENT_RATE] * 100
    return summary


## ---------------------------------------------
## Gender by major category
## ---------------------------------------------

def summarize_gender_by_category(df):
    """
    Men, women and totals per major category with each gender's share (in %).
    Sorted by total ascending, which is the order a horizontal bar chart wants.
    """
    required_columns = [MajorsSchema.COL_CATEGORY, MajorsSchema.COL_MEN, MajorsSchema.COL_WOMEN,
                        MajorsSchema.COL_SHARE_WOMEN, MajorsSchema.COL_TOTAL]
    majors_df = df.dropna(subset=required_columns)
    logger.info("Gender summary: using %s of %s majors", majors_df.shape[0], df.shape[0])

    summary = (majors_df
                .groupby(MajorsSchema.COL_CATEGORY, as_index=False)[
                    [MajorsSchema.COL_MEN, MajorsSchema.COL_WOMEN, MajorsSchema.COL_TOTAL]]
                .sum())

    summary[MajorsSchema.COL_SHARE_WOMEN] = safe_ratio(summary[MajorsSchema.COL_WOMEN], summary[MajorsSchema.COL_TOTAL]) * 100
    summary[COL_SHARE_MEN] = safe_ratio(summary[MajorsSchema.COL_MEN], summary[MajorsSchema.COL_TOTAL]) * 100

    summary = summary.sort_values([MajorsSchema.COL_TOTAL, MajorsSchema.COL_CATEGORY], kind="mergesort")
    return summary.reset_index(drop=True)


def gender_long_form(summary):
    """
    One row per (category, gender), carrying that gender's count and share.
    Keeps the category order of `summary`.
    """
    category_col = MajorsSchema.COL_CATEGORY

    counts = summary.melt(
        id_vars=category_col,
        value_vars=[MajorsSchema.COL_MEN, MajorsSchema.COL_WOMEN],
        var_name=COL_GENDER,
        value_name=COL_GRADUATES
    )
    shares = summary[[category_col, COL_SHARE_MEN, MajorsSchema.COL_SHARE_WOMEN]].rename(
        columns={COL_SHARE_MEN: MajorsSchema.COL_MEN, MajorsSchema.COL_SHARE_WOMEN: MajorsSchema.COL_WOMEN}
    ).melt(
        id_vars=category_col,
        value_vars=[MajorsSchema.COL_MEN, MajorsSchema.COL_WOMEN],
        var_name=COL_GENDER,
        value_name=COL_SHARE
    )

    long_df = counts.merge(shares, on=[category_col, COL_GENDER], how="left")

    category_order = {category: i for i, category in enumerate(summary[category_col])}
    long_df["order"] = long_df[category_col].map(category_order)
    long_df = long_df.sort_values(["order", COL_GENDER]).drop(columns="order")
    return long_df.reset_index(drop=True)
