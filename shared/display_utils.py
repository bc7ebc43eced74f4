import pandas as pd
import streamlit as st

from shared.ethnicity_utils import INCREASE, DECREASE


# Helpers for displaying in streamlit -----

INCREASE_COLOR = "#d4efdf"
DECREASE_COLOR = "#fadbd8"

def bold_highlight(val):
    return "font-weight: bold; background-color: #fef9e7"

def change_highlight(flag):
    if flag == INCREASE:
        return f"background-color: {INCREASE_COLOR}"
    elif flag == DECREASE:
        return f"background-color: {DECREASE_COLOR}"
    return ""


def build_format_dict(df, percent_columns=None):
    """
    Picks a number format per column: fractions as percents, large numbers with
    thousands separators, the rest with one decimal.
    """
    percent_columns = percent_columns or []

    # Auto-detect percent columns
    autodetected_percent_columns = []
    autodetected_large_number_columns = []
    autodetected_normal_numeric_columns = []
    for col in df.columns:
        if not pd.api.types.is_numeric_dtype(df[col]):
            continue
        if col in percent_columns:
            continue
        col_max = df[col].max()
        col_min = df[col].min()

        if col_max <= 1.5 and col_min >= -1:
            autodetected_percent_columns.append(col)
        elif col_max > 1000 or col_min < -1000:
            autodetected_large_number_columns.append(col)
        else:
            autodetected_normal_numeric_columns.append(col)

    all_percent_columns = list(set(autodetected_percent_columns + list(percent_columns)))
    return {
        **{col: "{:.1%}" for col in all_percent_columns},
        **{col: "{:,.0f}" for col in autodetected_large_number_columns},
        **{col: "{:,.1f}" for col in autodetected_normal_numeric_columns}
    }


def style_table(df, percent_columns=None, highlight_columns=None):
    styled_df = df.style.format(build_format_dict(df, percent_columns))
    if highlight_columns:
        styled_df = styled_df.map(bold_highlight, subset=highlight_columns)
    return styled_df


def style_change_table(table, flags, percent_columns=None):
    """
    Formats proportions as percents (one decimal) and colors each cell by its
    year-over-year flag: green for an increase, red for a decrease.

    Args:
        table (DataFrame): proportions, 0..1
        flags (DataFrame): "increase" / "decrease" / None, same shape and labels as `table`
        percent_columns (list): columns to format as percents (default: all)

    Returns:
        Styler
    """
    if not flags.index.equals(table.index) or not flags.columns.equals(table.columns):
        raise ValueError("Flags must have the same rows and columns as the table")

    percent_columns = list(table.columns) if percent_columns is None else percent_columns
    styled_df = table.style.format({col: "{:.1%}" for col in percent_columns})

    cell_styles = flags.map(change_highlight)
    return styled_df.apply(lambda _: cell_styles, axis=None)


# Callable function
def display_streamlit_table(df, percent_columns=None, highlight_columns=None):
    st.dataframe(style_table(df, percent_columns, highlight_columns))
