import re

import numpy as np
import pandas as pd

# Whole, non-negative counts: comma grouping ("1,234,567") or plain digits
COUNT_PATTERN = r"^(\d{1,3}(,\d{3})+|\d+)$"
YEAR_RANGE_PATTERN = re.compile(r"^(\d{4})-(\d{4})$")


class DataParseError(ValueError):
    """Raised when a raw value can't be read as the number/label it should be."""


class UndefinedRatioError(ZeroDivisionError):
    """Raised when a share or rate would be divided by zero."""


### Numbers -----

def parse_count_column(series):
    """
    Parses a column of counts that may use thousands separators ("114,729").

    Blank or missing cells become NaN. Anything else that isn't a whole, non-negative
    number (a sign, a decimal part, stray characters) raises DataParseError. It is
    never silently turned into 0.

    Args:
        series (Series): raw values, strings or numbers

    Returns:
        Series: float values, same index
    """
    if pd.api.types.is_numeric_dtype(series):
        values = series.astype(float)
        present = values.dropna()
        bad_values = present[(present < 0) | (present % 1 != 0)]
        if not bad_values.empty:
            raise DataParseError(
                f"Column '{series.name}' has values that are not counts: {sorted(bad_values.unique().tolist())}"
            )
        return values

    raw = series.astype(object).map(lambda value: value.strip() if isinstance(value, str) else value)
    raw = raw.mask(raw == "")

    present = raw.dropna().astype(str)
    bad_values = present[~present.str.match(COUNT_PATTERN)]
    if not bad_values.empty:
        raise DataParseError(
            f"Column '{series.name}' has values that are not counts: {sorted(bad_values.unique().tolist())}"
        )

    cleaned = raw.map(lambda value: value.replace(",", "") if isinstance(value, str) else value)
    return pd.to_numeric(cleaned).astype(float)


def safe_ratio(numerator, denominator):
    """
    Divides element-wise, refusing to return inf for a zero denominator.
    """
    denominator_arr = np.asarray(denominator, dtype=float)
    if (denominator_arr == 0).any():
        raise UndefinedRatioError(
            f"Ratio is undefined: {int((denominator_arr == 0).sum())} zero denominator(s)"
        )
    return numerator / denominator


### Year labels -----

def strip_year_marker(label, marker="X"):
    """ "X1970-71" -> "1970-71" """
    label = str(label)
    if marker and label.startswith(marker):
        return label[len(marker):]
    return label


def parse_year_range(label):
    """
    Parses an academic year label like "2011-2012" and keeps the start year.
    """
    match = YEAR_RANGE_PATTERN.match(str(label).strip())
    if match is None:
        raise DataParseError(f"Year label '{label}' is not in YYYY-YYYY form")

    start_year, end_year = int(match.group(1)), int(match.group(2))
    if end_year != start_year + 1:
        raise DataParseError(f"Year label '{label}' does not span a single academic year")
    return start_year


def format_year_range(start_year):
    return f"{int(start_year)}-{int(start_year) + 1}"
