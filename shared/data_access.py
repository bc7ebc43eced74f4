import logging
from pathlib import Path

import pandas as pd
import streamlit as st

logger = logging.getLogger(__name__)


### Read CSV -----
def read_csv_from_folder(filepath, index_col=None, dtype=None):
    """
    Reads a CSV file from an internal file
    """

    # Go up two parents to get to the repo root (assume that this file is in /shared/data_access.py)
    data_filename = Path(__file__).parent.parent/filepath
    df = pd.read_csv(data_filename, index_col=index_col, dtype=dtype)
    logger.info("Read %s rows from %s", df.shape[0], filepath)
    return df


def require_columns(df, required_columns, dataset_name):
    missing = [col for col in required_columns if col not in df.columns]
    if missing:
        raise ValueError(f"{dataset_name} is missing required columns: {missing}. Found: {list(df.columns)}")
    return df


### Schemas -----------------

class MajorsSchema():
    FILEPATH = "data/recent_grads.csv"
    COL_RANK = "Rank"
    COL_MAJOR_CODE = "Major_code"
    COL_MAJOR = "Major"
    COL_TOTAL = "Total"
    COL_MEN = "Men"
    COL_WOMEN = "Women"
    COL_CATEGORY = "Major_category"
    COL_SHARE_WOMEN = "ShareWomen"
    COL_SAMPLE_SIZE = "Sample_size"
    COL_EMPLOYED = "Employed"
    COL_FULL_TIME = "Full_time"
    COL_PART_TIME = "Part_time"
    COL_FULL_TIME_YEAR_ROUND = "Full_time_year_round"
    COL_UNEMPLOYED = "Unemployed"
    COL_UNEMPLOYMENT_RATE = "Unemployment_rate"
    COL_MEDIAN = "Median"
    COL_P25 = "P25th"
    COL_P75 = "P75th"
    COL_COLLEGE_JOBS = "College_jobs"
    COL_NON_COLLEGE_JOBS = "Non_college_jobs"
    COL_LOW_WAGE_JOBS = "Low_wage_jobs"

    ALL_COLUMNS = [COL_RANK, COL_MAJOR_CODE, COL_MAJOR, COL_TOTAL, COL_MEN, COL_WOMEN, COL_CATEGORY,
                   COL_SHARE_WOMEN, COL_SAMPLE_SIZE, COL_EMPLOYED, COL_FULL_TIME, COL_PART_TIME,
                   COL_FULL_TIME_YEAR_ROUND, COL_UNEMPLOYED, COL_UNEMPLOYMENT_RATE, COL_MEDIAN,
                   COL_P25, COL_P75, COL_COLLEGE_JOBS, COL_NON_COLLEGE_JOBS, COL_LOW_WAGE_JOBS]

class DegreesByFieldSchema():
    FILEPATH = "data/degrees_by_field.csv"
    COL_FIELD = "Field of study"
    YEAR_MARKER = "X"

class StemEthnicitySchema():
    FILEPATH = "data/stem_degrees_by_ethnicity.csv"
    COL_YEAR = "Year"
    COL_TOTAL = "Total"


### Loaders -----------------

@st.cache_data
def load_recent_grads():
    """
    Loads the main majors dataset (one row per detailed major).

    Returns:
        DataFrame: the 21 columns listed in MajorsSchema.ALL_COLUMNS
    """
    df = read_csv_from_folder(MajorsSchema.FILEPATH)
    return require_columns(df, MajorsSchema.ALL_COLUMNS, "Majors dataset")

@st.cache_data
def load_degrees_by_field():
    """
    Loads the wide time series of degrees conferred. Everything is read as text;
    the counts use thousands separators and are parsed by the trend pipeline.
    """
    df = read_csv_from_folder(DegreesByFieldSchema.FILEPATH, dtype=str)
    require_columns(df, [DegreesByFieldSchema.COL_FIELD], "Degrees by field dataset")

    year_columns = [col for col in df.columns if col.startswith(DegreesByFieldSchema.YEAR_MARKER)]
    if len(year_columns) == 0:
        raise ValueError(f"Degrees by field dataset has no year columns (expected a '{DegreesByFieldSchema.YEAR_MARKER}' prefix)")
    return df

@st.cache_data
def load_stem_ethnicity():
    df = read_csv_from_folder(StemEthnicitySchema.FILEPATH, dtype=str)
    return require_columns(df, [StemEthnicitySchema.COL_YEAR, StemEthnicitySchema.COL_TOTAL], "STEM ethnicity dataset")


### Checks -----------------

def check_major_records(df, tolerance=0.01):
    """
    Finds majors that break the dataset's own bookkeeping.

    Args:
        df (DataFrame): majors dataset
        tolerance (float): allowed relative gap between Men + Women and Total

    Returns:
        DataFrame: offending rows, with an "issue" column
    """
    gender_gap = (df[MajorsSchema.COL_MEN] + df[MajorsSchema.COL_WOMEN] - df[MajorsSchema.COL_TOTAL]).abs()
    gender_mismatch = gender_gap > tolerance * df[MajorsSchema.COL_TOTAL]

    labor_force = df[MajorsSchema.COL_EMPLOYED] + df[MajorsSchema.COL_UNEMPLOYED]
    labor_force_too_large = labor_force > df[MajorsSchema.COL_TOTAL]

    issues = df.loc[gender_mismatch | labor_force_too_large].copy()
    issues["issue"] = [
        "; ".join(label for label, flagged in [("Men + Women != Total", gender_flag),
                                               ("Employed + Unemployed > Total", labor_flag)] if flagged)
        for gender_flag, labor_flag in zip(gender_mismatch[issues.index], labor_force_too_large[issues.index])
    ]

    if not issues.empty:
        logger.warning("%s majors break the dataset's invariants", issues.shape[0])
    return issues
