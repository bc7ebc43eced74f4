"""Shared pytest fixtures: small in-memory versions of the three datasets."""

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def majors_df():
    """Six majors covering the cases the category summaries have to handle.

    - Two Engineering majors (one matches the 90,000 / 6,000 worked example)
    - One complete Education major and one with no median earnings
    - One Arts major whose labor force is larger than its graduate count
    - One major with no category
    """
    return pd.DataFrame({
        "Major": ["CHEMICAL ENGINEERING", "MINING ENGINEERING", "ELEMENTARY EDUCATION",
                  "SPECIAL NEEDS EDUCATION", "FINE ARTS", "UNLISTED"],
        "Major_category": ["Engineering", "Engineering", "Education",
                           "Education", "Arts", np.nan],
        "Total": [100000, 12000, 50000, 1500, 5000, 200],
        "Men": [80000, 9000, 10000, 500, 2000, 100],
        "Women": [20000, 3000, 40000, 1000, 3000, 100],
        "ShareWomen": [0.2, 0.25, 0.8, 0.666667, 0.6, 0.5],
        "Employed": [90000, 9000, 40000, 1000, 5000, 100],
        "Unemployed": [6000, 1000, 2000, 100, 500, 10],
        "Unemployment_rate": [0.0625, 0.1, 2000 / 42000, 100 / 1100, 500 / 5500, 10 / 110],
        "Median": [60000, 50000, 32000, np.nan, 30000, 40000],
    })


@pytest.fixture
def degrees_wide_df():
    """Wide degrees-by-field table: 12 fields plus the uncategorized row."""
    rows = [
        ("Business", "100,000", "200,000", "400,000"),
        ("Education", "176,307", "108,074", "110,807"),
        ("Health", "25,223", "63,665", "59,875"),
        ("Psychology", "33,679", "41,068", "58,655"),
        ("Engineering", "44,772", "63,642", "62,448"),
        ("Biology", "35,705", "43,078", "39,482"),
        ("Arts", "30,394", "40,479", "42,186"),
        ("Communication", "10,324", "29,428", "51,650"),
        ("English", "63,914", "31,922", "51,064"),
        ("Computer science", np.nan, "15,121", "25,159"),
        ("Mathematics", "24,801", "11,078", "14,393"),
        ("Physical sciences", "21,412", "23,407", "16,334"),
        ("Other and not classified", "900,000", "900,000", "900,000"),
    ]
    return pd.DataFrame(rows, columns=["Field of study", "X1970-71", "X1980-81", "X1990-91"])


@pytest.fixture
def ethnicity_df():
    """Three academic years, deliberately out of order, with three groups."""
    return pd.DataFrame({
        "Year": ["2012-2013", "2011-2012", "2013-2014"],
        "Total": ["1,000", "800", "1,200"],
        "White": ["600", "500", "690"],
        "Black": ["100", "60", "130"],
        "Hispanic": ["150", "100", "200"],
    })


@pytest.fixture
def ethnicity_categories():
    return ["White", "Black", "Hispanic"]
